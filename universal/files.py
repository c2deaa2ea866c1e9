import os
import json

def char_replace(instr):
	for char in ['(', ')', '[', ']', ',', '/', "'", ":", ";", "&", ".", "#", "\u2019"]:
		instr = instr.replace(char, '')
	instr = instr.strip()
	instr = instr.replace(' ', '_')
	return instr.lower()

def makedirs(output, subdir=None):
	if not subdir:
		jsondir = os.path.abspath(output)
	else:
		jsondir = os.path.abspath(output + "/" + char_replace(subdir))
	if not os.path.exists(jsondir):
		os.makedirs(jsondir)
	return jsondir

def create_json_filename(jsondir, name):
	title = jsondir + "/" + char_replace(name) + ".json"
	return os.path.abspath(title)

def write_json(jsondir, name, struct):
	filename = create_json_filename(jsondir, name)
	with open(filename, 'w', encoding='utf-8') as fp:
		json.dump(struct, fp, indent=2, ensure_ascii=False)
	return filename
