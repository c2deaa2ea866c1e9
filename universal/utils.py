import re
import warnings
from bs4 import NavigableString, Tag, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

COMMENT_RE = re.compile(r"<!--[\s\S]*?-->")
TAG_RE = re.compile(r"<[^>]+>")


def filter_entities(text):
	text = text.replace("\u00c2\u00ba", "\u00ba")
	text = text.replace("\u00c3\u0097", "\u00d7")
	text = text.replace("\u00e2\u0080\u0091", "\u2011")
	text = text.replace("\u00e2\u0080\u0093", "\u2013")
	text = text.replace("\u00e2\u0080\u0094", "\u2014")
	text = text.replace("\u00e2\u0080\u0098", "\u2018")
	text = text.replace("\u00e2\u0080\u0099", "\u2019")
	text = text.replace("\u00e2\u0080\u009c", "\u201c")
	text = text.replace("\u00e2\u0080\u009d", "\u201d")
	text = text.replace("\u00e2\u0080\u00a6", "\u2026")
	text = text.replace("\u00c2\u00a0", " ")
	text = text.replace("\u00a0", " ")
	return text


def recursive_filter_entities(struct):
	"""Normalize every string in a nested dict/list structure in place.

	Dict keys are filtered too, since endgame stat names come straight off
	the page. Key order is preserved.
	"""
	if isinstance(struct, dict):
		items = list(struct.items())
		struct.clear()
		for k, v in items:
			if isinstance(k, str):
				k = filter_entities(k)
			if isinstance(v, str):
				v = filter_entities(v)
			else:
				recursive_filter_entities(v)
			struct[k] = v
	elif isinstance(struct, list):
		for i, v in enumerate(struct):
			if isinstance(v, str):
				struct[i] = filter_entities(v)
			else:
				recursive_filter_entities(v)
	return struct


def strip_comments(text):
	return COMMENT_RE.sub("", text)


def strip_tags(text):
	return TAG_RE.sub("", text)


def has_name(tag, name):
	if hasattr(tag, 'name') and tag.name == name:
		return True
	return False


def has_class(tag, cssclass):
	if type(tag) != Tag:
		return False
	return cssclass in tag.get("class", [])


def get_text(detail):
	return ''.join(detail.find_all(string=True))


def direct_text(tag):
	"""Text of a tag's own text nodes, ignoring anything inside child tags.

	Comments are NavigableStrings too, so compare the exact type.
	"""
	return ''.join([str(c) for c in tag.children if type(c) == NavigableString])


def select_text(node, selector, direct=False):
	"""Concatenated, stripped text of every node matching selector.

	Returns an empty string when nothing matches.
	"""
	fxn = direct_text if direct else get_text
	return ''.join([fxn(n) for n in node.select(selector)]).strip()


def next_element_sibling(tag):
	sibling = tag.next_sibling
	while sibling is not None and type(sibling) != Tag:
		sibling = sibling.next_sibling
	return sibling
