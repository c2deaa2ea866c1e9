from html import unescape
import json
import sys
from urllib.parse import urlparse
import wuwa.constants as constants
from universal.fetch import fetch_page, FetchError, CharacterNotFound
from universal.files import makedirs, write_json
from universal.universal import parse_html, first_match, script_filter
from universal.utils import get_text, select_text
from universal.utils import strip_comments, strip_tags
from universal.utils import next_element_sibling, has_name
from universal.utils import recursive_filter_entities
from wuwa.locators import locate_builds_tab, SectionNotFound, SECTION_FINDERS
from wuwa.locators import weapon_region, ECHO_REGION_FINDERS
from wuwa.locators import INFORMATION_FINDERS, ENDGAME_HEADER_FINDERS
from wuwa.locators import enclosing_tab, skill_header, skill_priority_container
from wuwa.schema import validate_against_schema


def parse_build(identifier, options):
    url = character_url(identifier)
    character = character_name(identifier)
    if not options.stdout:
        sys.stderr.write("Fetching HTML from %s...\n" % url)
    try:
        html = fetch_page(url, timeout=options.timeout)
    except FetchError as e:
        fetch_error(character, e)
        return None
    if not options.stdout:
        sys.stderr.write("HTML fetched successfully.\n")
    try:
        struct = extract_build(
            html, skill_priority=options.skill_priority,
            verbose=not options.stdout)
    except SectionNotFound as e:
        sys.stderr.write("Error during extraction for %s:\n" % character)
        sys.stderr.write("   %s\n" % e)
        return None
    if not options.skip_schema:
        validate_against_schema(struct, "build.schema.json")
    if not options.dryrun:
        jsondir = makedirs(options.output)
        filename = write_json(jsondir, character, struct)
        sys.stderr.write("Data extracted and saved to %s\n" % filename)
    elif options.stdout:
        print(json.dumps(struct, indent=2, ensure_ascii=False))
    return struct


def fetch_error(character, e):
    sys.stderr.write("Error during extraction for %s:\n" % character)
    if isinstance(e, CharacterNotFound):
        sys.stderr.write(
            '  Character "%s" not found (404 error).\n' % character)
    elif e.status:
        sys.stderr.write("  Response status: %s\n" % e.status)
        sys.stderr.write("  Response data: %s\n" % e.body)
    else:
        sys.stderr.write("  %s\n" % e)


def character_url(identifier):
    if identifier.startswith(("http://", "https://")):
        return identifier
    return constants.BASE_URL + identifier


def character_name(identifier):
    if identifier.startswith(("http://", "https://")):
        path = urlparse(identifier).path
        parts = [p for p in path.split("/") if p]
        assert parts, "No character name in url: %s" % identifier
        return parts[-1]
    return identifier


def extract_build(html, skill_priority=True, section_finders=SECTION_FINDERS,
                  verbose=False):
    soup = parse_html(html, pre_filters=[script_filter])
    builds_tab = locate_builds_tab(soup, section_finders)
    if verbose:
        sys.stderr.write("Builds tab found.\n")
    struct = build_pass(builds_tab, skill_priority)
    recursive_filter_entities(struct)
    return struct


def build_pass(builds_tab, skill_priority=True):
    """Run every field extractor against the builds tab.

    Extractors never see each other's output. One that blows up is
    reported and leaves its field empty; the rest still run.
    """
    struct = {}
    for field, extractor, default in BUILD_FIELDS:
        if field == "skillPriority" and not skill_priority:
            continue
        try:
            struct[field] = extractor(builds_tab)
        except Exception as e:
            sys.stderr.write("Failed to extract %s: %r\n" % (field, e))
            struct[field] = default()
    return struct


def parse_weapon_name(text):
    m = constants.WEAPON_NAME_RE.search(text.strip())
    if not m:
        return "", ""
    return m.group(1).strip(), m.group(2)


def extract_weapon_builds(builds_tab):
    weapon_builds = []
    section = weapon_region(builds_tab)
    if section is None:
        sys.stderr.write("Weapons section not found.\n")
        return weapon_builds

    for item in section.select(constants.SINGLE_ITEM):
        percentage = select_text(item, constants.PERCENTAGE)
        name, duplicates = parse_weapon_name(
            select_text(item, constants.WEAPON_NAME))
        # Items without a (S<n>) refinement suffix are dropped
        if name and duplicates:
            weapon_builds.append({
                "name": name,
                "duplicates": duplicates,
                "percentage": percentage,
            })
    return weapon_builds


def extract_echo_names(item, finders=INFORMATION_FINDERS):
    information = first_match(item, finders)
    if information is None:
        return ""
    names = [get_text(n).strip() for n in information.select(constants.ECHO_NAME)]
    return constants.ECHO_NAME_SEPARATOR.join(names)


def extract_echo_set_builds(builds_tab, finders=ECHO_REGION_FINDERS):
    echo_set_builds = []
    section = first_match(builds_tab, finders)
    if section is None:
        sys.stderr.write("Echo Sets section not found.\n")
        return echo_set_builds

    for item in section.select(constants.SINGLE_ITEM):
        percentage = select_text(item, constants.PERCENTAGE)
        # Only the button's own text; nested icons and badges carry their own
        set_name = select_text(item, constants.SET_NAME, direct=True)
        echo_name = extract_echo_names(item)
        if percentage or set_name or echo_name:
            echo_set_builds.append({
                "percentage": percentage,
                "setName": set_name,
                "echoName": echo_name,
            })
    return echo_set_builds


def extract_echo_stats(builds_tab):
    echo_stats = []
    headings = builds_tab.select(constants.STATS_HEADING)
    if not headings:
        sys.stderr.write("Echo Stats section not found.\n")
        return echo_stats

    for heading in headings:
        stats = {}
        main_stats = next_element_sibling(heading)
        for box in main_stats.select(constants.STATS_BOX):
            cost = select_text(box, constants.STATS_COST)
            names = [get_text(s).strip() for s in box.select(constants.STATS_NAME)]
            stats.setdefault(cost, []).extend(names)
        echo_stats.append({
            "distribution": get_text(heading).strip(),
            "stats": stats,
        })
    return echo_stats


def extract_substat_priority(builds_tab):
    paragraphs = builds_tab.select(constants.SUBSTATS)
    if not paragraphs:
        sys.stderr.write("Substat priority section not found.\n")
        return ""
    text = ''.join([get_text(p) for p in paragraphs])
    return text.replace(constants.SUBSTATS_LABEL, "", 1).strip()


def _bold_value(text):
    m = constants.ENDGAME_VALUE_RE.search(text)
    if m:
        return m.group(1)
    return ""


def _stat_description(p):
    ul = next_element_sibling(p)
    if not has_name(ul, "ul"):
        return None
    description = ul.select_one("li p")
    if description is None:
        return None
    return get_text(description).strip()


def parse_endgame_stat(p):
    """Classify one endgame stat paragraph.

    Returns (name, value, description); name and value are empty when the
    paragraph is not a stat line.
    """
    text = strip_comments(p.decode_contents()).strip()
    name = ""
    value = ""
    description = None
    if constants.CRIT_DMG in text:
        name = constants.CRIT_DMG
        value = _bold_value(text)
    elif constants.ENERGY_REGEN in text:
        name = constants.ENERGY_REGEN
        value = _bold_value(text)
        if value:
            description = _stat_description(p)
    elif ":" in text:
        parts = text.split(":")
        if len(parts) == 2:
            name = unescape(strip_tags(parts[0])).strip()
            value = unescape(strip_tags(parts[1])).strip()
    return name, value, description


def extract_endgame_stats(builds_tab, finders=ENDGAME_HEADER_FINDERS):
    endgame_stats = {}
    header = first_match(builds_tab, finders)
    if header is None:
        sys.stderr.write("Endgame stats section not found.\n")
        return endgame_stats

    container = enclosing_tab(header, builds_tab)
    lists = container.select(constants.ENDGAME_LIST)
    if not lists:
        sys.stderr.write("Endgame stats list not found.\n")
        return endgame_stats

    for ul in lists:
        # Nested lists hold descriptions, not stats
        for li in ul.find_all("li", recursive=False):
            p = li.find("p", recursive=False)
            if p is None:
                continue
            name, value, description = parse_endgame_stat(p)
            if name and value:
                endgame_stats[name] = value
            if description is not None:
                endgame_stats[constants.DESCRIPTION] = description
    return endgame_stats


def extract_skill_priority(builds_tab):
    skill_priority = []
    header = skill_header(builds_tab)
    if header is None:
        sys.stderr.write("Skill Priority section not found.\n")
        return skill_priority

    container = skill_priority_container(header)
    if container is None:
        return skill_priority
    for skill in container.select(constants.SKILL_NAME):
        skill_priority.append(get_text(skill).strip())
    return skill_priority


# Output key, extractor, empty default
BUILD_FIELDS = [
    ("weaponBuilds", extract_weapon_builds, list),
    ("echoSetBuilds", extract_echo_set_builds, list),
    ("echoStats", extract_echo_stats, list),
    ("substatPriority", extract_substat_priority, str),
    ("endgameStats", extract_endgame_stats, dict),
    ("skillPriority", extract_skill_priority, list),
]
