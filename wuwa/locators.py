"""Finder functions for the regions of a character page.

Every finder takes a node and returns the node it is looking for or None.
The *_FINDERS tuples hold the preference order: structural markers first,
positional rules after them. When the page layout moves, add a finder and
put it in front instead of editing the extractors.
"""
import wuwa.constants as constants
from universal.universal import first_match
from universal.utils import get_text, has_class, next_element_sibling


class SectionNotFound(Exception):
    pass


def tab_by_marker(soup):
    for tab in soup.select(constants.BUILDS_TAB):
        if tab.select_one(constants.BUILD_TIPS):
            return tab
    return None


def tab_by_position(soup):
    return soup.select_one(constants.BUILDS_TAB_SELECTOR)


SECTION_FINDERS = (tab_by_marker, tab_by_position)


def locate_builds_tab(soup, finders=SECTION_FINDERS):
    builds_tab = first_match(soup, finders)
    if builds_tab is None:
        raise SectionNotFound("Builds tab not found!")
    return builds_tab


def weapon_region(builds_tab):
    return builds_tab.select_one(constants.BUILD_TIPS)


def echo_region_by_marker(builds_tab):
    for region in builds_tab.select(constants.BUILD_TIPS):
        if region.select_one(constants.SET_ACCORDION):
            return region
    return None


def echo_region_by_position(builds_tab):
    regions = builds_tab.select(constants.BUILD_TIPS)
    if regions:
        return regions[-1]
    return None


ECHO_REGION_FINDERS = (echo_region_by_marker, echo_region_by_position)


def information_by_sibling(item):
    sibling = next_element_sibling(item)
    if has_class(sibling, constants.INFORMATION):
        return sibling
    return None


def information_by_parent(item):
    # Only for items wrapped on their own
    if item.parent is None or len(item.parent.select(constants.SINGLE_ITEM)) > 1:
        return None
    return item.parent.select_one("." + constants.INFORMATION)


INFORMATION_FINDERS = (information_by_sibling, information_by_parent)


def _content_headers(builds_tab, title=None):
    headers = builds_tab.select(constants.CONTENT_HEADER)
    if title is None:
        return headers
    return [h for h in headers if get_text(h).strip() == title]


def endgame_header_by_title(builds_tab):
    headers = _content_headers(builds_tab, constants.ENDGAME_TITLE)
    if headers:
        return headers[0]
    return None


def endgame_header_first(builds_tab):
    headers = _content_headers(builds_tab)
    if headers:
        return headers[0]
    return None


ENDGAME_HEADER_FINDERS = (endgame_header_by_title, endgame_header_first)


def enclosing_tab(node, default):
    if has_class(node, constants.TAB_INSIDE):
        return node
    tab = node.find_parent("div", class_=constants.TAB_INSIDE)
    if tab is None:
        return default
    return tab


def skill_header(builds_tab):
    headers = _content_headers(builds_tab, constants.SKILL_TITLE)
    if headers:
        return headers[0]
    return None


def skill_priority_container(header):
    return header.find_next_sibling(class_=constants.SKILL_PRIORITY)
