"""Tests for the region finders in wuwa.locators."""

import pytest
from bs4 import BeautifulSoup

from universal.universal import first_match, parse_html
from wuwa.locators import (
    SectionNotFound,
    echo_region_by_marker,
    echo_region_by_position,
    enclosing_tab,
    endgame_header_by_title,
    endgame_header_first,
    information_by_parent,
    information_by_sibling,
    locate_builds_tab,
    skill_header,
    skill_priority_container,
    tab_by_marker,
    tab_by_position,
)


def tabs_page(builds, position=13, count=13):
    tabs = ['<div class="tab-inside"><p>Tab %d</p></div>' % i for i in range(1, count + 1)]
    if position:
        tabs[position - 1] = '<div class="tab-inside" id="builds">%s</div>' % builds
    return "<html><body><div class='tabs'>\n%s\n</div></body></html>" % "\n".join(tabs)


class TestTabByPosition:
    def test_thirteenth_tab(self):
        soup = parse_html(tabs_page("<p>Builds</p>"))
        assert tab_by_position(soup)["id"] == "builds"

    def test_too_few_tabs(self):
        soup = parse_html(tabs_page("<p>Builds</p>", position=5, count=12))
        assert tab_by_position(soup) is None

    def test_other_element_in_thirteenth_slot(self):
        html = "<div>%s<section class='tab-inside'></section></div>" % (
            "<div class='tab-inside'></div>" * 12)
        soup = parse_html(html)
        assert tab_by_position(soup) is None


class TestTabByMarker:
    def test_finds_tab_with_build_tips(self):
        soup = parse_html(tabs_page('<div class="build-tips"></div>', position=4))
        assert tab_by_marker(soup)["id"] == "builds"

    def test_no_build_tips(self):
        soup = parse_html(tabs_page("<p>nothing</p>"))
        assert tab_by_marker(soup) is None


class TestLocateBuildsTab:
    def test_marker_preferred_over_position(self):
        builds = '<div class="build-tips"></div>'
        html = tabs_page("<p>wrong</p>").replace("<p>Tab 2</p>", builds)
        soup = parse_html(html)
        tab = locate_builds_tab(soup)
        assert tab.select_one(".build-tips") is not None

    def test_positional_fallback(self):
        soup = parse_html(tabs_page("<p>Builds</p>"))
        assert locate_builds_tab(soup)["id"] == "builds"

    def test_custom_finder_order(self):
        builds = '<div class="build-tips"></div>'
        html = tabs_page("<p>thirteen</p>").replace("<p>Tab 2</p>", builds)
        soup = parse_html(html)
        tab = locate_builds_tab(soup, (tab_by_position, tab_by_marker))
        assert tab["id"] == "builds"

    def test_not_found_raises(self):
        soup = parse_html("<html><body><div class='tab-inside'></div></body></html>")
        with pytest.raises(SectionNotFound):
            locate_builds_tab(soup)

    def test_malformed_html_does_not_raise_while_loading(self):
        soup = parse_html("<div class='tab-inside'><p>unclosed <b>tags")
        with pytest.raises(SectionNotFound):
            locate_builds_tab(soup)


ECHO_REGIONS = """<div class="tab-inside">
<div class="build-tips" id="weapons"><div class="single-item"></div></div>
<div class="build-tips" id="sets"><div class="single-item">
  <div class="ww-set-accordion"></div></div></div>
<div class="build-tips" id="other"><div class="single-item"></div></div>
</div>"""


class TestEchoRegion:
    def setup_method(self):
        self.tab = BeautifulSoup(ECHO_REGIONS, "lxml").select_one(".tab-inside")

    def test_by_marker(self):
        assert echo_region_by_marker(self.tab)["id"] == "sets"

    def test_by_position(self):
        assert echo_region_by_position(self.tab)["id"] == "other"

    def test_by_marker_missing(self):
        tab = BeautifulSoup("<div><div class='build-tips'></div></div>", "lxml").div
        assert echo_region_by_marker(tab) is None
        assert first_match(tab, (echo_region_by_marker, echo_region_by_position)) is not None

    def test_no_regions(self):
        tab = BeautifulSoup("<div></div>", "lxml").div
        assert echo_region_by_position(tab) is None


INFORMATION = """<div class="build-tips">
<div class="single-item" id="first"></div>
<div class="information" id="info-first"></div>
<div class="single-item" id="second"></div>
<div class="notes"></div>
</div>"""


class TestInformation:
    def setup_method(self):
        self.soup = BeautifulSoup(INFORMATION, "html.parser")

    def test_by_sibling(self):
        item = self.soup.find(id="first")
        assert information_by_sibling(item)["id"] == "info-first"

    def test_by_sibling_requires_immediate_sibling(self):
        item = self.soup.find(id="second")
        assert information_by_sibling(item) is None

    def test_by_parent_shared_parent(self):
        item = self.soup.find(id="second")
        assert information_by_parent(item) is None

    def test_by_parent_wrapped_item(self):
        soup = BeautifulSoup(
            '<div class="row"><div class="single-item"></div>'
            '<p></p><div class="information" id="info"></div></div>', "html.parser")
        item = soup.select_one(".single-item")
        assert information_by_parent(item)["id"] == "info"


HEADERS = """<div class="tab-inside" id="builds">
<div class="section"><div class="content-header">Best Weapons</div></div>
<div class="content-header">Skill Priority</div>
<div class="order"></div>
<div class="skill-priority" id="skills"></div>
<div class="content-header"> Best Endgame Stats (Level 90) </div>
</div>"""


class TestHeaders:
    def setup_method(self):
        self.tab = BeautifulSoup(HEADERS, "lxml").select_one(".tab-inside")

    def test_endgame_by_title(self):
        header = endgame_header_by_title(self.tab)
        assert header.get_text().strip() == "Best Endgame Stats (Level 90)"

    def test_endgame_first(self):
        assert endgame_header_first(self.tab).get_text() == "Best Weapons"

    def test_endgame_by_title_missing(self):
        tab = BeautifulSoup("<div><div class='content-header'>x</div></div>", "lxml").div
        assert endgame_header_by_title(tab) is None

    def test_enclosing_tab(self):
        header = endgame_header_first(self.tab)
        assert enclosing_tab(header, None)["id"] == "builds"

    def test_enclosing_tab_default(self):
        soup = BeautifulSoup("<div id='root'><div class='content-header'></div></div>", "lxml")
        header = soup.select_one(".content-header")
        assert enclosing_tab(header, soup.div)["id"] == "root"

    def test_skill_priority_container_skips_other_siblings(self):
        header = skill_header(self.tab)
        assert skill_priority_container(header)["id"] == "skills"


class TestFirstMatch:
    def test_returns_first_hit(self):
        assert first_match(1, (lambda n: None, lambda n: n + 1, lambda n: n + 2)) == 2

    def test_nothing_found(self):
        assert first_match(1, (lambda n: None,)) is None
