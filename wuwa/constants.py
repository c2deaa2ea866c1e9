import re

BASE_URL = "https://www.prydwen.gg/wuthering-waves/characters/"

# Build information lives in the 13th tab of the character page
BUILDS_TAB_SELECTOR = "div.tab-inside:nth-child(13)"
TAB_INSIDE = "tab-inside"
BUILDS_TAB = "div.tab-inside"
BUILD_TIPS = "div.build-tips"
SINGLE_ITEM = ".single-item"
PERCENTAGE = ".percentage p"

WEAPON_NAME = ".ww-weapon-name"
WEAPON_NAME_RE = re.compile(r"(.+)\(S(\d+)\)")

SET_ACCORDION = ".ww-set-accordion"
SET_NAME = ".ww-set-accordion .accordion-button"
INFORMATION = "information"
ECHO_NAME = "ul.ww-echo-list li .ww-echo-name"
ECHO_NAME_SEPARATOR = ", "

STATS_HEADING = "h6:has(+ .main-stats)"
STATS_BOX = ".box"
STATS_COST = ".stats-inside strong"
STATS_NAME = ".ww-stat > span"

SUBSTATS = ".sub-stats p"
SUBSTATS_LABEL = "Substats:"

CONTENT_HEADER = "div.content-header"
ENDGAME_TITLE = "Best Endgame Stats (Level 90)"
ENDGAME_LIST = "div.box.review.raw > ul"
ENDGAME_VALUE_RE = re.compile(r"<b>([\d\-+%]+)</b>")
CRIT_DMG = "CRIT DMG%"
ENERGY_REGEN = "Energy Regeneration"
DESCRIPTION = "description"

SKILL_TITLE = "Skill Priority"
SKILL_PRIORITY = "skill-priority"
SKILL_NAME = ".skill p"
