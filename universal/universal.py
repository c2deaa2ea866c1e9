from bs4 import BeautifulSoup


def parse_html(html, pre_filters=None):
    """Load raw page markup into a queryable tree.

    lxml is lenient: broken markup still yields a best-effort tree, so
    callers only ever have to cope with nodes being absent.
    """
    soup = BeautifulSoup(html, "lxml")
    if pre_filters:
        for pre_filter in pre_filters:
            pre_filter(soup)
    return soup


def first_match(node, finders):
    """Run finder functions in preference order, return the first hit.

    A finder takes a node and returns a node (or any value) or None.
    """
    for finder in finders:
        found = finder(node)
        if found is not None:
            return found
    return None


def script_filter(soup):
    for tag in soup.find_all(["script", "style", "noscript"]):
        tag.decompose()
