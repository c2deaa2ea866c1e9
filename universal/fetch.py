import requests

USER_AGENT = "wuwa-builds/0.1 (character build extractor)"


class FetchError(Exception):
    def __init__(self, url, message, status=None, body=None):
        super().__init__(message)
        self.url = url
        self.status = status
        self.body = body


class CharacterNotFound(FetchError):
    pass


def get_session():
    session = requests.Session()
    session.headers.update({'User-Agent': USER_AGENT})
    return session


def fetch_page(url, timeout=30, session=None):
    """Download a single page and return its markup as text.

    A 404 raises CharacterNotFound, any other non-2xx status or transport
    failure raises FetchError. No retries.
    """
    if session is None:
        session = get_session()
    try:
        response = session.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(url, "No response received: %s" % e) from e
    if response.status_code == 404:
        raise CharacterNotFound(url, "Not found: %s" % url, status=404)
    if not 200 <= response.status_code < 300:
        raise FetchError(
            url, "Response status: %s" % response.status_code,
            status=response.status_code, body=response.text[:200])
    return response.text
