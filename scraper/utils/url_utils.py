import re
from urllib.parse import urlparse

# scheme per RFC 3986 followed by an authority, e.g. "https://"
_ABSOLUTE_URL_RE = re.compile(r"^[a-z][a-z0-9+.\-]*://", re.IGNORECASE)


def is_external_url(href: str) -> bool:
    """True when the link carries its own absolute scheme instead of being page-relative."""
    return bool(_ABSOLUTE_URL_RE.match(href or ""))


def get_hostname(url: str) -> str:
    """Hostname of the URL, lowercased and without port; empty string if none."""
    try:
        return urlparse(url).hostname or ""
    except ValueError:
        return ""
