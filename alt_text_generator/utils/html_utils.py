"""
HTML Processing Utilities

This module contains the image-source extraction logic: walking the <img>
tags of a page, picking the attribute that holds the real image URL and
turning it into an absolute URL.
"""

from urllib.parse import quote, urljoin, urlsplit, urlunsplit
from bs4 import BeautifulSoup

# Checked in this order; lazy-loading scripts keep the real URL in data-*.
PRIORITY_ATTRIBUTES = (
    'data-src',
    'data-original-src',
    'data-lazy-src',
    'data-srcset',
    'src',
)

IMAGE_EXTENSIONS = ('.jpg', '.jpeg', '.png', '.gif', '.bmp', '.webp', '.svg')

DEFAULT_PORTS = {'http': 80, 'https': 443}

# Characters left as-is when percent-encoding a path; existing escapes are kept
SAFE_PATH_CHARS = "/%:@!$&'()*+,;=~-._"


def strip_query(value: str) -> str:
    """Drop everything from the first '?' onward."""
    return value.split('?', 1)[0]


def is_image(value) -> bool:
    """
    Check whether an attribute value looks like an image reference.

    Args:
        value: Attribute value to check

    Returns:
        bool: True if the value, without its query string, ends with a
        known image extension
    """
    if not isinstance(value, str):
        return False
    path = strip_query(value.strip()).lower()
    return bool(path) and path.endswith(IMAGE_EXTENSIONS)


def select_image_attribute(attributes: dict):
    """
    Pick the raw image reference from an img tag's attributes.

    Priority attributes are tried first; when none qualifies, every other
    attribute is scanned in document order.

    Args:
        attributes: Attribute name to value mapping of the tag

    Returns:
        str or None: The first qualifying value
    """
    fallback = [name for name in attributes if name not in PRIORITY_ATTRIBUTES]
    for name in [*PRIORITY_ATTRIBUTES, *fallback]:
        value = attributes.get(name)
        if is_image(value):
            return value.strip()
    return None


def resolve_image_url(candidate: str, base_url: str):
    """
    Resolve an image reference into an absolute URL.

    Args:
        candidate: Image reference, relative or absolute
        base_url: URL of the page the reference was found on

    Returns:
        str or None: Absolute URL, or None if it cannot be resolved
    """
    path = strip_query(candidate)
    try:
        if urlsplit(path).scheme:
            resolved = path
        else:
            resolved = urljoin(base_url or '', path)
        parts = urlsplit(resolved)
        port = parts.port
    except ValueError:
        return None

    if not parts.scheme or not parts.hostname:
        return None

    scheme = parts.scheme.lower()
    return urlunsplit((
        scheme,
        _normalize_netloc(parts, scheme, port),
        quote(_remove_dot_segments(parts.path), safe=SAFE_PATH_CHARS),
        parts.query,
        quote(parts.fragment, safe=SAFE_PATH_CHARS + '?'),
    ))


def _normalize_netloc(parts, scheme: str, port) -> str:
    """Lowercase the host and drop the scheme's default port; userinfo is kept verbatim."""
    host = parts.hostname
    if ':' in host:
        host = f'[{host}]'

    netloc = host
    if port is not None and port != DEFAULT_PORTS.get(scheme):
        netloc = f'{netloc}:{port}'

    userinfo, at, _ = parts.netloc.rpartition('@')
    if at:
        netloc = f'{userinfo}@{netloc}'
    return netloc


def _remove_dot_segments(path: str) -> str:
    if not path:
        return '/'
    if path.startswith('//'):
        return path
    # urljoin applies RFC 3986 dot-segment removal to the merged path
    return urlsplit(urljoin('http://host/', path)).path


def extract_image_sources(html_content: str, base_url: str) -> list[str]:
    """
    Extract absolute image URLs from HTML content.

    Malformed markup is tolerated by the parser. Tags without a usable
    image reference are skipped, as are relative references that cannot
    be resolved against base_url.

    Args:
        html_content: Raw HTML content of the page
        base_url: URL the page was fetched from

    Returns:
        list[str]: Image URLs in document order, duplicates included
    """
    if not html_content:
        return []

    # Read class/rel/etc. as plain strings rather than token lists
    soup = BeautifulSoup(html_content, 'html.parser', multi_valued_attributes=None)

    image_sources = []
    for img in soup.find_all('img'):
        candidate = select_image_attribute(img.attrs)
        if not candidate:
            continue

        image_url = resolve_image_url(candidate, base_url)
        if image_url:
            image_sources.append(image_url)

    return image_sources
