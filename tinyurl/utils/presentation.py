import re
from urllib.parse import quote

from fastapi import Request

from tinyurl.core.config import settings

_WHITESPACE = re.compile(r"\s+")

_BOOKMARKLET_TEMPLATE = """
    var%20f = document.createElement('form');
    f.style.display = 'none';
    document.body.appendChild(f);
    f.method = 'POST';
    f.action = '{root}/';
    var%20m = document.createElement('input');
    m.setAttribute('type', 'hidden');
    m.setAttribute('name', 'url');
    m.setAttribute('value', location.href);
    f.appendChild(m);
    f.submit();
"""


def root_url(request: Request) -> str:
    """Public root of the site, without a trailing slash."""
    if settings.BASE_URL:
        return settings.BASE_URL.rstrip("/")
    return str(request.base_url).rstrip("/")


def short_url(root: str, code: str) -> str:
    return f"{root}/{code}"


def pluralize(number: int, word: str) -> str:
    return f"{number} {word}" + ("" if number == 1 else "s")


def truncate_text(text: str, length: int) -> str:
    if len(text) > length:
        return text[:length - 3] + "..."
    return text


def quote_url(url: str) -> str:
    # Keeps reserved characters and existing escapes intact
    return quote(url, safe=":/?#[]@!$&'()*+,;=%~")


def bookmarklet(root: str) -> str:
    """javascript: URL that POSTs the current page's address to the site root.

    Whitespace is stripped so the whole script fits in a bookmark.
    """
    js_code = _BOOKMARKLET_TEMPLATE.format(root=root)
    return "javascript:" + _WHITESPACE.sub("", js_code)
