import re
from typing import List

MAX_URL_LENGTH = 4096
URL_PATTERN = re.compile(r"(https?|ftp)://.+", re.IGNORECASE)

MISSING_URL = "You must specify a URL."
URL_TOO_LONG = "That URL is too long."
BAD_URL_SCHEME = "The URL must start with http://, https://, or ftp://."


def validate_url(url: str) -> List[str]:
    """Return every rule the url breaks; an empty list means it is acceptable.

    A blank url only reports the missing-url message.
    """
    if url is None or not url.strip():
        return [MISSING_URL]

    errors = []
    if len(url) > MAX_URL_LENGTH:
        errors.append(URL_TOO_LONG)
    if not URL_PATTERN.match(url):
        errors.append(BAD_URL_SCHEME)
    return errors
