"""Form and query-string encoding."""

from typing import Mapping
from urllib.parse import quote_plus


def url_encode(params: Mapping[str, str]) -> str:
    """Transform a mapping of string entries into a url-encoded query string.

    Every value is encoded; pairs are joined with ``&``. The result does not
    start with a question mark.

    Examples:
        >>> url_encode({"email": "a+b@x.com", "exact": "true"})
        'email=a%2Bb%40x.com&exact=true'
    """
    return "&".join(f"{key}={quote_plus(value)}" for key, value in params.items())
