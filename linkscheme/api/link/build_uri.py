"""Build an absolute URI from a base location and a relative path."""

from urllib.parse import quote

# RFC 3986 gen-delims and sub-delims, plus "%" so existing escapes survive.
_SAFE_CHARS = ":/?#[]@!$&'()*+,;=%"


def build_uri(base_location: str, path: str) -> str:
    """Join base location and path with a single "/" and percent-encode the result.

    Slashes already present on either side are kept as they are, so a base
    ending in "/" yields a double slash.

    Examples:
        >>> build_uri("https://example.com", "a b")
        'https://example.com/a%20b'
    """
    return quote(f"{base_location}/{path}", safe=_SAFE_CHARS)
