from collections.abc import Mapping
from typing import TypeVar

from .has_type_prefix import has_type_prefix

T = TypeVar("T")


def find_scheme(link: str, schemes: Mapping[str, T]) -> tuple[str, T] | None:
    """Find the scheme whose type prefix starts link.

    Args:
        link: Raw link such as "gh:owner/repo".
        schemes: Scheme tag -> scheme object (config or LinkScheme).

    Returns:
        (tag, scheme) of the first match, None if no tag matches.
    """
    for tag, scheme in schemes.items():
        if has_type_prefix(link, tag):
            return tag, scheme
    return None
