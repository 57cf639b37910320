from collections.abc import Callable
from typing import TypeVar

from .call_with_path import call_with_path
from .has_type_prefix import has_type_prefix

T = TypeVar("T")


def call_when_type_matches(fn: Callable[[str], T], type_tag: str, link: str) -> T | None:
    """Call fn with the path of link if link belongs to type_tag, else return None.

    fn is never invoked for links of another type.
    """
    if not has_type_prefix(link, type_tag):
        return None
    return call_with_path(fn, link)
