from collections.abc import Callable
from typing import TypeVar

from .extract_path import extract_path

T = TypeVar("T")


def call_with_path(fn: Callable[[str], T], link: str) -> T:
    """Call fn with the path part of link.

    One trailing "/" is removed before the type prefix is stripped.
    """
    if link.endswith("/"):
        link = link[:-1]
    return fn(extract_path(link))
