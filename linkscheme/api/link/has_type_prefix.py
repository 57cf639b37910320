def has_type_prefix(link: str, type_tag: str) -> bool:
    """Return True if link starts with "<type_tag>:"."""
    return link.startswith(f"{type_tag}:")
