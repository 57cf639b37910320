def extract_path(link: str) -> str:
    """Strip everything up to and including the first colon.

    A link without a colon is returned unchanged.
    """
    _, sep, rest = link.partition(":")
    return rest if sep else link
