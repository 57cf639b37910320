"""Internal helper for Link API commands to reduce boilerplate."""

from typing import Any

from ...utils.logger import get_logger
from ..config.LinkConfig import LinkConfig
from ..config.SchemeConfig import SchemeConfig
from ..StageResult import StageResult
from .call_when_type_matches import call_when_type_matches
from .find_scheme import find_scheme


def _resolve_link(
    link: str, result_obj: StageResult, output_cls: Any, **default_fields: Any
) -> tuple[LinkConfig, str, SchemeConfig, str] | None:
    """Load configuration and resolve link to its scheme, or populate result_obj with failure.

    Args:
        link: Raw link string ("<tag>:<path>").
        result_obj: The StageResult object to populate on failure.
        output_cls: The Pydantic model class for the output.
        **default_fields: Default values for required fields in output_cls.

    Returns:
        (config, tag, scheme_config, path) if the link resolves, None otherwise
        (StageResult already populated).
    """
    logger = get_logger("link")

    try:
        config = LinkConfig.load()
    except ValueError as e:
        logger.warning(f"Cannot resolve {link}: {e}")
        result_obj.output = output_cls(link=link, scheme="", errors=[str(e)], **default_fields).model_dump(
            mode="python"
        )
        result_obj.result = f"Error: {e}"
        result_obj.success = False
        return None

    match = find_scheme(link, config.schemes)
    if match is None:
        message = f"No configured scheme matches link: {link}"
        logger.warning(message)
        result_obj.output = output_cls(link=link, scheme="", errors=[message], **default_fields).model_dump(
            mode="python"
        )
        result_obj.result = f"Error: {message}"
        result_obj.success = False
        return None

    tag, scheme_config = match
    path = call_when_type_matches(lambda p: p, tag, link)
    return config, tag, scheme_config, path
