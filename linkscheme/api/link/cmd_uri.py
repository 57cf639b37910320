"""Link uri API command.

CLI: linkscheme link uri <link>
"""

from collections.abc import Iterator

from .._output_schemas.link import LinkUriOutput
from ..StageResult import StageResult
from ._resolve_link import _resolve_link
from .build_uri import build_uri


def cmd_uri(link: str) -> StageResult:
    """Resolve a raw link to its absolute URI without opening it."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        resolved = _resolve_link(link, result_obj, LinkUriOutput, path="", uri="")
        if resolved is None:
            yield (1.0, "Complete")
            return
        _, tag, scheme_config, path = resolved

        uri = build_uri(scheme_config.base_location, path)
        yield (1.0, "Complete")
        result_obj.output = LinkUriOutput(
            errors=[], warnings=[], link=link, scheme=tag, path=path, uri=uri
        ).model_dump(mode="python")
        result_obj.result = uri
        result_obj.success = True

    return StageResult(
        announce=f"Resolving link {link}...",
        progress_callback=do_work,
    )
