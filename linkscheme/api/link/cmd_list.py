"""Link list API command.

CLI: linkscheme link list
"""

from collections.abc import Iterator

from .._output_schemas.link import LinkListOutput
from ..config.LinkConfig import LinkConfig
from ..StageResult import StageResult


def cmd_list() -> StageResult:
    """List configured link schemes and their base locations."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Loading configuration...")
        try:
            config = LinkConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.output = LinkListOutput(errors=[str(e)], schemes={}).model_dump(mode="python")
            result_obj.result = f"Error: {e}"
            result_obj.success = False
            return

        schemes = {tag: scheme.base_location for tag, scheme in config.schemes.items()}
        yield (1.0, "Complete")
        result_obj.output = LinkListOutput(errors=[], warnings=[], schemes=schemes).model_dump(mode="python")
        result_obj.result = f"Found {len(schemes)} scheme(s)"
        result_obj.success = True

    return StageResult(
        announce="Listing link schemes...",
        progress_callback=do_work,
    )
