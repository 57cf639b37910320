"""Link open API command.

CLI: linkscheme link open <link> [--new-window/--same-window]
"""

from collections.abc import Iterator

from .._output_schemas.link import LinkOpenOutput
from ..StageResult import StageResult
from ._resolve_link import _resolve_link
from .LinkScheme import LinkScheme
from .open_in_browser import open_in_browser


def cmd_open(link: str, new_window: bool | None = None) -> StageResult:
    """Open a raw link in the web browser.

    Args:
        link: Raw link "<tag>:<path>" resolved against the configured schemes.
        new_window: Request a new browser window; the scheme's setting when None.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        resolved = _resolve_link(link, result_obj, LinkOpenOutput, uri="", opened=False)
        if resolved is None:
            yield (1.0, "Complete")
            return
        _, tag, scheme_config, path = resolved

        scheme = LinkScheme(scheme_config.base_location, navigator=open_in_browser)
        uri = scheme.uri(path)
        yield (0.5, f"Opening {uri}...")
        opened = bool(scheme.open(path, scheme_config.new_window if new_window is None else new_window))

        yield (1.0, "Complete")
        errors = [] if opened else [f"No browser could be launched for {uri}"]
        result_obj.output = LinkOpenOutput(
            errors=errors, warnings=[], link=link, scheme=tag, uri=uri, opened=opened
        ).model_dump(mode="python")
        result_obj.result = f"Opened {uri}" if opened else f"Failed to open {uri}"
        result_obj.success = opened

    return StageResult(
        announce=f"Opening link {link}...",
        progress_callback=do_work,
    )
