"""Link export API command.

CLI: linkscheme link export <link> [--backend B] [--description D] [--links-to-notes/--no-links-to-notes]
"""

from collections.abc import Iterator

from .._output_schemas.link import LinkExportOutput
from ..StageResult import StageResult
from ._resolve_link import _resolve_link
from .Backend import Backend
from .ExportContext import ExportContext
from .LinkScheme import LinkScheme


def cmd_export(
    link: str,
    backend: str | None = None,
    description: str | None = None,
    links_to_notes: bool | None = None,
) -> StageResult:
    """Export a raw link as backend text.

    Args:
        link: Raw link "<tag>:<path>" resolved against the configured schemes.
        backend: Backend tag; the configured default when None.
        description: Optional human readable label.
        links_to_notes: ASCII export option; the configured default when None.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        resolved = _resolve_link(
            link, result_obj, LinkExportOutput, path="", backend=backend or "", uri="", text=""
        )
        if resolved is None:
            yield (1.0, "Complete")
            return
        config, tag, scheme_config, path = resolved

        backend_tag = backend or config.export.default_backend
        resolved_backend = Backend.from_tag(backend_tag)
        warnings: list[str] = []
        if resolved_backend is Backend.OTHER and backend_tag != Backend.OTHER.value:
            warnings.append(f"Unrecognized backend '{backend_tag}', exported the bare URI")

        yield (0.6, f"Exporting {link} for {resolved_backend.value}...")
        context = ExportContext(
            links_to_notes=config.export.links_to_notes if links_to_notes is None else links_to_notes
        )
        scheme = LinkScheme(scheme_config.base_location)
        text = scheme.export(path, description, resolved_backend, context)

        yield (1.0, "Complete")
        result_obj.output = LinkExportOutput(
            errors=[],
            warnings=warnings,
            link=link,
            scheme=tag,
            path=path,
            backend=resolved_backend.value,
            uri=scheme.uri(path),
            text=text,
        ).model_dump(mode="python")
        result_obj.result = text
        result_obj.success = True

    return StageResult(
        announce=f"Exporting link {link}...",
        progress_callback=do_work,
    )
