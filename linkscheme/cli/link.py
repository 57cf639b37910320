"""Link Typer app factory."""

import typer

from linkscheme.api.link.cmd_export import cmd_export
from linkscheme.api.link.cmd_list import cmd_list
from linkscheme.api.link.cmd_open import cmd_open
from linkscheme.api.link.cmd_uri import cmd_uri
from linkscheme.cli._handle_stage_result import _handle_stage_result


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Export and open scheme links",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="export")
    def export_cmd(
        link: str = typer.Argument(..., help="Link to export, e.g. 'gh:owner/repo'"),
        backend: str | None = typer.Option(
            None, "--backend", "-b", help="markdown, html, latex, ascii, texinfo; anything else prints the URI"
        ),
        description: str | None = typer.Option(None, "--description", help="Link description"),
        links_to_notes: bool | None = typer.Option(
            None,
            "--links-to-notes/--no-links-to-notes",
            help="ASCII: omit the URI after the description (config default when unset)",
        ),
    ) -> None:
        """Render a link for an export backend."""
        _handle_stage_result(cmd_export)(
            link=link, backend=backend, description=description, links_to_notes=links_to_notes
        )

    @app.command(name="open")
    def open_cmd(
        link: str = typer.Argument(..., help="Link to open, e.g. 'gh:owner/repo'"),
        new_window: bool | None = typer.Option(
            None, "--new-window/--same-window", help="Open in a new browser window (scheme setting when unset)"
        ),
    ) -> None:
        """Open a link in the web browser."""
        _handle_stage_result(cmd_open)(link=link, new_window=new_window)

    @app.command(name="uri")
    def uri_cmd(
        link: str = typer.Argument(..., help="Link to resolve, e.g. 'gh:owner/repo'"),
    ) -> None:
        """Print the absolute URI of a link."""
        _handle_stage_result(cmd_uri)(link=link)

    @app.command(name="list")
    def list_cmd() -> None:
        """List configured link schemes."""
        _handle_stage_result(cmd_list)()

    return app
