"""CLI entrypoint for Lipla."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from lipla import __version__
from lipla.config import load_settings
from lipla.exceptions.core import ExportError, PlanLoadError
from lipla.line_reader import LineReader
from lipla.logging import configure_logging, get_logger
from lipla.repl import Session
from lipla.storage import export_xml, load_plan

app = typer.Typer(add_completion=False, help="Lipla, the life plan command line interpreter")
logger = get_logger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"lipla {__version__}")
        raise typer.Exit()


@app.command()
def main(
    files: list[Path] | None = typer.Argument(
        None,
        help="Life plan data file, and with --export the XML file to write.",
        show_default=False,
    ),
    export: bool = typer.Option(
        False,
        "--export",
        "-x",
        help="Export the life plan to XML instead of starting the interpreter",
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Edit a life plan interactively, or export it to XML."""

    files = files or []
    if len(files) > 2:
        raise typer.BadParameter("At most a data file and an XML file may be given.")
    if len(files) == 2 and not export:
        raise typer.BadParameter("An XML file is only accepted together with --export.")

    settings = load_settings(data_file=files[0] if files else None)
    configure_logging(settings.log_level)
    console = Console(color_system="auto" if settings.color else None)

    try:
        if export:
            target = files[1] if len(files) == 2 else settings.export_file
            export_xml(load_plan(settings.data_file), target)
            console.print(
                f"Exported [yellow]{escape(str(settings.data_file))}[/yellow] "
                f"to [yellow]{escape(str(target))}[/yellow]",
                highlight=False,
            )
            return
        Session(settings, console, LineReader()).run()
    except (PlanLoadError, ExportError) as e:
        logger.error("%s", e)
        console.print(f"[red]error[/red] {escape(str(e))}", highlight=False)
        raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
