from __future__ import annotations

import typer

from hostplat import __version__
from hostplat.core.errors import ErrorCode
from hostplat.cli.commands.describe import name, package, show


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
    help="Describe the host operating system, architecture and runtime.",
)


app.command()(show)
app.command()(name)
app.command()(package)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=int(ErrorCode.OK))


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    pass


def main() -> None:
    app()
