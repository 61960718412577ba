"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from ghdemo import __version__
from ghdemo.cli.commands import hydrate

app = typer.Typer(
    name="gh-demo",
    help="Hydrate GitHub repositories with demo content.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"gh-demo version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """gh-demo - Populate a repository with demo issues, discussions and pull requests.

    Content is read from JSON files in .github/demos and can be cleaned up
    again, keeping anything matched by preserve.json.
    """


app.add_typer(hydrate.app, name="hydrate")


if __name__ == "__main__":
    app()
