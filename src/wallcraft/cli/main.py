"""Typer CLI for wall design placement."""

import logging
from typing import Annotated

import typer

from wallcraft.cli.commands import (
    check,
    designs_app,
    layout,
    place,
    templates_app,
    validate_command,
)

app = typer.Typer(
    name="wallcraft",
    help="Place, check and generate block layouts on wall designs.",
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log placement decisions to stderr"),
    ] = False,
) -> None:
    """Place, check and generate block layouts on wall designs."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register placement commands
app.command(name="place")(place)
app.command(name="check")(check)
app.command(name="layout")(layout)

# Register validate command
app.command(name="validate")(validate_command)

# Register subcommand groups
app.add_typer(templates_app, name="templates")
app.add_typer(designs_app, name="designs")


if __name__ == "__main__":
    app()
