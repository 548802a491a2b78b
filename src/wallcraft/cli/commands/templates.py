"""Templates commands for listing the bundled block templates."""

import typer

from wallcraft.application.templates import TemplateCatalog

# Create a Typer app for the templates subcommand group
templates_app = typer.Typer(
    name="templates",
    help="Inspect the bundled block templates.",
)


@templates_app.command(name="list")
def list_templates() -> None:
    """List all bundled block templates.

    Displays the id, size, colour and description of each template.

    Example:
        wallcraft templates list
    """
    templates = TemplateCatalog().list_templates()

    typer.echo("Available templates:")
    typer.echo()

    max_id_width = max(len(t.id) for t, _ in templates) if templates else 0

    for template, description in templates:
        size = f"{template.width:g}x{template.height:g}"
        typer.echo(
            f"  {template.id:<{max_id_width}}  {size:>7}  {template.color}  - {description}"
        )

    typer.echo()
    typer.echo("New designs created with 'wallcraft layout' start with these templates.")
