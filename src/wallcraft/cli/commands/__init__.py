"""CLI command implementations for the wallcraft application.

This package contains the commands of the wallcraft CLI:
- place, check, layout: Placement on a design file
- validate: Validate a design file
- templates: Inspect the bundled block templates
- designs: Manage the saved design store
"""

from wallcraft.cli.commands.designs import designs_app
from wallcraft.cli.commands.placement import check, layout, place
from wallcraft.cli.commands.templates import templates_app
from wallcraft.cli.commands.validate import validate_command

__all__ = [
    "check",
    "designs_app",
    "layout",
    "place",
    "templates_app",
    "validate_command",
]
