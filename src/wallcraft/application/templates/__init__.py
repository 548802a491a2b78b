"""Bundled block templates.

This package ships the default template catalog used for new designs and a
TemplateCatalog class for accessing it.
"""

from wallcraft.application.templates.manager import (
    TemplateCatalog,
    TemplateNotFoundError,
)

__all__ = [
    "TemplateCatalog",
    "TemplateNotFoundError",
]
