"""Catalog of bundled block templates.

New designs start with these templates, and CLI commands fall back to them
when a design file carries no template catalog of its own.
"""

import json
from importlib import resources

from wallcraft.domain.value_objects import BlockTemplate


class TemplateNotFoundError(Exception):
    """Raised when a requested template does not exist."""

    def __init__(self, template_id: str) -> None:
        self.template_id = template_id
        super().__init__(f"Template not found: {template_id}")


class TemplateCatalog:
    """Read-only access to the bundled default block templates.

    Example:
        catalog = TemplateCatalog()
        for template, description in catalog.list_templates():
            print(f"{template.id}: {description}")
    """

    def __init__(self) -> None:
        self._data_package = "wallcraft.application.templates.data"
        self._filename = "default-templates.json"
        self._entries: list[dict] | None = None

    def _load(self) -> list[dict]:
        if self._entries is None:
            data_files = resources.files(self._data_package)
            content = data_files.joinpath(self._filename).read_text(encoding="utf-8")
            self._entries = json.loads(content)
        return self._entries

    def list_templates(self) -> list[tuple[BlockTemplate, str]]:
        """List all bundled templates with their descriptions.

        Returns:
            List of (template, description) tuples in catalog order.
        """
        return [
            (
                BlockTemplate(
                    id=entry["id"],
                    width=entry["width"],
                    height=entry["height"],
                    color=entry["color"],
                ),
                entry.get("description", ""),
            )
            for entry in self._load()
        ]

    def default_templates(self) -> list[BlockTemplate]:
        """Templates a new design starts with."""
        return [template for template, _ in self.list_templates()]

    def get_template(self, template_id: str) -> BlockTemplate:
        """Get a bundled template by id.

        Raises:
            TemplateNotFoundError: If the template does not exist.
        """
        for template in self.default_templates():
            if template.id == template_id:
                return template
        raise TemplateNotFoundError(template_id)

    def template_exists(self, template_id: str) -> bool:
        return any(t.id == template_id for t in self.default_templates())
