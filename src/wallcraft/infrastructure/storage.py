"""File-backed design storage.

All saved designs live in one JSON file holding an array of designs in the
same camelCase format as exported design files. The whole file is rewritten
on every change.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Sequence

from pydantic import ValidationError as PydanticValidationError

from wallcraft.contracts.dtos import ImportSummary
from wallcraft.domain.entities import Design

from .codec import new_design_id
from .schemas import DesignSchema

logger = logging.getLogger(__name__)

DEFAULT_STORE_PATH = Path.home() / ".wallcraft" / "designs.json"


class StorageError(Exception):
    """Exception raised when the design store cannot be read or written.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_read_error, file_write_error,
            index_out_of_range, corrupt_store)
        path: Path to the store file
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class JsonDesignStorage:
    """Stores designs in a single JSON file.

    Designs are saved in place by id and imported with name-based duplicate
    detection. Storage order is insertion order; indices refer to it.

    Example:
        storage = JsonDesignStorage(Path("designs.json"))
        storage.save(design)
        for index, stored in enumerate(storage.load()):
            print(index, stored.name)
    """

    def __init__(self, path: Path = DEFAULT_STORE_PATH) -> None:
        self.path = path

    def load(self) -> list[Design]:
        """Return all stored designs. A missing store file is an empty store.

        Raises:
            StorageError: If the file cannot be read or does not hold designs.
        """
        if not self.path.exists():
            return []
        try:
            content = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(
                f"Error reading design store: {self.path}: {e}",
                error_type="file_read_error",
                path=self.path,
            )
        if not content.strip():
            return []

        try:
            raw = json.loads(content)
        except json.JSONDecodeError as e:
            raise StorageError(
                f"Design store is not valid JSON: {self.path} (line {e.lineno}): {e.msg}",
                error_type="corrupt_store",
                path=self.path,
            )
        if not isinstance(raw, list):
            raise StorageError(
                f"Design store must contain a JSON array: {self.path}",
                error_type="corrupt_store",
                path=self.path,
            )

        designs: list[Design] = []
        for index, item in enumerate(raw):
            try:
                schema = DesignSchema.model_validate(item)
                designs.append(schema.to_domain(schema.id or new_design_id()))
            except (PydanticValidationError, ValueError) as e:
                raise StorageError(
                    f"Stored design #{index} is invalid: {e}",
                    error_type="corrupt_store",
                    path=self.path,
                )
        return designs

    def _write(self, designs: Sequence[Design]) -> None:
        payload: list[dict[str, Any]] = [
            DesignSchema.from_domain(design).model_dump(by_alias=True, mode="json")
            for design in designs
        ]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8"
            )
        except OSError as e:
            raise StorageError(
                f"Error writing design store: {self.path}: {e}",
                error_type="file_write_error",
                path=self.path,
            )

    def save(self, design: Design) -> None:
        """Insert the design, or replace the stored design with the same id."""
        designs = self.load()
        design.preview = design.build_preview()
        for index, stored in enumerate(designs):
            if stored.id == design.id:
                designs[index] = design
                logger.info("Updated design '%s'", design.name)
                break
        else:
            designs.append(design)
            logger.info("Saved new design '%s'", design.name)
        self._write(designs)

    def get(self, index: int) -> Design:
        """Return the design at a storage index.

        Raises:
            StorageError: If the index is out of range.
        """
        designs = self.load()
        if not 0 <= index < len(designs):
            raise StorageError(
                f"No design at index {index} (store holds {len(designs)})",
                error_type="index_out_of_range",
                path=self.path,
            )
        return designs[index]

    def delete(self, index: int) -> Design:
        """Remove and return the design at a storage index.

        Raises:
            StorageError: If the index is out of range.
        """
        designs = self.load()
        if not 0 <= index < len(designs):
            raise StorageError(
                f"No design at index {index} (store holds {len(designs)})",
                error_type="index_out_of_range",
                path=self.path,
            )
        removed = designs.pop(index)
        self._write(designs)
        logger.info("Deleted design '%s'", removed.name)
        return removed

    def import_batch(
        self, designs: Sequence[Design], overwrite: bool = False
    ) -> ImportSummary:
        """Store several designs, matching existing ones by name.

        A design whose name is already stored replaces it when overwrite is
        set and is skipped otherwise. Designs with new names are appended.

        Returns:
            Counts of imported, overwritten and skipped designs.
        """
        stored = self.load()
        imported = overwritten = skipped = 0
        for design in designs:
            existing = next(
                (i for i, d in enumerate(stored) if d.name == design.name), None
            )
            if existing is None:
                stored.append(design)
                imported += 1
            elif overwrite:
                stored[existing] = design
                overwritten += 1
            else:
                skipped += 1
        self._write(stored)
        summary = ImportSummary(imported, overwritten, skipped)
        logger.info(
            "Imported %d, overwrote %d, skipped %d designs",
            summary.imported,
            summary.overwritten,
            summary.skipped,
        )
        return summary


__all__ = [
    "DEFAULT_STORE_PATH",
    "JsonDesignStorage",
    "StorageError",
]
