"""JSON framing for design export and import.

A design file holds either a single design or an archive
``{"exportDate": ..., "designs": [...]}``. Parsing validates the structure
with the wire schemas and by default assigns every imported design a fresh
id, so an import never clobbers a stored design by id.
"""

from __future__ import annotations

import json
import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable

from pydantic import ValidationError as PydanticValidationError

from wallcraft.application.config.loader import (
    extract_validation_errors,
    format_validation_error_message,
)
from wallcraft.domain.entities import Design, DesignArchive

from .schemas import DesignArchiveSchema, DesignSchema

logger = logging.getLogger(__name__)


class DesignFormatError(Exception):
    """Exception raised when design data cannot be decoded.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, file_read_error,
            json_parse, validation)
        path: Path to the design file (if applicable)
        details: Additional error details (line/column for JSON, validation errors)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def new_design_id() -> str:
    return str(uuid.uuid4())


def _is_archive(data: Any) -> bool:
    return isinstance(data, dict) and "designs" in data and "blocks" not in data


class JsonDesignCodec:
    """Encodes designs and archives to JSON and decodes them back.

    Attributes:
        indent: JSON indentation of written files.
        id_factory: Callable producing ids for imported designs.
        keep_ids: Keep ids found in the file instead of assigning fresh ones.
    """

    def __init__(
        self,
        indent: int = 2,
        id_factory: Callable[[], str] | None = None,
        keep_ids: bool = False,
    ) -> None:
        self.indent = indent
        self.id_factory = id_factory or new_design_id
        self.keep_ids = keep_ids

    def _design_id(self, schema: DesignSchema) -> str:
        if self.keep_ids and schema.id:
            return schema.id
        return self.id_factory()

    def to_dict(self, payload: Design | DesignArchive) -> dict[str, Any]:
        """Convert a design or archive to its camelCase wire dictionary."""
        if isinstance(payload, DesignArchive):
            return {
                "exportDate": payload.export_date.isoformat(),
                "designs": [self.to_dict(design) for design in payload.designs],
            }
        return DesignSchema.from_domain(payload).model_dump(by_alias=True, mode="json")

    def serialize(self, payload: Design | DesignArchive) -> bytes:
        return json.dumps(
            self.to_dict(payload), indent=self.indent, ensure_ascii=False
        ).encode("utf-8")

    def parse(self, data: bytes | str) -> Design | DesignArchive:
        """Decode and validate a design or archive.

        Args:
            data: Raw file contents.

        Returns:
            A Design for single-design files, a DesignArchive otherwise.

        Raises:
            DesignFormatError: With error_type "json_parse" for malformed JSON
                and "validation" for structurally invalid designs.
        """
        try:
            raw = json.loads(data)
        except json.JSONDecodeError as e:
            raise DesignFormatError(
                message=f"Invalid JSON in design file (line {e.lineno}, column {e.colno}): {e.msg}",
                error_type="json_parse",
                details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
            )
        except UnicodeDecodeError as e:
            raise DesignFormatError(
                message=f"Design file is not valid UTF-8: {e}",
                error_type="json_parse",
            )
        return self.from_dict(raw)

    def from_dict(self, raw: Any) -> Design | DesignArchive:
        """Validate already decoded JSON as a design or archive."""
        if not isinstance(raw, dict):
            raise DesignFormatError(
                message="Design file must contain a JSON object",
                error_type="validation",
            )

        try:
            if _is_archive(raw):
                archive = DesignArchiveSchema.model_validate(raw)
                result: Design | DesignArchive = DesignArchive(
                    designs=[d.to_domain(self._design_id(d)) for d in archive.designs],
                    export_date=archive.export_date or datetime.now(timezone.utc),
                )
            else:
                design = DesignSchema.model_validate(raw)
                result = design.to_domain(self._design_id(design))
        except PydanticValidationError as e:
            details = extract_validation_errors(e)
            raise DesignFormatError(
                message=format_validation_error_message(
                    details, heading="Invalid design file format:"
                ),
                error_type="validation",
                details=details,
            )
        except ValueError as e:
            raise DesignFormatError(
                message=f"Invalid design file format: {e}",
                error_type="validation",
            )

        if isinstance(result, DesignArchive):
            logger.debug("Parsed archive with %d designs", len(result.designs))
        return result

    def parse_designs(self, data: bytes | str) -> list[Design]:
        """Parse a file and return its designs, whether single or archived."""
        result = self.parse(data)
        if isinstance(result, DesignArchive):
            return list(result.designs)
        return [result]

    def read(self, path: Path) -> Design | DesignArchive:
        """Read and parse a design file.

        Raises:
            DesignFormatError: If the file is missing, unreadable or invalid.
        """
        if not path.exists():
            raise DesignFormatError(
                message=f"Design file not found: {path}",
                error_type="file_not_found",
                path=path,
            )
        try:
            content = path.read_bytes()
        except OSError as e:
            raise DesignFormatError(
                message=f"Error reading design file: {path}: {e}",
                error_type="file_read_error",
                path=path,
            )
        try:
            return self.parse(content)
        except DesignFormatError as e:
            e.path = path
            raise

    def write(self, payload: Design | DesignArchive, path: Path) -> None:
        path.write_bytes(self.serialize(payload))
        logger.info("Exported design data to %s", path)


__all__ = [
    "DesignFormatError",
    "JsonDesignCodec",
    "new_design_id",
]
