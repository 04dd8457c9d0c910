"""Schema validation hook for strict mode.

The engine does not ship a feed grammar. Callers supply one, either as a
``Validator`` object or as a RELAX NG schema file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

import structlog
from lxml import etree

from feedlens.errors import ValidationFailed

logger = structlog.get_logger()


class Validator(Protocol):
    def validate(self, tree: etree._ElementTree) -> None: ...


class RelaxNGValidator:
    """Validate documents against a RELAX NG schema."""

    def __init__(self, schema: etree.RelaxNG):
        self._schema = schema

    @classmethod
    def from_path(cls, path: str | Path) -> RelaxNGValidator:
        schema_path = Path(path).expanduser()
        try:
            schema = etree.RelaxNG(etree.parse(str(schema_path)))
        except (OSError, etree.XMLSyntaxError, etree.RelaxNGParseError) as exc:
            raise ValidationFailed(f"Unable to load RELAX NG schema {schema_path}: {exc}") from exc
        return cls(schema)

    def validate(self, tree: etree._ElementTree) -> None:
        if self._schema.validate(tree):
            return
        error = self._schema.error_log.last_error
        logger.warning("Schema validation failed", error=str(error))
        raise ValidationFailed(f"Failed required validation: {error}")


def resolve_validator(validator: Validator | None, schema_path: str | None) -> Validator:
    """Pick the validator to use in strict mode."""
    if validator is not None:
        return validator
    if schema_path:
        return RelaxNGValidator.from_path(schema_path)
    raise ValidationFailed("Strict mode requested but no schema is configured")
