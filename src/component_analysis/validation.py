"""Validation of serialized analysis objects.

A serialized analysis is valid when it matches the
:class:`~component_analysis.schema.SerializedAnalysis` model *and* its
``schema_version`` is a 1.x.x version. Both checks always run, and every
violation found is reported in one :class:`SchemaValidationError`.

Usage::

    from component_analysis.validation import validate

    validate(json.loads(Path("analysis.json").read_text()))

The process-wide validator returned by :func:`get_validator` is created on
first use (never at import time) and is read-only afterwards. Callers that
prefer to own their validator can construct :class:`SchemaValidator`
directly.
"""

from __future__ import annotations

import re
import threading
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .errors import SchemaValidationError
from .schema import SerializedAnalysis

SCHEMA_VERSION_PATTERN = re.compile(r"1\.[0-9]+\.[0-9]+")


class SchemaValidator:
    """Validate objects against a fixed serialized-analysis model.

    Args:
        model: Pydantic model describing the serialized format.

    Example:
        >>> validator = SchemaValidator()
        >>> validator.check({"schema_version": "1.0.0", "elements": []})
        []
    """

    def __init__(self, model: Type[BaseModel] = SerializedAnalysis) -> None:
        self.model = model
        self._json_schema = model.model_json_schema(by_alias=True)

    def json_schema(self) -> Dict[str, Any]:
        """Return the JSON Schema document of the serialized format."""
        return dict(self._json_schema)

    def check(self, serialized: Any) -> List[str]:
        """Return every structural violation, formatted ``"<location>: <message>"``."""
        try:
            self.model.model_validate(serialized, strict=True)
        except PydanticValidationError as exc:
            return [_format_error(error) for error in exc.errors()]
        return []

    @staticmethod
    def check_version(serialized: Any) -> Optional[str]:
        """Return why ``schema_version`` is unacceptable, or ``None``."""
        version = serialized.get("schema_version") if isinstance(serialized, dict) else None
        if isinstance(version, str) and SCHEMA_VERSION_PATTERN.fullmatch(version):
            return None
        return f"Invalid schema_version. Expected 1.x.x, got {version!r}"

    def validate(self, serialized: Any) -> None:
        """Raise :class:`SchemaValidationError` unless ``serialized`` is valid."""
        errors = self.check(serialized)
        version_error = self.check_version(serialized)
        if errors or version_error:
            raise SchemaValidationError(errors, version_error)


def _format_error(error: Dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
    return f"{location}: {error.get('msg', 'invalid value')}"


_validator: Optional[SchemaValidator] = None
_validator_lock = threading.Lock()


def get_validator() -> SchemaValidator:
    """Return the process-wide :class:`SchemaValidator`, creating it once."""
    global _validator
    if _validator is None:
        with _validator_lock:
            if _validator is None:
                _validator = SchemaValidator()
    return _validator


def validate(serialized: Any) -> None:
    """Throw if the given object isn't a valid serialized analysis.

    Raises:
        SchemaValidationError: With every structural violation plus the
            outcome of the ``schema_version`` check.
    """
    get_validator().validate(serialized)
