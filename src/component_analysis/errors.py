from __future__ import annotations

from typing import List, Optional


class AnalysisError(Exception):
    """Base error for all analysis and validation failures."""


class StructuralAmbiguityError(AnalysisError):
    """The same element or behavior object is reachable from two documents."""

    def __init__(self, descriptor: object, first_path: str, second_path: str) -> None:
        super().__init__(
            f"Found {descriptor!r} at distinct paths: {second_path} and {first_path}"
        )
        self.descriptor = descriptor
        self.paths = (first_path, second_path)


class UnattributablePathError(AnalysisError):
    """An element or behavior has no enclosing document with a URL."""

    def __init__(self, descriptor: object) -> None:
        super().__init__(f"Unable to determine path to {descriptor!r}")
        self.descriptor = descriptor


class UnresolvedBehaviorError(AnalysisError):
    """A symbolic behavior name is not declared anywhere in the forest."""

    def __init__(self, behavior_name: str) -> None:
        super().__init__(
            f"Unable to resolve behavior `{behavior_name}`. "
            "Did you import it? Is it declared as a behavior?"
        )
        self.behavior_name = behavior_name


class UnknownDescriptorKindError(AnalysisError):
    """The walker met an object outside the closed descriptor set."""

    def __init__(self, entity: object) -> None:
        super().__init__(f"Unknown kind of descriptor: {entity!r}")
        self.entity = entity


class DuplicateTagNameError(AnalysisError):
    """Two elements share a tag name (raised only in strict mode)."""

    def __init__(self, tag_name: str, first_path: str, second_path: str) -> None:
        super().__init__(
            f"Element <{tag_name}> is defined in both {first_path} and {second_path}"
        )
        self.tag_name = tag_name
        self.paths = (first_path, second_path)


class SchemaValidationError(AnalysisError):
    """A serialized analysis violates the schema and/or the version pattern.

    Attributes:
        errors: Every structural violation, formatted as ``"<location>: <message>"``.
        version_error: Outcome of the ``schema_version`` check, ``None`` when it passed.
    """

    def __init__(self, errors: List[str], version_error: Optional[str] = None) -> None:
        lines = [
            "Unable to validate serialized analysis. "
            f"Got {len(errors)} schema errors:"
        ]
        lines.extend(f"    {err}" for err in errors)
        lines.append(f"schema_version: {version_error or 'ok'}")
        super().__init__("\n".join(lines))
        self.errors = list(errors)
        self.version_error = version_error
