"""Analysis configuration and environment overrides.

Environment variables:
    COMPONENT_ANALYSIS_MANIFESTS: Comma-separated manifest filenames that
        mark a package directory (default ``package.json,bower.json``).
    COMPONENT_ANALYSIS_STRICT_TAGS: ``true`` to fail on duplicate tag names
        instead of recording a warning.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

from .gatherers import DEFAULT_MANIFEST_FILENAMES


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for building an :class:`~component_analysis.analysis.Analysis`.

    Args:
        manifest_filenames: Basenames of documents whose directory is a package.
        strict_tag_names: Raise :class:`~component_analysis.errors.DuplicateTagNameError`
            when two elements share a tag name, instead of warning.
    """

    manifest_filenames: Tuple[str, ...] = DEFAULT_MANIFEST_FILENAMES
    strict_tag_names: bool = False

    @classmethod
    def from_env(cls) -> "AnalysisConfig":
        """Get analysis configuration from environment variables."""
        config = cls()
        manifests = os.getenv("COMPONENT_ANALYSIS_MANIFESTS", "")
        names = tuple(name.strip() for name in manifests.split(",") if name.strip())
        if names:
            config = cls(manifest_filenames=names, strict_tag_names=config.strict_tag_names)
        strict = os.getenv("COMPONENT_ANALYSIS_STRICT_TAGS", "")
        if strict:
            config = cls(
                manifest_filenames=config.manifest_filenames,
                strict_tag_names=strict.strip().lower() == "true",
            )
        return config
