"""Indexing facade over a resolved descriptor forest.

``Analysis`` is the public query surface. Construction runs one walk over the
forest with the package and element gatherers, resolves every gathered
element's behaviors, and builds four indices:

* tag name → resolved element (last write wins, with a warning)
* package directory → resolved elements (longest matching prefix)
* behavior name → behavior descriptor
* document URL → top-level document descriptor

Example:
        from component_analysis import Analysis

        analysis = Analysis(forest)
        tabs = analysis.get_element("x-tabs")
        inherited = [p.name for p in tabs.properties if p.inherited_from]

All indices are built synchronously in ``__init__``; the instance exposes no
mutators afterwards so it can be shared between threads.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .config import AnalysisConfig
from .errors import DuplicateTagNameError
from .gatherers import ElementGatherer, PackageGatherer
from .merger import resolve_element
from .models import BehaviorDescriptor, DocumentDescriptor, ResolvedElement
from .validation import validate
from .walker import AnalysisWalker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisWarning:
    """A non-fatal condition detected while building the indices."""

    code: str
    message: str


class Analysis:
    """Resolved, queryable model of one descriptor forest.

    Args:
        descriptors: Top-level documents, as produced by the scanners.
        config: Optional :class:`AnalysisConfig`; defaults to
            :meth:`AnalysisConfig.from_env`.

    Raises:
        StructuralAmbiguityError: A shared descriptor has two owning paths.
        UnattributablePathError: A descriptor has no enclosing document URL.
        UnresolvedBehaviorError: An element references an unknown behavior.
        UnknownDescriptorKindError: The forest holds a foreign object.
        DuplicateTagNameError: Two elements share a tag name in strict mode.
    """

    def __init__(
        self,
        descriptors: Sequence[DocumentDescriptor],
        config: Optional[AnalysisConfig] = None,
    ) -> None:
        self.config = config or AnalysisConfig.from_env()
        self._descriptors = list(descriptors)
        self._elements_by_tag_name: Dict[str, ResolvedElement] = {}
        self._element_paths_by_tag_name: Dict[str, str] = {}
        self._elements_by_package_dir: Dict[str, List[ResolvedElement]] = {}
        self._behaviors_by_name: Dict[str, BehaviorDescriptor] = {}
        self._documents_by_url: Dict[str, DocumentDescriptor] = {}
        self._warnings: List[AnalysisWarning] = []

        package_gatherer = PackageGatherer(self.config.manifest_filenames)
        element_gatherer = ElementGatherer()
        AnalysisWalker(self._descriptors).walk([package_gatherer, element_gatherer])

        for behavior in element_gatherer.behavior_descriptors:
            if behavior.class_name:
                self._behaviors_by_name[behavior.class_name] = behavior

        self._package_dirs = sorted(package_gatherer.package_dirs, key=len, reverse=True)

        for original in element_gatherer.element_descriptors:
            element = resolve_element(original, self.get_behavior)
            path = element_gatherer.element_paths[original]
            if element.tag_name:
                self._index_tag_name(element, path)
            package_dir = self._package_dir_for(path)
            self._elements_by_package_dir.setdefault(package_dir, []).append(element)

        for document in self._descriptors:
            self._documents_by_url[document.url] = document

        logger.debug(
            f"Indexed {len(element_gatherer.element_descriptors)} elements, "
            f"{len(self._behaviors_by_name)} behaviors, "
            f"{len(self._package_dirs)} packages, "
            f"{len(self._documents_by_url)} documents"
        )

    def _index_tag_name(self, element: ResolvedElement, path: str) -> None:
        tag_name = element.tag_name
        previous_path = self._element_paths_by_tag_name.get(tag_name)
        if previous_path is not None:
            if self.config.strict_tag_names:
                raise DuplicateTagNameError(tag_name, previous_path, path)
            warning = AnalysisWarning(
                code="duplicate-tag-name",
                message=(
                    f"Element <{tag_name}> from {path} replaces the definition "
                    f"from {previous_path}"
                ),
            )
            logger.warning(warning.message)
            self._warnings.append(warning)
        self._elements_by_tag_name[tag_name] = element
        self._element_paths_by_tag_name[tag_name] = path

    def _package_dir_for(self, path: str) -> str:
        # _package_dirs is sorted longest first.
        for package_dir in self._package_dirs:
            if path.startswith(package_dir):
                return package_dir
        return ""

    def get_element(self, tag_name: str) -> Optional[ResolvedElement]:
        return self._elements_by_tag_name.get(tag_name)

    def get_elements(self) -> List[ResolvedElement]:
        """Return every element indexed by tag name."""
        return list(self._elements_by_tag_name.values())

    def get_elements_for_package(self, dir_name: str) -> Optional[List[ResolvedElement]]:
        """Return the elements attributed to ``dir_name``.

        Elements outside every known package are grouped under ``""``.
        Returns ``None`` when no element was attributed to the directory.
        """
        elements = self._elements_by_package_dir.get(dir_name)
        return list(elements) if elements is not None else None

    def get_behavior(self, name: str) -> Optional[BehaviorDescriptor]:
        """Get the behavior registered under the given name.

        The name is the behavior's ``class_name``, e.g. ``My.Behavior`` for a
        behavior declared as ``My.Behavior = {...}``, or the explicit name the
        scanner recorded from an annotation.
        """
        return self._behaviors_by_name.get(name)

    def get_document(self, path: str) -> Optional[DocumentDescriptor]:
        return self._documents_by_url.get(path)

    def get_element_path(self, tag_name: str) -> Optional[str]:
        """Return the owning path of the element indexed under ``tag_name``."""
        return self._element_paths_by_tag_name.get(tag_name)

    @property
    def package_dirs(self) -> List[str]:
        """Known package directories, longest first."""
        return list(self._package_dirs)

    @property
    def warnings(self) -> Tuple[AnalysisWarning, ...]:
        return tuple(self._warnings)

    @staticmethod
    def validate(serialized: Any) -> None:
        """Raise if ``serialized`` is not a valid serialized analysis.

        Raises:
            SchemaValidationError: Listing every structural violation and the
                ``schema_version`` check outcome.
        """
        validate(serialized)
