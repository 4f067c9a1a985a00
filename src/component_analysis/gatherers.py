"""Visitors that collect packages, elements and behaviors from the forest."""

from __future__ import annotations

import posixpath
from typing import Dict, Iterable, List, Optional, Set, TypeVar

from .errors import StructuralAmbiguityError, UnattributablePathError
from .models import (
    BehaviorDescriptor,
    DescriptorKind,
    DocumentDescriptor,
    ElementDescriptor,
)
from .walker import Ancestors, AnalysisVisitor

DEFAULT_MANIFEST_FILENAMES = ("package.json", "bower.json")

T = TypeVar("T")


class PackageGatherer(AnalysisVisitor):
    """Record every directory that holds a package manifest file."""

    def __init__(self, manifest_filenames: Iterable[str] = DEFAULT_MANIFEST_FILENAMES) -> None:
        self.manifest_filenames = frozenset(manifest_filenames)
        self.package_dirs: Set[str] = set()

    def visit_document(self, document: DocumentDescriptor, ancestors: Ancestors) -> None:
        if posixpath.basename(document.url) in self.manifest_filenames:
            self.package_dirs.add(posixpath.dirname(document.url))


class ElementGatherer(AnalysisVisitor):
    """Gather all elements and behaviors along with their owning paths.

    The owning path of a descriptor is the URL of the closest enclosing
    document that has one. The first-seen order of ``element_descriptors``
    is the processing order used by the indexing facade.
    """

    def __init__(self) -> None:
        self.element_descriptors: List[ElementDescriptor] = []
        self.element_paths: Dict[ElementDescriptor, str] = {}
        self.behavior_descriptors: List[BehaviorDescriptor] = []
        self.behavior_paths: Dict[BehaviorDescriptor, str] = {}

    def visit_element(self, element: ElementDescriptor, ancestors: Ancestors) -> None:
        self._record(element, ancestors, self.element_paths, self.element_descriptors)

    def visit_behavior(self, behavior: BehaviorDescriptor, ancestors: Ancestors) -> None:
        self._record(behavior, ancestors, self.behavior_paths, self.behavior_descriptors)

    @staticmethod
    def _record(
        descriptor: T, ancestors: Ancestors, paths: Dict[T, str], ordered: List[T]
    ) -> None:
        path = path_from_ancestors(ancestors)
        if not path:
            raise UnattributablePathError(descriptor)
        known = paths.get(descriptor)
        if known is not None:
            if known != path:
                raise StructuralAmbiguityError(descriptor, known, path)
            return
        paths[descriptor] = path
        ordered.append(descriptor)


def path_from_ancestors(ancestors: Ancestors) -> Optional[str]:
    """Return the URL of the innermost document ancestor that has one."""
    for ancestor in reversed(ancestors):
        if ancestor.kind is DescriptorKind.DOCUMENT and ancestor.url:
            return ancestor.url
    return None
