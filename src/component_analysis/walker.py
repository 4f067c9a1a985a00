"""Depth-first traversal of a descriptor forest.

The walker broadcasts every node to a list of visitors, in registration order,
together with the tuple of ancestors leading to it. Visitors subclass
:class:`AnalysisVisitor` and override only the hooks they need.

Traversal order:
        * Top-level documents in list order, each walked preorder.
        * Inside a document, ``entities`` before ``dependencies``.
        * Documents and inline documents recurse; elements, behaviors and
            imports are leaves (their ``behaviors`` graph is flattened by the
            resolver, not walked here).

Example:
        class TagCollector(AnalysisVisitor):
                def __init__(self):
                        self.tags = []

                def visit_element(self, element, ancestors):
                        self.tags.append(element.tag_name)

        collector = TagCollector()
        AnalysisWalker(forest).walk([collector])
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from .errors import UnknownDescriptorKindError
from .models import (
    BehaviorDescriptor,
    Descriptor,
    DescriptorKind,
    DocumentDescriptor,
    ElementDescriptor,
    ImportDescriptor,
    InlineDocumentDescriptor,
)

logger = logging.getLogger(__name__)

Ancestors = Tuple[Descriptor, ...]


class AnalysisVisitor:
    """Base visitor; every hook is a no-op until overridden.

    ``ancestors`` is an immutable tuple ordered outermost first. For document
    hooks it ends with the visited document itself.
    """

    def visit_document(self, document: DocumentDescriptor, ancestors: Ancestors) -> None:
        return None

    def visit_inline_document(
        self, document: InlineDocumentDescriptor, ancestors: Ancestors
    ) -> None:
        return None

    def visit_element(self, element: ElementDescriptor, ancestors: Ancestors) -> None:
        return None

    def visit_behavior(self, behavior: BehaviorDescriptor, ancestors: Ancestors) -> None:
        return None

    def visit_import(self, import_desc: ImportDescriptor, ancestors: Ancestors) -> None:
        return None

    def done(self) -> None:
        """Called once after the whole forest has been walked."""
        return None


class AnalysisWalker:
    """Walk the descriptor forest and call into the given visitors."""

    def __init__(self, documents: Sequence[DocumentDescriptor]) -> None:
        self._documents = list(documents)
        self._visited = 0

    def walk(self, visitors: Sequence[AnalysisVisitor]) -> None:
        visitors = list(visitors)
        self._visited = 0
        for document in self._documents:
            self._walk_entity(document, visitors, ())
        for visitor in visitors:
            visitor.done()
        logger.debug(
            f"Walked {self._visited} descriptors from "
            f"{len(self._documents)} top-level documents"
        )

    def _walk_entity(
        self, entity: Descriptor, visitors: List[AnalysisVisitor], ancestors: Ancestors
    ) -> None:
        if entity is None:
            return
        kind = getattr(entity, "kind", None)
        if kind is DescriptorKind.DOCUMENT:
            self._walk_document(entity, visitors, ancestors)
        elif kind is DescriptorKind.INLINE_DOCUMENT:
            self._walk_inline_document(entity, visitors, ancestors)
        elif kind is DescriptorKind.ELEMENT:
            self._visited += 1
            for visitor in visitors:
                visitor.visit_element(entity, ancestors)
        elif kind is DescriptorKind.BEHAVIOR:
            self._visited += 1
            for visitor in visitors:
                visitor.visit_behavior(entity, ancestors)
        elif kind is DescriptorKind.IMPORT:
            self._visited += 1
            for visitor in visitors:
                visitor.visit_import(entity, ancestors)
        else:
            raise UnknownDescriptorKindError(entity)

    def _walk_document(
        self,
        document: DocumentDescriptor,
        visitors: List[AnalysisVisitor],
        ancestors: Ancestors,
    ) -> None:
        self._visited += 1
        ancestors = ancestors + (document,)
        for visitor in visitors:
            visitor.visit_document(document, ancestors)
        for entity in document.entities:
            self._walk_entity(entity, visitors, ancestors)
        for dependency in document.dependencies:
            self._walk_entity(dependency, visitors, ancestors)

    def _walk_inline_document(
        self,
        document: InlineDocumentDescriptor,
        visitors: List[AnalysisVisitor],
        ancestors: Ancestors,
    ) -> None:
        self._visited += 1
        for visitor in visitors:
            visitor.visit_inline_document(document, ancestors)
        ancestors = ancestors + (document,)
        for entity in document.entities:
            self._walk_entity(entity, visitors, ancestors)
