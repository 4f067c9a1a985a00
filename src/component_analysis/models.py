"""Core data structures for the descriptor forest and its resolved views.

Descriptors are produced by upstream scanners (one forest per analyzed source
tree) and consumed by the walker, the gatherers and the indexing facade. They
are plain dataclasses without framework dependencies so a forest can be built
by hand in tests or by any scanner implementation.

Overview:
        * ``DocumentDescriptor`` represents one parsed source file or a virtual
            sub-scope. Documents nest through ``entities`` and ``dependencies``.
        * ``InlineDocumentDescriptor`` is a scope embedded in a document (an
            inline ``<style>`` or ``<script>``) without a URL of its own.
        * ``ElementDescriptor`` is a component definition keyed by tag name.
        * ``BehaviorDescriptor`` is a mixin contributing named items to the
            elements (and behaviors) that reference it.
        * ``ImportDescriptor`` is a dependency edge to another document.

Typical construction (simplified)::

        from component_analysis.models import (
                BehaviorDescriptor, DocumentDescriptor, ElementDescriptor, Property
        )

        behavior = BehaviorDescriptor(
                class_name="Polymer.Selectable",
                properties=[Property(name="selected", type="string")],
        )
        element = ElementDescriptor(tag_name="x-tabs", behaviors=["Polymer.Selectable"])
        forest = [
                DocumentDescriptor(url="/app/x-tabs.html", entities=[element]),
                DocumentDescriptor(url="/app/selectable.html", entities=[behavior]),
        ]

Design notes:
        * Every descriptor class carries a class-level ``kind`` discriminant;
            dispatch sites match on it and reject anything outside
            :class:`DescriptorKind`.
        * Descriptors compare and hash by identity (``eq=False``). A shared
            element object reachable from two places is the *same* element, and
            identity-keyed sets and dicts are used throughout the resolver.
        * ``ResolvedElement`` is frozen and also compares by identity; it is
            built once per element by the
            explicit :meth:`ResolvedElement.from_descriptor` builder.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar, List, Optional, Tuple, Union


class DescriptorKind(enum.Enum):
    """Closed set of descriptor kinds found in an analysis forest."""

    DOCUMENT = "document"
    INLINE_DOCUMENT = "inline-document"
    ELEMENT = "element"
    BEHAVIOR = "behavior"
    IMPORT = "import"


@dataclass
class Property:
    """A property declared on an element or behavior.

    Attributes:
        name: Property name, unique within one descriptor's own list.
        type: Declared type name (``String``, ``Boolean``...) when known.
        description: Documentation text extracted by the scanner.
        default: Source text of the default value, if any.
        inherited_from: Name of the behavior this item was merged from;
            ``None`` for locally declared items.
    """

    name: str
    type: Optional[str] = None
    description: str = ""
    default: Optional[str] = None
    inherited_from: Optional[str] = None


@dataclass
class Attribute:
    """An HTML attribute an element reacts to."""

    name: str
    type: Optional[str] = None
    description: str = ""
    inherited_from: Optional[str] = None


@dataclass
class Event:
    """An event fired by an element."""

    name: str
    description: str = ""
    inherited_from: Optional[str] = None


NamedItem = Union[Property, Attribute, Event]


@dataclass(eq=False)
class DocumentDescriptor:
    """One parsed source file, or an anonymous sub-scope when ``url`` is empty."""

    kind: ClassVar[DescriptorKind] = DescriptorKind.DOCUMENT

    url: str = ""
    entities: List["Descriptor"] = field(default_factory=list)
    dependencies: List["Descriptor"] = field(default_factory=list)


@dataclass(eq=False)
class InlineDocumentDescriptor:
    """A document embedded in another document, carrying no path of its own.

    Attributes:
        contents: Raw source text of the inline block.
        language: ``css``, ``js``, ``html``... when known.
        entities: Descriptors declared inside the inline block.
    """

    kind: ClassVar[DescriptorKind] = DescriptorKind.INLINE_DOCUMENT

    contents: str = ""
    language: Optional[str] = None
    entities: List["Descriptor"] = field(default_factory=list)


@dataclass(eq=False)
class BehaviorDescriptor:
    """A mixin definition.

    ``behaviors`` holds further behavior names or direct references, which
    allows multi-level composition.
    """

    kind: ClassVar[DescriptorKind] = DescriptorKind.BEHAVIOR

    class_name: Optional[str] = None
    description: str = ""
    properties: List[Property] = field(default_factory=list)
    attributes: List[Attribute] = field(default_factory=list)
    events: List[Event] = field(default_factory=list)
    behaviors: List[Union[str, "BehaviorDescriptor"]] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"BehaviorDescriptor(class_name={self.class_name!r})"


@dataclass(eq=False)
class ElementDescriptor:
    """A component definition, keyed by ``tag_name`` when it has one."""

    kind: ClassVar[DescriptorKind] = DescriptorKind.ELEMENT

    tag_name: Optional[str] = None
    class_name: Optional[str] = None
    description: str = ""
    properties: List[Property] = field(default_factory=list)
    attributes: List[Attribute] = field(default_factory=list)
    events: List[Event] = field(default_factory=list)
    behaviors: List[Union[str, BehaviorDescriptor]] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"ElementDescriptor(tag_name={self.tag_name!r}, class_name={self.class_name!r})"


@dataclass(eq=False)
class ImportDescriptor:
    """A dependency edge to another document."""

    kind: ClassVar[DescriptorKind] = DescriptorKind.IMPORT

    url: str
    import_type: str = "html-import"


Descriptor = Union[
    DocumentDescriptor,
    InlineDocumentDescriptor,
    ElementDescriptor,
    BehaviorDescriptor,
    ImportDescriptor,
]


@dataclass(frozen=True, eq=False)
class ResolvedElement:
    """Read-only view of an element with behavior-merged named items.

    Attributes:
        tag_name: Shared with the original descriptor.
        class_name: Shared with the original descriptor.
        description: Shared with the original descriptor.
        properties: Local properties followed by inherited ones.
        attributes: Local attributes followed by inherited ones.
        events: Local events followed by inherited ones.
        behaviors: The original (unflattened) ``behaviors`` entries.
        descriptor: The original :class:`ElementDescriptor`, never mutated.

    Example:
        >>> element = ElementDescriptor(tag_name="x-a", properties=[Property(name="p")])
        >>> resolved = ResolvedElement.from_descriptor(element, element.properties, [], [])
        >>> resolved.tag_name, [p.name for p in resolved.properties]
        ('x-a', ['p'])
    """

    tag_name: Optional[str]
    class_name: Optional[str]
    description: str
    properties: Tuple[Property, ...]
    attributes: Tuple[Attribute, ...]
    events: Tuple[Event, ...]
    behaviors: Tuple[Union[str, BehaviorDescriptor], ...]
    descriptor: ElementDescriptor = field(repr=False, compare=False)

    @classmethod
    def from_descriptor(
        cls,
        element: ElementDescriptor,
        properties: List[Property],
        attributes: List[Attribute],
        events: List[Event],
    ) -> "ResolvedElement":
        """Build a resolved view of ``element`` with the given merged lists."""
        return cls(
            tag_name=element.tag_name,
            class_name=element.class_name,
            description=element.description,
            properties=tuple(properties),
            attributes=tuple(attributes),
            events=tuple(events),
            behaviors=tuple(element.behaviors),
            descriptor=element,
        )
