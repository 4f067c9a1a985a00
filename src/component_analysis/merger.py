"""Resolve behavior references and merge inherited named items.

This module holds the two pure transformations behind a resolved element:

* :func:`flatten_behaviors` turns an element's ``behaviors`` list (names or
  direct references) into the ordered list of distinct behavior objects it
  inherits from, depth first.
* :func:`merge_by_name` combines an element's own properties, attributes or
  events with those of its flattened behaviors.

Precedence rules:
        1. Locally declared items always win and keep their position.
        2. Among behaviors, the first one (in flattened order) that defines a
            name supplies it; later definitions are ignored.
        3. Inherited items are copies annotated with ``inherited_from``; the
            behavior's own items are never modified. A behavior without a
            ``class_name`` has no label to give, so its items carry
            ``inherited_from=None`` like local ones.

Example:
    from component_analysis.merger import resolve_element

    resolved = resolve_element(element, behaviors_by_name.get)
    [(p.name, p.inherited_from) for p in resolved.properties]
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Iterable, List, Optional, Sequence, Set, Tuple, TypeVar, Union

from .errors import UnresolvedBehaviorError
from .models import BehaviorDescriptor, ElementDescriptor, NamedItem, ResolvedElement

BehaviorLookup = Callable[[str], Optional[BehaviorDescriptor]]
BehaviorRef = Union[str, BehaviorDescriptor]

T = TypeVar("T", bound=NamedItem)


def flatten_behaviors(
    behaviors: Sequence[BehaviorRef], lookup: BehaviorLookup
) -> List[BehaviorDescriptor]:
    """Resolve and flatten a ``behaviors`` list.

    Args:
        behaviors: Behavior names and/or direct behavior references.
        lookup: Returns the behavior registered under a name, or ``None``.

    Returns:
        Each distinct behavior object exactly once, in first-encountered
        depth-first order. With ``B1 -> [B2, B3]`` and ``B2 -> [B3]``,
        flattening ``[B2, B3]`` yields ``[B2, B3]``.

    Raises:
        UnresolvedBehaviorError: If a name is unknown to ``lookup``.
    """
    resolved: List[BehaviorDescriptor] = []
    _flatten(behaviors, lookup, resolved, set())
    return resolved


def _flatten(
    behaviors: Sequence[BehaviorRef],
    lookup: BehaviorLookup,
    resolved: List[BehaviorDescriptor],
    seen: Set[BehaviorDescriptor],
) -> None:
    for ref in behaviors:
        if isinstance(ref, str):
            behavior = lookup(ref)
            if behavior is None:
                raise UnresolvedBehaviorError(ref)
        else:
            behavior = ref
        if behavior in seen:
            continue
        # Marked before descending so that cyclic references terminate.
        seen.add(behavior)
        resolved.append(behavior)
        _flatten(behavior.behaviors, lookup, resolved, seen)


def merge_by_name(
    base: Iterable[T], sources: Iterable[Tuple[Optional[str], Iterable[T]]]
) -> List[T]:
    """Merge inherited items into ``base``.

    Args:
        base: Locally declared items, kept verbatim and first.
        sources: ``(origin_name, items)`` pairs in resolution order.

    Returns:
        Base items followed by the first definition of every other name,
        copied with ``inherited_from`` set to its origin.
    """
    by_name = {}
    for item in base:
        by_name[item.name] = item
    for origin, items in sources:
        for item in items:
            if item.name not in by_name:
                by_name[item.name] = replace(item, inherited_from=origin)
    return list(by_name.values())


def resolve_element(element: ElementDescriptor, lookup: BehaviorLookup) -> ResolvedElement:
    """Build the :class:`ResolvedElement` for ``element``."""
    behaviors = flatten_behaviors(element.behaviors, lookup)
    properties = merge_by_name(
        element.properties, [(b.class_name, b.properties) for b in behaviors]
    )
    attributes = merge_by_name(
        element.attributes, [(b.class_name, b.attributes) for b in behaviors]
    )
    events = merge_by_name(element.events, [(b.class_name, b.events) for b in behaviors])
    return ResolvedElement.from_descriptor(element, properties, attributes, events)
