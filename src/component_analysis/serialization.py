"""Serialize an :class:`~component_analysis.analysis.Analysis` to the versioned format.

Example round-trip:
        from component_analysis.serialization import load_serialized, save_analysis

        save_analysis(analysis, Path("build/analysis.json"))
        payload = load_serialized(Path("build/analysis.json"))  # validated
        [e["tagname"] for e in payload["elements"]]

Design notes:
* Only elements indexed by tag name are serialized, in index order.
* ``inheritedFrom`` (and any other unset optional key) is omitted instead of
    being written as ``null``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .analysis import Analysis
from .models import BehaviorDescriptor, ResolvedElement
from .schema import (
    SCHEMA_VERSION,
    SerializedAnalysis,
    SerializedAttribute,
    SerializedElement,
    SerializedEvent,
    SerializedProperty,
)
from .validation import validate

logger = logging.getLogger(__name__)


def _behavior_names(element: ResolvedElement) -> List[str]:
    names = []
    for ref in element.behaviors:
        if isinstance(ref, BehaviorDescriptor):
            if ref.class_name:
                names.append(ref.class_name)
        else:
            names.append(ref)
    return names


def serialize_element(element: ResolvedElement, path: Optional[str] = None) -> SerializedElement:
    """Convert one resolved element into its serialized model."""
    return SerializedElement(
        tagname=element.tag_name,
        classname=element.class_name,
        description=element.description,
        path=path,
        behaviors=_behavior_names(element),
        properties=[
            SerializedProperty(
                name=p.name,
                type=p.type,
                description=p.description,
                default=p.default,
                inheritedFrom=p.inherited_from,
            )
            for p in element.properties
        ],
        attributes=[
            SerializedAttribute(
                name=a.name,
                type=a.type,
                description=a.description,
                inheritedFrom=a.inherited_from,
            )
            for a in element.attributes
        ],
        events=[
            SerializedEvent(
                name=e.name, description=e.description, inheritedFrom=e.inherited_from
            )
            for e in element.events
        ],
    )


def serialize_analysis(
    analysis: Analysis, metadata: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """Return a JSON-serializable dict describing every indexed element.

    Args:
        analysis: Analysis to serialize.
        metadata: Optional free-form mapping stored under ``metadata``.

    Returns:
        dict: Primitive types only, valid according to
        :func:`component_analysis.validation.validate`.
    """
    payload = SerializedAnalysis(
        schema_version=SCHEMA_VERSION,
        elements=[
            serialize_element(element, analysis.get_element_path(element.tag_name))
            for element in analysis.get_elements()
        ],
        metadata=metadata,
    )
    return payload.model_dump(by_alias=True, exclude_none=True)


def save_analysis(
    analysis: Analysis, file_path: Path, metadata: Optional[Dict[str, Any]] = None
) -> None:
    """Write the serialized analysis to ``file_path`` as JSON."""
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    payload = serialize_analysis(analysis, metadata)
    file_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    logger.info(f"Wrote {len(payload['elements'])} elements to {file_path}")


def load_serialized(file_path: Path) -> Dict[str, Any]:
    """Read a serialized analysis from disk and validate it.

    Raises:
        json.JSONDecodeError: If the file is not JSON.
        SchemaValidationError: If the payload is not a valid serialized analysis.
    """
    data = json.loads(Path(file_path).read_text(encoding="utf-8"))
    validate(data)
    return data
