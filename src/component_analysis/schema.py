"""Versioned serialized analysis format.

These pydantic models are the single definition of the serialized format:
:mod:`component_analysis.serialization` builds payloads with them and
:mod:`component_analysis.validation` validates arbitrary objects against
them. ``scripts/export_schemas.py`` writes the equivalent JSON Schema.

Example payload::

    {
        "schema_version": "1.0.0",
        "elements": [
            {
                "tagname": "x-tabs",
                "classname": "XTabs",
                "description": "",
                "path": "/app/x-tabs.html",
                "behaviors": ["Polymer.Selectable"],
                "properties": [
                    {"name": "selected", "type": "string", "description": "",
                     "inheritedFrom": "Polymer.Selectable"}
                ],
                "attributes": [],
                "events": []
            }
        ]
    }
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

SCHEMA_VERSION = "1.0.0"


class _SchemaModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class SerializedProperty(_SchemaModel):
    name: str
    type: Optional[str] = None
    description: str = ""
    default: Optional[str] = None
    inherited_from: Optional[str] = Field(None, alias="inheritedFrom")


class SerializedAttribute(_SchemaModel):
    name: str
    type: Optional[str] = None
    description: str = ""
    inherited_from: Optional[str] = Field(None, alias="inheritedFrom")


class SerializedEvent(_SchemaModel):
    name: str
    description: str = ""
    inherited_from: Optional[str] = Field(None, alias="inheritedFrom")


class SerializedElement(_SchemaModel):
    """One resolved element."""

    tagname: Optional[str] = None
    classname: Optional[str] = None
    description: str = ""
    path: Optional[str] = Field(None, description="Owning document URL")
    behaviors: List[str] = Field(default_factory=list)
    properties: List[SerializedProperty] = Field(default_factory=list)
    attributes: List[SerializedAttribute] = Field(default_factory=list)
    events: List[SerializedEvent] = Field(default_factory=list)


class SerializedAnalysis(_SchemaModel):
    """Top-level serialized analysis object."""

    schema_version: str = Field(..., description="Format version, 1.x.x")
    elements: List[SerializedElement]
    metadata: Optional[Dict[str, Any]] = None
