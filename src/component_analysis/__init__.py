"""Component Analysis
====================

Semantic resolution and indexing for component-oriented markup source trees.
Upstream scanners turn HTML/CSS/script files into a forest of descriptors
(documents, elements, behaviors, inline documents, imports); this package
turns that forest into a resolved, queryable model.

Key capabilities
----------------
- Depth-first walk of the descriptor forest with pluggable visitors.
- Attribution of every element and behavior to its owning document, and of
  every element to the innermost package directory.
- Behavior (mixin) flattening with diamond-safe de-duplication and
  deterministic merging of inherited properties, attributes and events.
- Lookup by tag name, package directory, behavior name and document URL.
- A versioned serialized format with strict validation.

Design principles
-----------------
1. **Fail fast** – malformed forests raise an
   :class:`~component_analysis.errors.AnalysisError`; there are no partial
   results.
2. **No mutation** – input descriptors are never modified; resolved elements
   are frozen views built once.
3. **Explicit dispatch** – descriptors carry a ``kind`` discriminant that is
   matched exhaustively.

Minimal quick start
-------------------
>>> from component_analysis import Analysis, DocumentDescriptor, ElementDescriptor
>>> forest = [DocumentDescriptor(url="/app/x-a.html", entities=[ElementDescriptor(tag_name="x-a")])]
>>> Analysis(forest).get_element("x-a").tag_name
'x-a'
"""

__version__ = "0.1.0"

from .analysis import Analysis, AnalysisWarning
from .config import AnalysisConfig
from .errors import AnalysisError, SchemaValidationError
from .models import (
    Attribute,
    BehaviorDescriptor,
    DocumentDescriptor,
    ElementDescriptor,
    Event,
    ImportDescriptor,
    InlineDocumentDescriptor,
    Property,
    ResolvedElement,
)
from .validation import validate

__all__ = [
    "Analysis",
    "AnalysisConfig",
    "AnalysisError",
    "AnalysisWarning",
    "Attribute",
    "BehaviorDescriptor",
    "DocumentDescriptor",
    "ElementDescriptor",
    "Event",
    "ImportDescriptor",
    "InlineDocumentDescriptor",
    "Property",
    "ResolvedElement",
    "SchemaValidationError",
    "validate",
]
