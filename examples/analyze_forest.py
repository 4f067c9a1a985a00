#!/usr/bin/env python3
"""
Example usage of the component analysis package.

This script builds a small descriptor forest by hand (the way a scanner
would), resolves it, prints the elements per package, and writes the
serialized analysis to disk.
"""

import sys
from pathlib import Path

from component_analysis import (
    Analysis,
    AnalysisConfig,
    BehaviorDescriptor,
    DocumentDescriptor,
    ElementDescriptor,
    Event,
    ImportDescriptor,
    Property,
)
from component_analysis.serialization import save_analysis


def build_forest():
    """Return a two-package forest with a shared behavior."""
    selectable = BehaviorDescriptor(
        class_name="Polymer.Selectable",
        properties=[Property(name="selected", type="String")],
        events=[Event(name="iron-select")],
    )
    tabs = ElementDescriptor(
        tag_name="paper-tabs",
        class_name="PaperTabs",
        properties=[Property(name="noink", type="Boolean", default="false")],
        behaviors=["Polymer.Selectable"],
    )
    return [
        DocumentDescriptor(url="/components/iron-selector/bower.json"),
        DocumentDescriptor(url="/components/paper-tabs/bower.json"),
        DocumentDescriptor(
            url="/components/iron-selector/selectable.html", entities=[selectable]
        ),
        DocumentDescriptor(
            url="/components/paper-tabs/paper-tabs.html",
            entities=[tabs],
            dependencies=[
                ImportDescriptor(url="/components/iron-selector/selectable.html")
            ],
        ),
    ]


def main():
    analysis = Analysis(build_forest(), AnalysisConfig.from_env())

    for package_dir in analysis.package_dirs:
        elements = analysis.get_elements_for_package(package_dir) or []
        print(f"{package_dir}: {[e.tag_name for e in elements]}")

    tabs = analysis.get_element("paper-tabs")
    for prop in tabs.properties:
        origin = prop.inherited_from or "local"
        print(f"  {prop.name} ({origin})")

    for warning in analysis.warnings:
        print(f"warning: {warning.message}")

    out = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("build/analysis.json")
    save_analysis(analysis, out, metadata={"example": "analyze_forest"})
    print(f"Wrote {out}")


if __name__ == "__main__":
    main()
