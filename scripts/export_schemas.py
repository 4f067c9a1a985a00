#!/usr/bin/env python
"""Export the serialized analysis JSON Schema artifact.

Usage:
    python scripts/export_schemas.py --out-dir build/schemas

Outputs:
    analysis.schema.json      JSON Schema of the serialized analysis format
"""
from __future__ import annotations

import argparse
import json
from pathlib import Path

from component_analysis.validation import get_validator


def export_analysis_schema(out_dir: Path) -> Path:
    schema = get_validator().json_schema()
    path = out_dir / "analysis.schema.json"
    path.write_text(json.dumps(schema, indent=2))
    return path


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--out-dir", default="build/schemas", help="Output directory")
    args = parser.parse_args()

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    schema_path = export_analysis_schema(out_dir)

    print(f"Exported analysis schema -> {schema_path}")


if __name__ == "__main__":  # pragma: no cover
    main()
