import json
import subprocess
import sys
from pathlib import Path

from component_analysis.schema import SCHEMA_VERSION, SerializedAnalysis

ROOT = Path(__file__).resolve().parent.parent


def test_model_schema_uses_aliases():
    schema = SerializedAnalysis.model_json_schema(by_alias=True)
    property_schema = schema["$defs"]["SerializedProperty"]
    assert "inheritedFrom" in property_schema["properties"]
    assert SCHEMA_VERSION.startswith("1.")


def test_export_script_runs(tmp_path):
    out_dir = tmp_path / "schemas"
    cmd = [sys.executable, "scripts/export_schemas.py", "--out-dir", str(out_dir)]
    subprocess.check_call(cmd, cwd=ROOT)
    schema_path = out_dir / "analysis.schema.json"
    assert schema_path.exists()
    data = json.loads(schema_path.read_text())
    assert data["title"] == "SerializedAnalysis"
