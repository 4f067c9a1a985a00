import json

from component_analysis.cli import main


def _write(path, data):
    path.write_text(json.dumps(data))
    return str(path)


def test_validate_accepts_valid_file(tmp_path, capsys):
    good = _write(tmp_path / "good.json", {"schema_version": "1.0.0", "elements": []})
    assert main(["validate", good]) == 0
    assert "✓" in capsys.readouterr().out


def test_validate_reports_every_problem(tmp_path, capsys):
    good = _write(tmp_path / "good.json", {"schema_version": "1.0.0", "elements": []})
    bad = _write(tmp_path / "bad.json", {"schema_version": "2.0.0", "elements": [{"tagname": 1}]})
    broken = tmp_path / "broken.json"
    broken.write_text("{not json")

    assert main(["validate", good, bad, str(broken)]) == 1
    out = capsys.readouterr().out
    assert f"✓ {good}" in out
    assert f"✗ {bad}" in out
    assert "elements.0.tagname" in out
    assert "2.0.0" in out
    assert f"✗ {broken}" in out


def test_schema_written_to_file(tmp_path):
    out = tmp_path / "schemas" / "analysis.schema.json"
    assert main(["schema", "--out", str(out)]) == 0
    schema = json.loads(out.read_text())
    assert "elements" in schema["properties"]


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out
