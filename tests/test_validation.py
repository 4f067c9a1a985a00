import threading

import pytest

from component_analysis import Analysis, validate
from component_analysis.errors import SchemaValidationError
from component_analysis.validation import SchemaValidator, get_validator


def _payload(version="1.2.3", **extra):
    data = {
        "schema_version": version,
        "elements": [
            {
                "tagname": "x-a",
                "description": "",
                "behaviors": ["B"],
                "properties": [{"name": "p1", "inheritedFrom": "B"}],
                "attributes": [],
                "events": [{"name": "changed"}],
            }
        ],
    }
    data.update(extra)
    return data


def test_valid_payload_passes():
    validate(_payload("1.2.3"))
    Analysis.validate(_payload("1.0.0"))


def test_major_version_gate():
    with pytest.raises(SchemaValidationError) as exc_info:
        validate(_payload("2.0.0"))
    error = exc_info.value
    assert error.errors == []
    assert "2.0.0" in error.version_error
    assert "2.0.0" in str(error)


@pytest.mark.parametrize(
    "version", ["1.0", "1.0.0-beta", "v1.0.0", "11.0.0", "1.\u0662.3", "1.2.\uff13"]
)
def test_malformed_versions_rejected(version):
    with pytest.raises(SchemaValidationError):
        validate(_payload(version))


def test_collects_every_structural_violation():
    data = {
        "schema_version": "1.0.0",
        "elements": [
            {"tagname": 5, "properties": [{"type": "string"}]},
            {"unexpected": True},
        ],
    }
    with pytest.raises(SchemaValidationError) as exc_info:
        validate(data)
    errors = exc_info.value.errors
    locations = [e.split(":")[0] for e in errors]
    assert "elements.0.tagname" in locations
    assert "elements.0.properties.0.name" in locations
    assert "elements.1.unexpected" in locations
    assert exc_info.value.version_error is None
    for message in errors:
        assert message in str(exc_info.value)


def test_missing_version_reports_both_outcomes():
    with pytest.raises(SchemaValidationError) as exc_info:
        validate({"elements": []})
    error = exc_info.value
    assert any(e.startswith("schema_version") for e in error.errors)
    assert error.version_error is not None


def test_non_mapping_rejected():
    with pytest.raises(SchemaValidationError) as exc_info:
        validate(None)
    assert exc_info.value.errors


def test_get_validator_is_a_single_instance():
    seen = []

    def grab():
        seen.append(get_validator())

    threads = [threading.Thread(target=grab) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert all(v is seen[0] for v in seen)
    assert get_validator() is seen[0]


def test_json_schema_describes_elements():
    schema = SchemaValidator().json_schema()
    assert "schema_version" in schema["properties"]
    assert "elements" in schema["required"]


def test_snake_case_keys_rejected():
    data = {
        "schema_version": "1.0.0",
        "elements": [{"tagname": "x-a", "properties": [{"name": "p", "inherited_from": "B"}]}],
    }
    with pytest.raises(SchemaValidationError) as exc_info:
        validate(data)
    assert "elements.0.properties.0.inherited_from" in [
        e.split(":")[0] for e in exc_info.value.errors
    ]


def test_validator_agrees_with_exported_schema():
    schema = SchemaValidator().json_schema()
    property_schema = schema["$defs"]["SerializedProperty"]
    assert "inherited_from" not in property_schema["properties"]
    assert property_schema["additionalProperties"] is False
