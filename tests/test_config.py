from component_analysis.config import AnalysisConfig


def test_defaults(monkeypatch):
    monkeypatch.delenv("COMPONENT_ANALYSIS_MANIFESTS", raising=False)
    monkeypatch.delenv("COMPONENT_ANALYSIS_STRICT_TAGS", raising=False)
    config = AnalysisConfig.from_env()
    assert config.manifest_filenames == ("package.json", "bower.json")
    assert config.strict_tag_names is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("COMPONENT_ANALYSIS_MANIFESTS", " component.json, ,package.json")
    monkeypatch.setenv("COMPONENT_ANALYSIS_STRICT_TAGS", "TRUE")
    config = AnalysisConfig.from_env()
    assert config.manifest_filenames == ("component.json", "package.json")
    assert config.strict_tag_names is True
