import pytest

from component_analysis.errors import StructuralAmbiguityError, UnattributablePathError
from component_analysis.gatherers import ElementGatherer, PackageGatherer, path_from_ancestors
from component_analysis.models import (
    BehaviorDescriptor,
    DocumentDescriptor,
    ElementDescriptor,
    InlineDocumentDescriptor,
)
from component_analysis.walker import AnalysisWalker


def _gather(forest):
    packages = PackageGatherer()
    elements = ElementGatherer()
    AnalysisWalker(forest).walk([packages, elements])
    return packages, elements


def test_package_dirs_from_manifest_names():
    forest = [
        DocumentDescriptor(url="/a/package.json"),
        DocumentDescriptor(url="/a/b/bower.json"),
        DocumentDescriptor(url="/a/b/package.json"),
        DocumentDescriptor(url="/c/index.html"),
    ]
    packages, _ = _gather(forest)
    assert packages.package_dirs == {"/a", "/a/b"}


def test_custom_manifest_names():
    packages = PackageGatherer(["component.json"])
    forest = [
        DocumentDescriptor(url="/a/package.json"),
        DocumentDescriptor(url="/x/component.json"),
    ]
    AnalysisWalker(forest).walk([packages])
    assert packages.package_dirs == {"/x"}


def test_owning_path_is_nearest_document_with_url():
    element = ElementDescriptor(tag_name="x-a")
    behavior = BehaviorDescriptor(class_name="B")
    anonymous = DocumentDescriptor(url="", entities=[element])
    inline = InlineDocumentDescriptor(language="js", entities=[behavior])
    forest = [
        DocumentDescriptor(
            url="/outer.html",
            entities=[DocumentDescriptor(url="/inner.html", entities=[anonymous, inline])],
        )
    ]
    _, elements = _gather(forest)
    assert elements.element_paths[element] == "/inner.html"
    assert elements.behavior_paths[behavior] == "/inner.html"


def test_shared_element_same_path_recorded_once():
    element = ElementDescriptor(tag_name="x-a")
    forest = [
        DocumentDescriptor(
            url="/a.html",
            entities=[element, DocumentDescriptor(url="", entities=[element])],
        )
    ]
    _, elements = _gather(forest)
    assert elements.element_descriptors == [element]


def test_shared_element_distinct_paths_is_ambiguous():
    element = ElementDescriptor(tag_name="x-a")
    forest = [
        DocumentDescriptor(url="/a.html", entities=[element]),
        DocumentDescriptor(url="/b.html", entities=[element]),
    ]
    with pytest.raises(StructuralAmbiguityError) as exc_info:
        _gather(forest)
    assert "/a.html" in str(exc_info.value)
    assert "/b.html" in str(exc_info.value)


def test_shared_behavior_distinct_paths_is_ambiguous():
    behavior = BehaviorDescriptor(class_name="B")
    forest = [
        DocumentDescriptor(url="/a.html", entities=[behavior]),
        DocumentDescriptor(url="/b.html", dependencies=[behavior]),
    ]
    with pytest.raises(StructuralAmbiguityError):
        _gather(forest)


def test_element_without_document_url_is_unattributable():
    forest = [DocumentDescriptor(url="", entities=[ElementDescriptor(tag_name="x-lost")])]
    with pytest.raises(UnattributablePathError) as exc_info:
        _gather(forest)
    assert "x-lost" in str(exc_info.value)


def test_first_seen_order_preserved():
    first = ElementDescriptor(tag_name="x-first")
    second = ElementDescriptor(tag_name="x-second")
    forest = [
        DocumentDescriptor(url="/a.html", entities=[first]),
        DocumentDescriptor(url="/b.html", entities=[second]),
    ]
    _, elements = _gather(forest)
    assert elements.element_descriptors == [first, second]


def test_path_from_ancestors_without_documents():
    assert path_from_ancestors(()) is None


def test_behavior_without_document_url_is_unattributable():
    behavior = BehaviorDescriptor(class_name="Orphan")
    forest = [DocumentDescriptor(url="", entities=[InlineDocumentDescriptor(entities=[behavior])])]
    with pytest.raises(UnattributablePathError) as exc_info:
        _gather(forest)
    assert exc_info.value.descriptor is behavior
    assert "Orphan" in str(exc_info.value)
