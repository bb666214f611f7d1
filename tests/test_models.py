from dataclasses import FrozenInstanceError, asdict

import pytest

from jsoutline.models import (
    ExportedItem,
    ImportEdge,
    ImportSpecifier,
    Location,
    ParseResult,
    Span,
    StructuralElement,
)


def _element(kind="function", name="f", class_name=None):
    return StructuralElement(
        kind=kind,
        name=name,
        path="src/example.js",
        signature=f"function {name}()",
        snippet=f"function {name}() {{}}",
        extent=Location(start=1, end=1),
        span=Span(start=0, end=16),
        class_name=class_name,
    )


def test_location_creation():
    location = Location(start=10, end=20)
    assert location.start == 10
    assert location.end == 20


def test_span_contains_is_end_exclusive():
    span = Span(start=5, end=10)

    assert span.contains(5)
    assert span.contains(9)
    assert not span.contains(10)
    assert not span.contains(4)


def test_element_defaults():
    element = _element()

    assert element.summary is None
    assert element.class_name is None


def test_element_is_immutable():
    element = _element()

    with pytest.raises(FrozenInstanceError):
        element.name = "other"


def test_element_to_dict():
    element = _element(name="go")

    assert asdict(element) == {
        "kind": "function",
        "name": "go",
        "path": "src/example.js",
        "signature": "function go()",
        "snippet": "function go() {}",
        "extent": {"start": 1, "end": 1},
        "span": {"start": 0, "end": 16},
        "summary": None,
        "class_name": None,
    }


def test_import_specifier_defaults():
    specifier = ImportSpecifier(kind="side-effect")

    assert specifier.imported_name is None
    assert specifier.local_name is None


def test_exported_item_creation():
    item = ExportedItem(public_name="c", local_name="b")

    assert item.public_name == "c"
    assert item.local_name == "b"


def test_parse_result_defaults_are_empty():
    result = ParseResult()

    assert result.elements == ()
    assert result.imports == ()
    assert result.exports == ()
    assert result.to_dict() == {"elements": (), "imports": (), "exports": ()}


def test_parse_result_kind_filters():
    result = ParseResult(elements=(
        _element(kind="class", name="C"),
        _element(kind="method", name="m", class_name="C"),
        _element(kind="function", name="f"),
    ))

    assert [e.name for e in result.classes()] == ["C"]
    assert [e.name for e in result.methods()] == ["m"]
    assert [e.name for e in result.functions()] == ["f"]


def test_parse_results_compare_structurally():
    edge = ImportEdge(
        raw="import 'x';",
        source="x",
        specifiers=(ImportSpecifier(kind="side-effect"),),
        path="a.js",
        extent=Location(start=1, end=1),
        span=Span(start=0, end=11),
    )

    assert ParseResult(imports=(edge,)) == ParseResult(imports=(edge,))
