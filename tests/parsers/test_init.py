from pathlib import Path

from jsoutline.parsers import get_parser_for_file
from jsoutline.parsers.javascript_parser import JavaScriptParser


def test_get_parser_for_javascript_file():
    parser = get_parser_for_file(Path("test.js"))

    assert parser is not None
    assert isinstance(parser, JavaScriptParser)


def test_get_parser_for_module_variants():
    for name in ("test.mjs", "test.cjs", "component.jsx"):
        assert isinstance(get_parser_for_file(Path(name)), JavaScriptParser)


def test_get_parser_for_uppercase_extension():
    parser = get_parser_for_file(Path("test.JS"))

    assert parser is not None
    assert isinstance(parser, JavaScriptParser)


def test_get_parser_for_unsupported_file():
    parser = get_parser_for_file(Path("test.txt"))

    assert parser is None


def test_get_parser_for_python_file():
    parser = get_parser_for_file(Path("test.py"))

    assert parser is None


def test_get_parser_for_typescript_file():
    parser = get_parser_for_file(Path("test.ts"))

    # TypeScript syntax is not supported
    assert parser is None
