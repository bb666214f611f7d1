"""Class, method and function declaration matching for JavaScript source.

Each declaration header is located with a regular expression that also
captures an optional comment immediately before it. The extent of the
declaration's body is then recovered by brace matching.
"""

import logging
import re

from jsoutline.comments import summarize_comment
from jsoutline.models import ExportEdge, Location, Span, StructuralElement
from jsoutline.parsers.base import UnbalancedBracesError
from jsoutline.scanning import LineIndex, find_closing_brace

logger = logging.getLogger(__name__)

_IDENT = r"[A-Za-z_$][\w$]*"

# A single JSDoc block (which may not contain "*/") or a run of '//' lines
_LEADING_COMMENT = (
    r"(?:\s*/\*\*(?P<doc>(?:(?!\*/)[\s\S])*)\*/\s*"
    r"|\s*^(?P<line_comments>(?:[ \t]*//[^\r\n]*\r?\n)+))?"
)

_CLASS_PATTERN = re.compile(
    _LEADING_COMMENT
    + rf"^[ \t]*(?P<header>(?:export\s+)?(?:default\s+)?class\s+(?P<name>{_IDENT})"
    + r"\s*(?:extends\s+(?P<base>[A-Za-z_$][\w$.]*))?\s*\{)",
    re.MULTILINE,
)

_METHOD_PATTERN = re.compile(
    _LEADING_COMMENT
    + r"^[ \t]*(?P<header>(?P<static>static\s+)?(?P<modifier>(?:async|get|set)\s+)?"
    + rf"(?P<name>(?:\*\s*)?{_IDENT}|constructor)\s*\((?P<params>[^)]*)\)\s*\{{)",
    re.MULTILINE,
)

_FUNCTION_PATTERN = re.compile(
    _LEADING_COMMENT
    + r"^[ \t]*(?P<header>(?:export\s+)?(?:default\s+)?(?:async\s+)?function(?:\s*\*\s*|\s+)"
    + rf"(?P<name>{_IDENT})\s*\((?P<params>[^)]*)\)\s*\{{)",
    re.MULTILINE,
)

_DEFAULT_FUNCTION_EXPORT = re.compile(r"export\s+default\s+(?:async\s+)?function\b")

# Statements inside a method body look like method headers: "if (x) {"
_CONTROL_KEYWORDS = frozenset({
    "if", "for", "while", "switch", "catch", "with", "function", "return",
})


def _normalize(text: str) -> str:
    """Collapse runs of whitespace to single spaces."""
    return " ".join(text.split())


def _summary(match: re.Match) -> str | None:
    return summarize_comment(match.group("doc"), match.group("line_comments"))


def _require_block_end(
    text: str,
    open_index: int,
    kind: str,
    name: str,
    start_line: int,
) -> int:
    """Return the index of the brace closing the block opened at open_index.

    Raises:
        UnbalancedBracesError: If the block never closes.
    """
    close_index = find_closing_brace(text, open_index)
    if close_index is None:
        raise UnbalancedBracesError(kind, name, start_line)
    return close_index


def extract_methods(
    source_code: str,
    body_start: int,
    body_end: int,
    class_name: str,
    file_path: str,
    lines: LineIndex,
) -> list[StructuralElement]:
    """Extract method definitions from one class body.

    The body text (strictly between the class braces) is scanned on its own;
    every offset found is translated back by body_start. Once a method is
    recorded, scanning resumes after its closing brace.

    Args:
        source_code: Full file text
        body_start: Index just past the class's opening brace
        body_end: Index of the class's closing brace
        class_name: Name of the enclosing class
        file_path: Identifier echoed into each element
        lines: Line index for source_code

    Returns:
        List of method elements in source order
    """
    body = source_code[body_start:body_end]
    methods = []
    pos = 0

    while True:
        match = _METHOD_PATTERN.search(body, pos)
        if match is None:
            break

        name = match.group("name").replace("*", "").strip()
        if name in _CONTROL_KEYWORDS:
            pos = match.end()
            continue

        header_start = body_start + match.start("header")
        start_line = lines.line_of(header_start)
        try:
            local_close = _require_block_end(body, match.end() - 1, "method", name, start_line)
        except UnbalancedBracesError as e:
            logger.warning(f"[{file_path}] {e} in class {class_name}. Skipping.")
            pos = match.end()
            continue

        close_index = body_start + local_close
        modifiers = "".join(
            _normalize(group) + " "
            for group in (match.group("static"), match.group("modifier"))
            if group
        )
        methods.append(StructuralElement(
            kind="method",
            name=name,
            path=file_path,
            signature=f"{modifiers}{name}({_normalize(match.group('params'))})",
            snippet=source_code[header_start:close_index + 1],
            extent=Location(start=start_line, end=lines.line_of(close_index)),
            span=Span(start=header_start, end=close_index + 1),
            summary=_summary(match),
            class_name=class_name,
        ))
        pos = local_close + 1

    return methods


def extract_classes(
    source_code: str,
    file_path: str,
    lines: LineIndex,
) -> list[StructuralElement]:
    """Extract class declarations together with their methods.

    Each class element is immediately followed by the methods of its body.

    Args:
        source_code: Full file text
        file_path: Identifier echoed into each element
        lines: Line index for source_code

    Returns:
        List of class and method elements
    """
    elements = []

    for match in _CLASS_PATTERN.finditer(source_code):
        name = match.group("name")
        header_start = match.start("header")
        open_index = match.end() - 1
        start_line = lines.line_of(header_start)

        try:
            close_index = _require_block_end(source_code, open_index, "class", name, start_line)
        except UnbalancedBracesError as e:
            logger.warning(f"[{file_path}] {e}. Skipping.")
            continue

        elements.append(StructuralElement(
            kind="class",
            name=name,
            path=file_path,
            signature=f"class {name} {{ ... }}",
            snippet=source_code[header_start:close_index + 1],
            extent=Location(start=start_line, end=lines.line_of(close_index)),
            span=Span(start=header_start, end=close_index + 1),
            summary=_summary(match),
        ))
        elements.extend(extract_methods(
            source_code, open_index + 1, close_index, name, file_path, lines
        ))

    return elements


def _exported_as_default(start_line: int, exports: list[ExportEdge]) -> bool:
    """Check whether an 'export default function' edge starts on start_line."""
    return any(
        edge.kind == "default_expression"
        and edge.extent.start == start_line
        and _DEFAULT_FUNCTION_EXPORT.match(edge.raw)
        for edge in exports
    )


def extract_functions(
    source_code: str,
    file_path: str,
    lines: LineIndex,
    classes: list[StructuralElement] | None = None,
    exports: list[ExportEdge] | None = None,
) -> list[StructuralElement]:
    """Extract function declarations from the whole file.

    A match is skipped when its header starts inside the span of one of the
    given classes, or when it is the function of an 'export default function'
    statement already recorded in exports.

    Args:
        source_code: Full file text
        file_path: Identifier echoed into each element
        lines: Line index for source_code
        classes: Class elements recovered from the same text
        exports: Export edges recovered from the same text

    Returns:
        List of function elements in source order
    """
    class_spans = [c.span for c in classes or [] if c.kind == "class"]
    exports = exports or []
    functions = []

    for match in _FUNCTION_PATTERN.finditer(source_code):
        name = match.group("name")
        header_start = match.start("header")
        if any(span.contains(header_start) for span in class_spans):
            continue

        start_line = lines.line_of(header_start)
        if _exported_as_default(start_line, exports):
            continue

        try:
            close_index = _require_block_end(
                source_code, match.end() - 1, "function", name, start_line
            )
        except UnbalancedBracesError as e:
            logger.warning(f"[{file_path}] {e}. Skipping.")
            continue

        functions.append(StructuralElement(
            kind="function",
            name=name,
            path=file_path,
            signature=f"function {name}({_normalize(match.group('params'))})",
            snippet=source_code[header_start:close_index + 1],
            extent=Location(start=start_line, end=lines.line_of(close_index)),
            span=Span(start=header_start, end=close_index + 1),
            summary=_summary(match),
        ))

    return functions
