"""Import and export statement extraction for JavaScript modules.

Every ``import`` or ``export`` keyword found at the start of a line is an
anchor. The statement forms are tried at each anchor in a fixed order and the
first one that matches wins, so a single statement never yields two records.
"""

import logging
import re

from jsoutline.models import (
    ExportedItem,
    ExportEdge,
    ImportEdge,
    ImportSpecifier,
    Location,
    Span,
)
from jsoutline.parsers.base import UnbalancedBracesError
from jsoutline.scanning import LineIndex, find_closing_brace

logger = logging.getLogger(__name__)

_IDENT = r"[A-Za-z_$][\w$]*"
_SOURCE = r"(?P<quote>['\"])(?P<source>.+?)(?P=quote)"
_END = r"(?:[ \t]*;)?"

_IMPORT_ANCHOR = re.compile(r"^[ \t]*(?P<keyword>import)\b", re.MULTILINE)
_EXPORT_ANCHOR = re.compile(r"^[ \t]*(?P<keyword>export)\b", re.MULTILINE)

_ALIAS = re.compile(rf"^(?P<name>{_IDENT})\s+as\s+(?P<alias>{_IDENT})$")

# import React from 'react'
_IMPORT_DEFAULT = re.compile(
    rf"import\s+(?P<local>{_IDENT})\s+from\s*{_SOURCE}{_END}"
)
# import React, { useState } from 'react' / import fs, * as all from 'fs'
_IMPORT_DEFAULT_AND_MORE = re.compile(
    rf"import\s+(?P<local>{_IDENT})\s*,\s*"
    rf"(?:\{{(?P<names>[^}}]*)\}}|\*\s*as\s+(?P<namespace>{_IDENT}))"
    rf"\s*from\s*{_SOURCE}{_END}"
)
# import * as path from 'path'
_IMPORT_NAMESPACE = re.compile(
    rf"import\s*\*\s*as\s+(?P<local>{_IDENT})\s+from\s*{_SOURCE}{_END}"
)
# import { a, b as c } from 'mod'
_IMPORT_NAMED = re.compile(
    rf"import\s*\{{(?P<names>[^}}]*)\}}\s*from\s*{_SOURCE}{_END}"
)
# import './styles.css'
_IMPORT_SIDE_EFFECT = re.compile(rf"import\s*{_SOURCE}{_END}")

# export * from 'mod' / export * as ns from 'mod'
_EXPORT_ALL = re.compile(
    rf"export\s*\*\s*(?:as\s+(?P<alias>{_IDENT})\s+)?from\s*{_SOURCE}{_END}"
)
# export { a, b as c } / export { a } from 'mod'
_EXPORT_NAMED_LIST = re.compile(
    rf"export\s*\{{(?P<names>[^}}]*)\}}(?:\s*from\s*{_SOURCE})?{_END}"
)
# export default foo; / export default config.routes;
_EXPORT_DEFAULT_IDENTIFIER = re.compile(
    rf"export\s+default\s+(?!(?:function|class|new|async)\b)"
    rf"(?P<local>{_IDENT}(?:\.{_IDENT})*)[ \t]*(?:;|$)",
    re.MULTILINE,
)
# export const x = ... / export async function f() / export class C
_EXPORT_DECLARATION = re.compile(
    rf"export\s+(?:async\s+)?(?P<keyword>const|let|var|function|class)"
    rf"(?:\s*\*\s*|\s+)(?P<name>{_IDENT})"
)
# export default function () {} / class {} / new Foo() / factory() / { ... } / 42
_EXPORT_DEFAULT_EXPRESSION = re.compile(
    rf"export\s+default\s+(?:"
    rf"(?P<function>(?:async\s+)?function\b\s*\*?\s*(?P<function_name>{_IDENT})?\s*\()"
    rf"|(?P<class>class\b(?:\s+(?P<class_name>{_IDENT}))?(?:\s+extends\s+[\w$.]+)?\s*\{{)"
    rf"|new\s+"
    rf"|{_IDENT}\s*\("
    rf"|[{{(\[\"'`]"
    rf"|(?=[^\s;])"
    rf")"
)


def parse_import_specifiers(specifier_string: str | None) -> list[ImportSpecifier]:
    """Parse the contents of an import's braces, e.g. "a, b as c".

    Args:
        specifier_string: Text between the curly braces.

    Returns:
        Named specifiers in source order. A name without an alias is
        bound locally under its imported name.
    """
    specifiers = []
    if not specifier_string or not specifier_string.strip():
        return specifiers

    for part in specifier_string.split(","):
        part = part.strip()
        if not part:
            continue
        alias = _ALIAS.match(part)
        if alias:
            specifiers.append(ImportSpecifier(
                kind="named",
                imported_name=alias.group("name"),
                local_name=alias.group("alias"),
            ))
        else:
            specifiers.append(ImportSpecifier(kind="named", imported_name=part, local_name=part))

    return specifiers


def parse_export_specifiers(specifier_string: str | None) -> list[ExportedItem]:
    """Parse the contents of an export's braces, e.g. "a, b as c".

    In "b as c" the public name is c and the local name is b.
    """
    items = []
    if not specifier_string or not specifier_string.strip():
        return items

    for part in specifier_string.split(","):
        part = part.strip()
        if not part:
            continue
        alias = _ALIAS.match(part)
        if alias:
            items.append(ExportedItem(public_name=alias.group("alias"), local_name=alias.group("name")))
        else:
            items.append(ExportedItem(public_name=part, local_name=part))

    return items


def _default_specifiers(match: re.Match) -> list[ImportSpecifier]:
    return [ImportSpecifier(kind="default", local_name=match.group("local"))]


def _default_and_more_specifiers(match: re.Match) -> list[ImportSpecifier]:
    specifiers = _default_specifiers(match)
    if match.group("namespace"):
        specifiers.append(ImportSpecifier(kind="namespace", local_name=match.group("namespace")))
    else:
        specifiers.extend(parse_import_specifiers(match.group("names")))
    return specifiers


def _namespace_specifiers(match: re.Match) -> list[ImportSpecifier]:
    return [ImportSpecifier(kind="namespace", local_name=match.group("local"))]


def _named_specifiers(match: re.Match) -> list[ImportSpecifier]:
    return parse_import_specifiers(match.group("names"))


def _side_effect_specifiers(match: re.Match) -> list[ImportSpecifier]:
    return [ImportSpecifier(kind="side-effect")]


# Tried in this order at every import anchor
_IMPORT_FORMS = (
    (_IMPORT_DEFAULT, _default_specifiers),
    (_IMPORT_DEFAULT_AND_MORE, _default_and_more_specifiers),
    (_IMPORT_NAMESPACE, _namespace_specifiers),
    (_IMPORT_NAMED, _named_specifiers),
    (_IMPORT_SIDE_EFFECT, _side_effect_specifiers),
)


def _statement_end(source_code: str, start: int) -> int:
    """Index of the nearer of the next ';' or newline (or the last character)."""
    candidates = [
        i for i in (source_code.find(";", start), source_code.find("\n", start))
        if i != -1
    ]
    return min(candidates) if candidates else len(source_code) - 1


def _block_end(
    source_code: str,
    search_from: int,
    kind: str,
    name: str,
    start_line: int,
) -> int:
    """Index of the '}' closing the first block at or after search_from.

    Raises:
        UnbalancedBracesError: If there is no block or it never closes.
    """
    open_index = source_code.find("{", search_from)
    close_index = find_closing_brace(source_code, open_index) if open_index != -1 else None
    if close_index is None:
        raise UnbalancedBracesError(kind, name, start_line)
    return close_index


def _raw_text(source_code: str, start: int, end: int) -> str:
    """Statement text from start through end, without a trailing newline."""
    stop = end if source_code[end] == "\n" else end + 1
    return source_code[start:stop].rstrip()


def extract_imports(
    source_code: str,
    file_path: str,
    lines: LineIndex | None = None,
) -> list[ImportEdge]:
    """Extract import statements in source order.

    Args:
        source_code: JavaScript source text
        file_path: Identifier echoed into each edge
        lines: Line index for source_code, built if not supplied

    Returns:
        List of ImportEdge objects
    """
    if lines is None:
        lines = LineIndex(source_code)

    imports = []
    for anchor in _IMPORT_ANCHOR.finditer(source_code):
        start = anchor.start("keyword")
        for pattern, build_specifiers in _IMPORT_FORMS:
            match = pattern.match(source_code, start)
            if match is None:
                continue

            raw = match.group(0).rstrip()
            imports.append(ImportEdge(
                raw=raw,
                source=match.group("source"),
                specifiers=tuple(build_specifiers(match)),
                path=file_path,
                extent=Location(start=lines.line_of(start), end=lines.line_of(start + len(raw) - 1)),
                span=Span(start=start, end=start + len(raw)),
            ))
            break

    return imports


def _export_edge(
    raw: str,
    kind: str,
    items: list[ExportedItem],
    start: int,
    file_path: str,
    lines: LineIndex,
    source: str | None = None,
) -> ExportEdge:
    return ExportEdge(
        raw=raw,
        kind=kind,
        exported_items=tuple(items),
        path=file_path,
        extent=Location(start=lines.line_of(start), end=lines.line_of(start + len(raw) - 1)),
        span=Span(start=start, end=start + len(raw)),
        source=source,
    )


def _declaration_end(
    source_code: str,
    match: re.Match,
    kind: str | None,
    name: str,
    file_path: str,
    lines: LineIndex,
) -> int:
    """Find where an exported declaration or default expression ends.

    Functions and classes end at the brace closing their body. Anything else
    ends at the nearer of the next ';' or newline.
    """
    start = match.start()
    if kind is None:
        return _statement_end(source_code, start)

    try:
        # Class headers already end on their opening brace
        return _block_end(source_code, match.end() - 1, kind, name, lines.line_of(start))
    except UnbalancedBracesError as e:
        logger.warning(f"[{file_path}] {e}; export ends at its header")
        return match.end() - 1


def _match_export(
    source_code: str,
    start: int,
    file_path: str,
    lines: LineIndex,
) -> ExportEdge | None:
    """Try each export form at start, returning the first edge that matches."""
    match = _EXPORT_ALL.match(source_code, start)
    if match:
        public_name = match.group("alias") or "*"
        return _export_edge(
            match.group(0).rstrip(), "re-export_all",
            [ExportedItem(public_name=public_name, local_name="*")],
            start, file_path, lines, source=match.group("source"),
        )

    match = _EXPORT_NAMED_LIST.match(source_code, start)
    if match:
        source = match.group("source")
        return _export_edge(
            match.group(0).rstrip(), "re-export_named" if source else "named_list",
            parse_export_specifiers(match.group("names")),
            start, file_path, lines, source=source,
        )

    match = _EXPORT_DEFAULT_IDENTIFIER.match(source_code, start)
    if match:
        return _export_edge(
            match.group(0).rstrip(), "default",
            [ExportedItem(public_name="default", local_name=match.group("local"))],
            start, file_path, lines,
        )

    match = _EXPORT_DECLARATION.match(source_code, start)
    if match:
        keyword = match.group("keyword")
        name = match.group("name")
        block_kind = keyword if keyword in ("function", "class") else None
        end = _declaration_end(source_code, match, block_kind, name, file_path, lines)
        return _export_edge(
            _raw_text(source_code, start, end), "declaration",
            [ExportedItem(public_name=name, local_name=name)],
            start, file_path, lines,
        )

    match = _EXPORT_DEFAULT_EXPRESSION.match(source_code, start)
    if match:
        if match.group("function"):
            block_kind = "function"
            local_name = match.group("function_name") or "anonymous_function"
        elif match.group("class"):
            block_kind = "class"
            local_name = match.group("class_name") or "anonymous_class"
        else:
            block_kind = None
            local_name = "anonymous_expression"
        end = _declaration_end(source_code, match, block_kind, local_name, file_path, lines)
        return _export_edge(
            _raw_text(source_code, start, end), "default_expression",
            [ExportedItem(public_name="default", local_name=local_name)],
            start, file_path, lines,
        )

    return None


def extract_exports(
    source_code: str,
    file_path: str,
    lines: LineIndex | None = None,
) -> list[ExportEdge]:
    """Extract export statements in source order.

    Forms are tried in this order: re-export all, named list (with or
    without a source), default identifier, declaration, default expression.
    The default-expression form is only considered when nothing else matched
    the statement, so "export default foo;" is recorded once.

    Args:
        source_code: JavaScript source text
        file_path: Identifier echoed into each edge
        lines: Line index for source_code, built if not supplied

    Returns:
        List of ExportEdge objects
    """
    if lines is None:
        lines = LineIndex(source_code)

    exports = []
    for anchor in _EXPORT_ANCHOR.finditer(source_code):
        edge = _match_export(source_code, anchor.start("keyword"), file_path, lines)
        if edge is not None:
            exports.append(edge)

    return exports
