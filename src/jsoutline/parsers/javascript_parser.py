from jsoutline.models import ParseResult
from jsoutline.parsers.base import BaseParser
from jsoutline.parsers.module_edges import extract_exports, extract_imports
from jsoutline.parsers.structure import extract_classes, extract_functions
from jsoutline.scanning import LineIndex


class JavaScriptParser(BaseParser):
    """Heuristic parser for JavaScript source built on regular expressions.

    This is a best-effort structural scan for common, reasonably formatted
    code, not a full grammar. All scanning state lives inside a single call
    to parse(), so one instance can be shared between threads.
    """

    def parse(self, source_code: str, file_path: str) -> ParseResult:
        """Extract declarations, imports and exports from JavaScript source.

        Passes run in a fixed order: imports, exports, classes (each with
        its methods), then functions. Function matches inside a class, or
        already recorded as an 'export default function', are left out.

        Args:
            source_code: JavaScript source code to parse
            file_path: Identifier for the file, echoed into every record

        Returns:
            ParseResult with elements, imports and exports
        """
        lines = LineIndex(source_code)

        imports = extract_imports(source_code, file_path, lines)
        exports = extract_exports(source_code, file_path, lines)

        elements = extract_classes(source_code, file_path, lines)
        elements.extend(extract_functions(
            source_code, file_path, lines, classes=elements, exports=exports
        ))

        return ParseResult(
            elements=tuple(elements),
            imports=tuple(imports),
            exports=tuple(exports),
        )
