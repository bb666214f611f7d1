from pathlib import Path

from jsoutline.parsers.base import BaseParser
from jsoutline.parsers.javascript_parser import JavaScriptParser

JAVASCRIPT_EXTENSIONS = (".js", ".mjs", ".cjs", ".jsx")


def get_parser_for_file(file_path: Path) -> BaseParser | None:
    """Return a parser suited to the file's extension.

    Args:
        file_path: Path to the source file

    Returns:
        Parser instance, or None if the file type is not supported
    """
    if file_path.suffix.lower() in JAVASCRIPT_EXTENSIONS:
        return JavaScriptParser()
    return None
