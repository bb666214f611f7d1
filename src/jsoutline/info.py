from pathlib import Path

from jsoutline.models import ParseResult, StructuralElement
from jsoutline.parsers import get_parser_for_file
from jsoutline.repository import find_repository_root, get_relative_path


def get_file_outline(file_path: str, root: Path | None = None) -> ParseResult:
    """Parse a single file and return everything recovered from it.

    Args:
        file_path: Path to file (can be absolute or relative to repo root)
        root: Repository root (auto-detected if None)

    Returns:
        ParseResult whose records carry the path relative to root

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file type not supported
    """
    # Auto-detect repository root if not provided
    if root is None:
        root = find_repository_root(Path.cwd())

    file_path_obj = Path(file_path)
    if not file_path_obj.is_absolute():
        file_path_obj = root / file_path_obj

    if not file_path_obj.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    parser = get_parser_for_file(file_path_obj)
    if parser is None:
        raise ValueError(f"Unsupported file type: {file_path}")

    source_code = file_path_obj.read_text(encoding="utf-8", errors="replace")
    relative_path = get_relative_path(file_path_obj, root)

    return parser.parse(source_code, relative_path)


def _matches(element: StructuralElement, entity_name: str) -> bool:
    """Match "name" against any element, or "Class.method" against a method."""
    if "." in entity_name:
        class_name, _, method_name = entity_name.rpartition(".")
        return (
            element.kind == "method"
            and element.class_name == class_name
            and element.name == method_name
        )
    return element.name == entity_name


def get_entity_info(
    file_path: str,
    entity_name: str,
    root: Path | None = None
) -> StructuralElement | None:
    """Get the declaration of a named entity in a file.

    Args:
        file_path: Path to file (can be absolute or relative to repo root)
        entity_name: Class, function or method name, or "Class.method"
        root: Repository root (auto-detected if None)

    Returns:
        The first matching element in source order, or None if not found

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file type not supported
    """
    outline = get_file_outline(file_path, root)
    for element in outline.elements:
        if _matches(element, entity_name):
            return element
    return None
