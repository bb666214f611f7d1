import logging
from pathlib import Path

from jsoutline.config import load_scan_config
from jsoutline.models import StructuralElement
from jsoutline.parsers import get_parser_for_file
from jsoutline.repository import find_repository_root, find_source_files, get_relative_path

logger = logging.getLogger(__name__)


def locate_entity(name: str, root: Path | None = None) -> list[StructuralElement]:
    """Find every class, function or method called name in the repository.

    Files are scanned according to the repository's .jsoutline config.
    Files that cannot be read are logged and skipped.

    Args:
        name: Entity name to search for
        root: Repository root (auto-detected if None)

    Returns:
        Matching elements, ordered by file path then position
    """
    if root is None:
        root = find_repository_root(Path.cwd())

    config = load_scan_config(root)
    results = []

    for source_file in find_source_files(root, config):
        parser = get_parser_for_file(source_file)
        if parser is None:
            # Extension configured for scanning but no parser handles it
            continue

        try:
            source_code = source_file.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.warning(f"Failed to read {source_file}: {e}")
            continue

        outline = parser.parse(source_code, get_relative_path(source_file, root))
        results.extend(e for e in outline.elements if e.name == name)

    return results
