import os
from pathlib import Path

from jsoutline.config import ScanConfig


class RepositoryNotFoundError(Exception):
    """Raised when no repository root can be found above a path."""


def find_repository_root(start_path: Path) -> Path:
    """Walk up from start_path to the nearest directory containing .git.

    Args:
        start_path: File or directory to start from

    Returns:
        The repository root directory

    Raises:
        RepositoryNotFoundError: If no enclosing repository exists
    """
    current = start_path.resolve()
    if current.is_file():
        current = current.parent

    for candidate in (current, *current.parents):
        if (candidate / ".git").exists():
            return candidate

    raise RepositoryNotFoundError(f"Not in a git repository: {start_path}")


def get_relative_path(file_path: Path, root: Path) -> str:
    """Return file_path relative to root as a POSIX string."""
    return file_path.resolve().relative_to(root.resolve()).as_posix()


def find_source_files(root: Path, config: ScanConfig | None = None) -> list[Path]:
    """Find all source files under root that the scan configuration selects.

    Hidden directories and directories named in config.exclude_dirs are not
    descended into.

    Args:
        root: Directory to scan
        config: Scan configuration, defaults if None

    Returns:
        Sorted list of matching file paths
    """
    if config is None:
        config = ScanConfig()

    extensions = {ext.lower() for ext in config.extensions}
    excluded = set(config.exclude_dirs)
    files = []

    for dirpath, dirnames, filenames in os.walk(root):
        # Prune in place so os.walk skips these subtrees
        dirnames[:] = [
            d for d in dirnames
            if not d.startswith(".") and d not in excluded
        ]
        for filename in filenames:
            if Path(filename).suffix.lower() in extensions:
                files.append(Path(dirpath) / filename)

    return sorted(files)
