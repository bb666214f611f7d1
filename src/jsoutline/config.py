"""Configuration management for repository scanning."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from jsoutline.parsers import JAVASCRIPT_EXTENSIONS

CONFIG_FILE_NAME = ".jsoutline"

DEFAULT_EXCLUDE_DIRS = ("node_modules", "dist", "build", "coverage")


@dataclass
class ScanConfig:
    """Configuration for which files a repository scan visits.

    Attributes:
        extensions: File suffixes (with leading dot) treated as source files.
            Matching is case-insensitive.
        exclude_dirs: Directory names skipped anywhere in the tree. Hidden
            directories are always skipped.
    """
    extensions: list[str] = field(default_factory=lambda: list(JAVASCRIPT_EXTENSIONS))
    exclude_dirs: list[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_DIRS))


def _string_list(value, default: list[str]) -> list[str]:
    """Validate a YAML value as a list of strings, else fall back to default."""
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        return default
    return value


def load_scan_config(repo_root: Path | None = None) -> ScanConfig:
    """Load scan configuration from .jsoutline file in repository root.

    Args:
        repo_root: Path to repository root. If None, uses current directory.

    Returns:
        ScanConfig object with loaded or default values.

    Notes:
        If .jsoutline file doesn't exist or can't be parsed, returns default config.
        Expected YAML structure:

        ```yaml
        scan:
          extensions: [".js", ".mjs"]
          exclude_dirs: ["node_modules", "vendor"]
        ```
    """
    if repo_root is None:
        repo_root = Path.cwd()

    config_path = repo_root / CONFIG_FILE_NAME

    if not config_path.exists():
        return ScanConfig()

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            return ScanConfig()

        scan_config = data.get("scan", {})
        if not isinstance(scan_config, dict):
            return ScanConfig()

        defaults = ScanConfig()
        extensions = _string_list(scan_config.get("extensions"), defaults.extensions)
        return ScanConfig(
            # Accept "js" as well as ".js"
            extensions=[ext if ext.startswith(".") else f".{ext}" for ext in extensions],
            exclude_dirs=_string_list(scan_config.get("exclude_dirs"), defaults.exclude_dirs),
        )
    except (yaml.YAMLError, OSError, TypeError, ValueError):
        # Return default config on any parsing errors
        return ScanConfig()
