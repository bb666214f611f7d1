"""jsoutline - heuristic structural outlines of JavaScript source files."""

try:
    from importlib.metadata import version

    __version__ = version("jsoutline")
except Exception:
    __version__ = "0.0.0.dev0+local"  # Fallback for development
