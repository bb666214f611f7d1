"""Low-level text scanning helpers shared by the parsers.

Offsets are plain string indices into the source text. Line numbers are
1-based to match what editors display.
"""

from bisect import bisect_left


def line_number(text: str, offset: int) -> int:
    """Convert a character offset to a 1-based line number.

    Args:
        text: The full source text.
        offset: Character index into text.

    Returns:
        Number of newlines strictly before offset, plus one.
    """
    return text.count("\n", 0, offset) + 1


class LineIndex:
    """Precomputed newline positions for repeated offset-to-line lookups.

    Gives the same answers as line_number() without rescanning the text
    for every lookup. Build one per parse; the index holds no reference to
    anything but the newline offsets of the text it was built from.
    """

    def __init__(self, text: str):
        self._newlines = [i for i, ch in enumerate(text) if ch == "\n"]

    def line_of(self, offset: int) -> int:
        """Return the 1-based line number containing offset."""
        # Newlines at indices < offset are the ones strictly preceding it
        return bisect_left(self._newlines, offset) + 1


def find_closing_brace(text: str, open_index: int) -> int | None:
    """Find the matching closing brace for the opening brace at open_index.

    Braces are counted naively: braces inside strings, template literals,
    regular expressions and comments are treated as structural.

    Args:
        text: The source text to scan.
        open_index: Index of an opening '{' character.

    Returns:
        Index of the matching '}', or None if the text ends first.
    """
    depth = 0
    for i in range(open_index, len(text)):
        ch = text[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
    return None
