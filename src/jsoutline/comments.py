"""Summaries for declarations derived from the comments that precede them.

Handles JSDoc-style blocks (``/** ... */``) and runs of ``//`` line comments.
"""

import re

# Summaries longer than this are cut down to their first sentence
MAX_SUMMARY_LENGTH = 100

_DOC_OPEN = re.compile(r"^\s*/\*\*!?")
_DOC_CLOSE = re.compile(r"\*/\s*$")
_DOC_LINE_MARKER = re.compile(r"^\s*\*\s?")
_LINE_COMMENT_MARKER = re.compile(r"^\s*//\s?")


def _clean_doc_comment(doc_comment: str) -> list[str]:
    """Strip JSDoc delimiters and leading '*' markers from each line."""
    body = _DOC_OPEN.sub("", doc_comment)
    body = _DOC_CLOSE.sub("", body)
    # A bare body (as captured between the delimiters) may still open with '!'
    if body.startswith("!"):
        body = body[1:]
    return [_DOC_LINE_MARKER.sub("", line).strip() for line in body.strip().split("\n")]


def _clean_line_comments(line_comments: str) -> list[str]:
    """Strip leading '//' markers from each line."""
    return [
        _LINE_COMMENT_MARKER.sub("", line).strip()
        for line in line_comments.strip().split("\n")
    ]


def _collect_summary(lines: list[str]) -> str | None:
    """Join the leading descriptive lines of a cleaned comment.

    Stops at the first tag line ('@param', '@returns', ...) or at the first
    blank line once some text has been collected.
    """
    summary = ""
    for line in lines:
        if line.startswith("@"):
            break
        if not line:
            if summary:
                break
            continue

        summary = f"{summary} {line}" if summary else line
        if len(summary) > MAX_SUMMARY_LENGTH and "." in summary:
            summary = summary[:summary.index(".") + 1]
            break

    summary = summary.strip()
    return summary or None


def summarize_comment(
    doc_comment: str | None = None,
    line_comments: str | None = None,
) -> str | None:
    """Reduce the comment preceding a declaration to a one-line summary.

    Args:
        doc_comment: A JSDoc block, either with or without its delimiters.
        line_comments: Consecutive '//' comment lines, newline separated.

    Returns:
        The summary text, or None if the comment has no descriptive text.

    Examples:
        >>> summarize_comment("/** Adds two numbers.\\n * @param a */")
        'Adds two numbers.'
        >>> summarize_comment(None, "// Loads the config\\n// from disk\\n")
        'Loads the config from disk'
    """
    if doc_comment:
        return _collect_summary(_clean_doc_comment(doc_comment))
    if line_comments:
        return _collect_summary(_clean_line_comments(line_comments))
    return None
