from jsoutline.comments import summarize_comment


def test_no_comment_returns_none():
    assert summarize_comment(None, None) is None


def test_doc_comment_stops_at_tag_line():
    assert summarize_comment("/** Adds two numbers.\n * @param a */") == "Adds two numbers."


def test_doc_comment_body_without_delimiters():
    # Body as captured between "/**" and "*/"
    assert summarize_comment(" Adds two numbers.\n * @param a ") == "Adds two numbers."


def test_doc_comment_lines_are_joined_with_spaces():
    comment = """/**
 * Loads the user profile
 * from the remote store.
 */"""

    assert summarize_comment(comment) == "Loads the user profile from the remote store."


def test_doc_comment_stops_at_blank_line_after_content():
    comment = """/**
 * Short summary.
 *
 * Longer description that should not be included.
 */"""

    assert summarize_comment(comment) == "Short summary."


def test_doc_comment_leading_blank_lines_are_skipped():
    comment = "/**\n *\n * Summary here.\n */"

    assert summarize_comment(comment) == "Summary here."


def test_doc_comment_with_bang():
    assert summarize_comment("/**! Preserved banner. */") == "Preserved banner."


def test_doc_comment_only_tags_returns_none():
    assert summarize_comment("/**\n * @returns {number}\n */") is None


def test_long_summary_truncated_at_first_period():
    first = "This sentence is the first one and it is reasonably long on purpose."
    second = "The second sentence pushes the total beyond the limit."
    comment = f"/**\n * {first}\n * {second}\n */"

    assert summarize_comment(comment) == first


def test_long_summary_without_period_is_kept():
    text = "word " * 30
    comment = f"/** {text} */"

    assert summarize_comment(comment) == text.strip()


def test_short_summary_with_periods_is_not_truncated():
    assert summarize_comment("/** One. Two. */") == "One. Two."


def test_line_comments_are_joined():
    comments = "// Parses the config\n// from disk.\n"

    assert summarize_comment(None, comments) == "Parses the config from disk."


def test_line_comments_indented():
    comments = "    // Indented comment\n    // continues here\n"

    assert summarize_comment(None, comments) == "Indented comment continues here"


def test_line_comments_stop_at_tag():
    comments = "// Does a thing\n// @deprecated use other\n"

    assert summarize_comment(None, comments) == "Does a thing"


def test_doc_comment_takes_precedence_over_line_comments():
    assert summarize_comment("/** From doc. */", "// From lines\n") == "From doc."
