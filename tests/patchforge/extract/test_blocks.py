import textwrap

import pytest

from patchforge.errors import ExtractError
from patchforge.extract import parse_blocks


def test_parse_single_block_ignores_surrounding_prose():
    """Text outside the markers is narrative and never part of a block."""
    raw = textwrap.dedent("""\
        I'll bump the constant.
        <<<<SEARCH
        const a = 1;
        ====
        const a = 2;
        >>>>
        That's it!
    """)

    result = parse_blocks(raw)

    assert len(result) == 1
    block = result.blocks[0]
    assert block.index == 0
    assert block.search == "const a = 1;"
    assert block.replace == "const a = 2;"
    assert block.line == 2
    assert result.warnings == []


@pytest.mark.parametrize(
    "start, sep, end",
    [
        ("<<<<SEARCH", "====", ">>>>"),
        ("<<<< SEARCH", "==== REPLACE", ">>>>REPLACE"),
        ("<<<<<<< SEARCH", "=======", ">>>>>>> REPLACE"),
        ("  <<<<SEARCH", "  ====", "  >>>>"),
    ],
)
def test_marker_spellings(start, sep, end):
    raw = f"{start}\nold\n{sep}\nnew\n{end}\n"
    blocks = parse_blocks(raw).blocks
    assert [(b.search, b.replace) for b in blocks] == [("old", "new")]


def test_blocks_keep_order_of_appearance_and_sequential_indexes():
    raw = textwrap.dedent("""\
        <<<<SEARCH
        first
        ====
        1st
        >>>>
        some words in between
        <<<<SEARCH
        second
        ====
        2nd
        >>>>
    """)

    blocks = parse_blocks(raw).blocks

    assert [b.index for b in blocks] == [0, 1]
    assert [b.search for b in blocks] == ["first", "second"]
    assert [b.line for b in blocks] == [1, 7]


def test_block_inside_code_fence():
    raw = textwrap.dedent("""\
        ```jsx
        <<<<<<< SEARCH
        <h1>Hi</h1>
        =======
        <h1>Hello</h1>
        >>>>>>> REPLACE
        ```
    """)
    blocks = parse_blocks(raw).blocks
    assert len(blocks) == 1
    assert blocks[0].replace == "<h1>Hello</h1>"


def test_empty_replace_is_a_deletion():
    blocks = parse_blocks("<<<<SEARCH\nremove me\n====\n>>>>\n").blocks
    assert len(blocks) == 1
    assert blocks[0].search == "remove me"
    assert blocks[0].replace == ""


def test_blank_lines_next_to_markers_are_dropped():
    raw = "<<<<SEARCH\n\n\nfoo\n\nbar\n\n====\n\nbaz\n\n>>>>\n"
    block = parse_blocks(raw).blocks[0]
    assert block.search == "foo\n\nbar"
    assert block.replace == "baz"


def test_interior_content_is_verbatim():
    """Tabs, trailing spaces and CRLF terminators survive untouched."""
    raw = "<<<<SEARCH\r\n\tfoo  \r\n\tbar\r\n====\r\n\tbaz\r\n>>>>\r\n"
    block = parse_blocks(raw).blocks[0]
    assert block.search == "\tfoo  \r\n\tbar"
    assert block.replace == "\tbaz"


def test_zero_blocks_is_not_an_error():
    result = parse_blocks("Sure, the app already does that.\n==== not a block\n")
    assert len(result) == 0
    assert result.warnings == []


def test_missing_end_marker_at_eof_is_reported():
    raw = "<<<<SEARCH\nfoo\n====\nbar\n"
    result = parse_blocks(raw)
    assert result.blocks == []
    assert len(result.warnings) == 1
    assert result.warnings[0].reason == "text ended before end marker"
    assert result.warnings[0].line == 1


def test_second_start_marker_rejects_open_block_and_parsing_continues():
    raw = textwrap.dedent("""\
        <<<<SEARCH
        abandoned
        <<<<SEARCH
        b
        ====
        c
        >>>>
    """)

    result = parse_blocks(raw)

    assert [(b.search, b.replace, b.line) for b in result.blocks] == [("b", "c", 3)]
    assert [(w.line, w.reason) for w in result.warnings] == [(1, "missing separator marker")]
    assert "abandoned" in result.warnings[0].text


def test_start_marker_inside_replace_section_rejects_block():
    raw = "<<<<SEARCH\na\n====\nb\n<<<<SEARCH\nx\n====\ny\n>>>>\n"
    result = parse_blocks(raw)
    assert [b.search for b in result.blocks] == ["x"]
    assert result.blocks[0].index == 0
    assert result.warnings[0].reason == "missing end marker"


def test_end_marker_before_separator():
    raw = "<<<<SEARCH\na\n>>>>\n<<<<SEARCH\nx\n====\ny\n>>>>\n"
    result = parse_blocks(raw)
    assert [(b.index, b.search) for b in result.blocks] == [(0, "x")]
    assert result.warnings[0].reason == "end marker before separator marker"


def test_empty_search_is_malformed():
    result = parse_blocks("<<<<SEARCH\n\n====\nnew stuff\n>>>>\n")
    assert result.blocks == []
    assert result.warnings[0].reason == "empty SEARCH section"


def test_narrative_lines_inside_search_are_dropped():
    raw = textwrap.dedent("""\
        <<<<SEARCH
        foo();
        /// STEP: Applying Changes ///
          /// SUMMARY: done ///
        ====
        bar();
        >>>>
    """)

    block = parse_blocks(raw).blocks[0]
    assert block.search == "foo();"
    assert block.replace == "bar();"

    kept = parse_blocks(raw, strip_narrative_lines=False).blocks[0]
    assert kept.search == "foo();\n/// STEP: Applying Changes ///\n  /// SUMMARY: done ///"


def test_replace_section_is_never_filtered():
    """Doc comments and even marker-shaped lines in REPLACE are content."""
    raw = textwrap.dedent("""\
        <<<<SEARCH
        fn parse() {}
        ====
        /// Step 1: validate the header before parsing.
        /// SUMMARY: returns the id
        fn parse() {}
        >>>>
    """)

    block = parse_blocks(raw).blocks[0]
    assert block.replace == (
        "/// Step 1: validate the header before parsing.\n"
        "/// SUMMARY: returns the id\n"
        "fn parse() {}"
    )


@pytest.mark.parametrize(
    "comment",
    [
        "/// Step 1 checks the header",
        "/// Summary of the parser state",
        "/// Planned for removal",
        "/// step: lower-case is not a marker",
    ],
)
def test_doc_comments_in_search_are_kept(comment):
    raw = f"<<<<SEARCH\n{comment}\nfn parse() {{}}\n====\nfn parse() {{}}\n>>>>\n"
    block = parse_blocks(raw).blocks[0]
    assert block.search == f"{comment}\nfn parse() {{}}"


def test_blocks_drafted_while_thinking_are_skipped():
    raw = textwrap.dedent("""\
        <think>
        <<<<SEARCH
        draft
        ====
        nope
        >>>>
        </think>
        <<<<SEARCH
        a
        ====
        b
        >>>>
    """)

    result = parse_blocks(raw)

    assert [(b.search, b.replace) for b in result.blocks] == [("a", "b")]
    assert result.blocks[0].line == 8


def test_non_string_input_raises():
    with pytest.raises(ExtractError):
        parse_blocks(None)  # type: ignore[arg-type]
