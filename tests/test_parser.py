import textwrap

from MarkView import markdown_parser
from MarkView.model import Block, BlockKind


def test_parse_blocks_in_document_order():
    md_text = textwrap.dedent(
        """
        # Title

        Some text with **bold** words.

        ## Section
        ### Subsection

        - first
        - second

        1. one
        2. two

        > quoted line

        ---

        ```python
        print("hi")
        ```
        """
    )
    blocks = markdown_parser.parse_markdown(md_text)
    assert [block.kind for block in blocks] == [
        BlockKind.HEADER1,
        BlockKind.PARAGRAPH,
        BlockKind.HEADER2,
        BlockKind.HEADER3,
        BlockKind.BULLET_LIST,
        BlockKind.NUMBERED_LIST,
        BlockKind.QUOTE,
        BlockKind.HORIZONTAL_RULE,
        BlockKind.CODE_BLOCK,
    ]
    assert blocks[0].text == "Title"
    assert blocks[1].text == "Some text with **bold** words."
    assert blocks[4].items == ("first", "second")
    assert blocks[5].items == ("one", "two")
    assert blocks[6].text == "quoted line"
    assert blocks[7].text == ""
    assert blocks[8].text == 'print("hi")'
    assert blocks[8].language == "python"


def test_title_then_paragraph():
    blocks = markdown_parser.parse_markdown("# Title\n\nSome text")
    assert blocks == [
        Block(kind=BlockKind.HEADER1, text="Title"),
        Block(kind=BlockKind.PARAGRAPH, text="Some text"),
    ]


def test_blank_line_does_not_split_bullet_list():
    blocks = markdown_parser.parse_markdown("- a\n- b\n\n- c")
    assert blocks == [Block(kind=BlockKind.BULLET_LIST, items=("a", "b", "c"))]


def test_bullet_markers_can_be_mixed():
    blocks = markdown_parser.parse_markdown("- a\n* b\n\n\n\n- c\nafter")
    assert blocks[0].items == ("a", "b", "c")
    assert blocks[1] == Block(kind=BlockKind.PARAGRAPH, text="after")


def test_numbered_list_strips_ordinals():
    blocks = markdown_parser.parse_markdown("1. first\n2. second")
    assert blocks == [Block(kind=BlockKind.NUMBERED_LIST, items=("first", "second"))]


def test_numbered_list_keeps_source_order_not_numbers():
    blocks = markdown_parser.parse_markdown("3. c\n10. a\n1.\tb")
    assert blocks[0].items == ("c", "a", "b")


def test_mixed_list_markers_start_a_new_list():
    blocks = markdown_parser.parse_markdown("- bullet\n1. numbered\n- bullet again")
    assert [block.kind for block in blocks] == [
        BlockKind.BULLET_LIST,
        BlockKind.NUMBERED_LIST,
        BlockKind.BULLET_LIST,
    ]
    assert blocks[1].items == ("numbered",)


def test_list_stops_at_first_other_line():
    blocks = markdown_parser.parse_markdown("- a\nplain\n- b")
    assert blocks == [
        Block(kind=BlockKind.BULLET_LIST, items=("a",)),
        Block(kind=BlockKind.PARAGRAPH, text="plain"),
        Block(kind=BlockKind.BULLET_LIST, items=("b",)),
    ]


def test_code_block_body():
    blocks = markdown_parser.parse_markdown("```\ncode line\n```")
    assert blocks == [Block(kind=BlockKind.CODE_BLOCK, text="code line")]
    assert blocks[0].language is None


def test_code_block_is_verbatim():
    body = "    indented\n\n# not a heading\n- not a list\n\ttab"
    blocks = markdown_parser.parse_markdown(f"intro\n```\n{body}\n```\nafter")
    assert blocks[1].kind is BlockKind.CODE_BLOCK
    assert blocks[1].text == body
    assert f"```\n{blocks[1].text}\n```" == f"```\n{body}\n```"
    assert blocks[2] == Block(kind=BlockKind.PARAGRAPH, text="after")


def test_unterminated_code_fence_runs_to_end():
    blocks = markdown_parser.parse_markdown("```\nline one\n\nline two")
    assert blocks == [Block(kind=BlockKind.CODE_BLOCK, text="line one\n\nline two")]


def test_quote_does_not_absorb_next_line():
    blocks = markdown_parser.parse_markdown("> quoted\nplain line")
    assert blocks == [
        Block(kind=BlockKind.QUOTE, text="quoted"),
        Block(kind=BlockKind.PARAGRAPH, text="plain line"),
    ]


def test_consecutive_lines_are_separate_paragraphs():
    blocks = markdown_parser.parse_markdown("  one  \ntwo\nthree")
    assert [block.text for block in blocks] == ["one", "two", "three"]
    assert all(block.kind is BlockKind.PARAGRAPH for block in blocks)


def test_paragraph_only_document_reparses_identically():
    blocks = markdown_parser.parse_markdown("alpha\nbeta **b**\ngamma")
    rebuilt = "\n".join(block.text for block in blocks)
    assert markdown_parser.parse_markdown(rebuilt) == blocks


def test_heading_takes_priority_over_list():
    blocks = markdown_parser.parse_markdown("# - not a list")
    assert blocks == [Block(kind=BlockKind.HEADER1, text="- not a list")]


def test_lines_that_only_look_like_markup_are_paragraphs():
    blocks = markdown_parser.parse_markdown("#no space\n#### deep\n>tight\n-dash\n----\n1.5 apples")
    assert all(block.kind is BlockKind.PARAGRAPH for block in blocks)
    assert len(blocks) == 6


def test_rules_require_exact_line():
    blocks = markdown_parser.parse_markdown("***\n  ---  \n*** x")
    assert blocks[0].kind is BlockKind.HORIZONTAL_RULE
    assert blocks[1].kind is BlockKind.HORIZONTAL_RULE
    assert blocks[2] == Block(kind=BlockKind.PARAGRAPH, text="*** x")


def test_empty_and_blank_documents():
    assert markdown_parser.parse_markdown("") == []
    assert markdown_parser.parse_markdown("\n \n\t\n") == []


def test_windows_and_old_mac_newlines():
    blocks = markdown_parser.parse_markdown("# A\r\n\r\n```\r\nx\r\ny\r\n```\rend")
    assert blocks == [
        Block(kind=BlockKind.HEADER1, text="A"),
        Block(kind=BlockKind.CODE_BLOCK, text="x\ny"),
        Block(kind=BlockKind.PARAGRAPH, text="end"),
    ]


def test_block_count_bounded_by_line_count():
    md_text = "\n".join(["- a", "```", "1. b", "> c", "", "***", "text", "## h"] * 5)
    blocks = markdown_parser.parse_markdown(md_text)
    assert 0 < len(blocks) <= len(md_text.splitlines())


def test_parse_document_keeps_metadata():
    document = markdown_parser.parse_document("# Hi", metadata={"file_name": "notes.md"})
    assert document.file_name == "notes.md"
    assert document.blocks[0].heading_level == 1


def test_only_line_breaks_split_lines():
    blocks = markdown_parser.parse_markdown("a\x1cb\x1dc\x1ed\nnext\u2028last\n")
    assert blocks == [
        Block(kind=BlockKind.PARAGRAPH, text="a\x1cb\x1dc\x1ed"),
        Block(kind=BlockKind.PARAGRAPH, text="next"),
        Block(kind=BlockKind.PARAGRAPH, text="last"),
    ]


def test_code_block_has_no_trailing_line_artifact():
    blocks = markdown_parser.parse_markdown("```\nx\n\n")
    assert blocks == [Block(kind=BlockKind.CODE_BLOCK, text="x\n")]
