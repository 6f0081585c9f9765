import pytest

from lead_rabbit.blocks import list_kind_of, parse_blocks, strip_list_marker
from lead_rabbit.models import Break, CodeBlock, ListBlock, ListItem, ListKind, Paragraph


def _items(*texts):
    return [ListItem(text=t) for t in texts]


def test_plain_text_is_single_paragraph():
    assert parse_blocks("  Just a normal sentence.  ") == [Paragraph(text="Just a normal sentence.")]


def test_code_block_strips_four_spaces():
    blocks = parse_blocks("    const x = 1;\n    return x;")
    assert blocks == [CodeBlock(lines=["const x = 1;", "return x;"])]


def test_code_block_keeps_extra_indentation():
    blocks = parse_blocks("    if x:\n        return 1")
    assert blocks == [CodeBlock(lines=["if x:", "    return 1"])]


def test_bullet_list_then_break_then_paragraph():
    blocks = parse_blocks("- item one\n- item two\n\nNext paragraph")
    assert blocks == [
        ListBlock(list_kind=ListKind.BULLET, items=_items("item one", "item two")),
        Break(),
        Paragraph(text="Next paragraph"),
    ]


@pytest.mark.parametrize("marker", ["-", "*", "•"])
def test_bullet_markers(marker):
    blocks = parse_blocks(f"{marker} first\n{marker} second")
    assert blocks == [ListBlock(list_kind=ListKind.BULLET, items=_items("first", "second"))]


def test_numbered_list():
    blocks = parse_blocks("1. HubSpot\n2. Pipedrive\n10. Notion")
    assert blocks == [ListBlock(list_kind=ListKind.NUMBERED, items=_items("HubSpot", "Pipedrive", "Notion"))]


def test_list_does_not_absorb_following_paragraph():
    blocks = parse_blocks("- one\n- two\nNot a list item")
    assert blocks == [
        ListBlock(list_kind=ListKind.BULLET, items=_items("one", "two")),
        Paragraph(text="Not a list item"),
    ]


def test_bullet_and_numbered_lists_do_not_merge():
    blocks = parse_blocks("- bullet\n1. numbered\n2. again")
    assert blocks == [
        ListBlock(list_kind=ListKind.BULLET, items=_items("bullet")),
        ListBlock(list_kind=ListKind.NUMBERED, items=_items("numbered", "again")),
    ]


def test_list_items_keep_inline_markup_without_marker():
    blocks = parse_blocks("* **bold** item")
    assert blocks == [ListBlock(list_kind=ListKind.BULLET, items=_items("**bold** item"))]


def test_indented_list_line_continues_list():
    blocks = parse_blocks("- one\n    - two")
    assert blocks == [ListBlock(list_kind=ListKind.BULLET, items=_items("one", "two"))]


def test_code_block_closes_on_blank_line():
    blocks = parse_blocks("    print('hi')\n\nAfter code")
    assert blocks == [
        CodeBlock(lines=["print('hi')"]),
        Break(),
        Paragraph(text="After code"),
    ]


def test_code_block_closes_on_paragraph():
    blocks = parse_blocks("Intro\n    x = 1\nOutro")
    assert blocks == [
        Paragraph(text="Intro"),
        CodeBlock(lines=["x = 1"]),
        Paragraph(text="Outro"),
    ]


def test_leading_blank_lines_emit_no_break():
    assert parse_blocks("\n\n\nHello") == [Paragraph(text="Hello")]


def test_consecutive_blank_lines_emit_single_break():
    blocks = parse_blocks("One\n\n\n\nTwo")
    assert blocks == [Paragraph(text="One"), Break(), Paragraph(text="Two")]


def test_trailing_blank_line_emits_break():
    assert parse_blocks("Great tool!\n") == [Paragraph(text="Great tool!"), Break()]


def test_whitespace_only_input_is_empty():
    assert parse_blocks("   \n\t\n") == []


def test_three_space_indent_is_paragraph():
    assert parse_blocks("   almost code") == [Paragraph(text="almost code")]


def test_marker_without_space_is_paragraph():
    assert parse_blocks("-dash\n1.5 million") == [Paragraph(text="-dash"), Paragraph(text="1.5 million")]


def test_blocks_keep_source_order():
    text = "Para A\n- item\nPara B\n- other"
    blocks = parse_blocks(text)
    assert [type(b) for b in blocks] == [Paragraph, ListBlock, Paragraph, ListBlock]


def test_list_kind_of():
    assert list_kind_of("- x") is ListKind.BULLET
    assert list_kind_of("3. x") is ListKind.NUMBERED
    assert list_kind_of("plain") is None


def test_strip_list_marker_removes_only_one_space():
    assert strip_list_marker("-  spaced", ListKind.BULLET) == " spaced"
    assert strip_list_marker("12. twelve", ListKind.NUMBERED) == "twelve"
