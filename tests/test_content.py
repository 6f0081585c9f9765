from lead_rabbit.content import (
    build_post_content,
    format_post_content,
    has_renderable_content,
    resolve_block,
    truncate_content,
)
from lead_rabbit.models import (
    BareUrl,
    Bold,
    Break,
    CodeBlock,
    Italic,
    Link,
    ListBlock,
    ListKind,
    Paragraph,
    PlainText,
)


def test_none_content_has_no_nodes():
    assert format_post_content(None) == []
    assert has_renderable_content(None) is False


def test_footer_only_content_is_not_renderable(identity_cleaner):
    raw = "submitted by /u/alice [link] [comments]"
    assert format_post_content(raw, identity_cleaner) == []
    assert has_renderable_content(raw, identity_cleaner) is False


def test_full_post_formatting(sample_post_body, identity_cleaner):
    nodes = format_post_content(sample_post_body, identity_cleaner)

    assert [type(n) for n in nodes] == [
        Paragraph,
        Break,
        Paragraph,
        ListBlock,
        Break,
        Paragraph,
        ListBlock,
        Break,
        CodeBlock,
        Break,
        Paragraph,
    ]

    intro = nodes[0]
    assert intro.spans == [
        PlainText(text="Looking for a "),
        Bold(text="CRM"),
        PlainText(text=" that actually works for a 3 person team."),
    ]

    needs = nodes[3]
    assert needs.list_kind is ListKind.BULLET
    assert needs.items[1].spans == [
        PlainText(text="email sync with "),
        Link(label="Gmail", url="https://mail.google.com"),
    ]

    tried = nodes[6]
    assert tried.list_kind is ListKind.NUMBERED
    assert tried.items[1].spans == [PlainText(text="a "), Italic(text="spreadsheet")]

    code = nodes[8]
    assert code.lines == ["=VLOOKUP(A2, leads, 2)", '=COUNTIF(B:B, "won")']

    closing = nodes[10]
    assert closing.spans == [PlainText(text="Any ideas? "), BareUrl(url="https://example.com/thread")]


def test_code_blocks_are_not_inline_resolved(identity_cleaner):
    nodes = format_post_content("    **not bold**", identity_cleaner)
    assert nodes == [CodeBlock(lines=["**not bold**"])]


def test_resolve_block_returns_new_node():
    paragraph = Paragraph(text="hi **there**")
    resolved = resolve_block(paragraph)
    assert resolved is not paragraph
    assert paragraph.spans == []
    assert resolved.spans == [PlainText(text="hi "), Bold(text="there")]


def test_formatting_is_deterministic(sample_post_body, identity_cleaner):
    first = format_post_content(sample_post_body, identity_cleaner)
    second = format_post_content(sample_post_body, identity_cleaner)
    assert first == second
    assert first is not second


def test_build_post_content_serializes(identity_cleaner):
    content = build_post_content("- a\n- b", identity_cleaner)
    data = content.model_dump(mode="json")
    assert data["is_empty"] is False
    assert data["nodes"][0]["type"] == "list"
    assert data["nodes"][0]["list_kind"] == "bullet"
    assert data["nodes"][0]["items"][0]["spans"] == [{"type": "text", "text": "a"}]


def test_build_post_content_empty():
    content = build_post_content(None)
    assert content.is_empty is True
    assert content.model_dump()["nodes"] == []


def test_truncate_content():
    assert truncate_content(None, 5) is None
    assert truncate_content("short", 10) == "short"
    assert truncate_content("abcdefghij", 4) == "abcd"


def test_leading_code_block_with_default_cleaner():
    assert format_post_content("    const x = 1;\n    return x;") == [CodeBlock(lines=["const x = 1;", "return x;"])]


def test_literal_angle_bracket_keeps_all_lines():
    nodes = format_post_content("if a <b then c\nnext line")
    assert [n.text for n in nodes] == ["if a <b then c", "next line"]
