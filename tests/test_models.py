import pytest
from pydantic import TypeAdapter, ValidationError

from lead_rabbit.models import (
    BareUrl,
    BlockNode,
    Bold,
    Break,
    CodeBlock,
    InlineSpan,
    ListBlock,
    ListItem,
    ListKind,
    Paragraph,
    PostContent,
)


def test_nodes_are_frozen():
    paragraph = Paragraph(text="hello")
    with pytest.raises(ValidationError):
        paragraph.text = "changed"


def test_block_node_discriminator_round_trip():
    adapter = TypeAdapter(list[BlockNode])
    nodes = adapter.validate_python(
        [
            {"type": "paragraph", "text": "hi", "spans": [{"type": "bold", "text": "hi"}]},
            {"type": "break"},
            {"type": "code", "lines": ["x = 1"]},
            {"type": "list", "list_kind": "numbered", "items": [{"text": "one"}]},
        ]
    )
    assert nodes == [
        Paragraph(text="hi", spans=[Bold(text="hi")]),
        Break(),
        CodeBlock(lines=["x = 1"]),
        ListBlock(list_kind=ListKind.NUMBERED, items=[ListItem(text="one")]),
    ]


def test_inline_span_rejects_unknown_type():
    with pytest.raises(ValidationError):
        TypeAdapter(InlineSpan).validate_python({"type": "strike", "text": "x"})


def test_bare_url_label_is_url():
    assert BareUrl(url="https://example.com").label == "https://example.com"


def test_code_block_code_joins_lines():
    assert CodeBlock(lines=["a", "b"]).code == "a\nb"


def test_post_content_is_empty():
    assert PostContent().is_empty is True
    assert PostContent(nodes=[Break()]).is_empty is False
