"""Rich terminal preview of formatted post content."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.padding import Padding
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from .models import BareUrl, BlockNode, Bold, Break, CodeBlock, InlineSpan, Italic, Link, ListBlock, ListKind

LINK_STYLE = "underline cyan"


def spans_to_text(spans: list[InlineSpan]) -> Text:
    """Build a rich Text from inline spans."""
    text = Text()
    for span in spans:
        if isinstance(span, Bold):
            text.append(span.text, style="bold")
        elif isinstance(span, Italic):
            text.append(span.text, style="italic")
        elif isinstance(span, (Link, BareUrl)):
            text.append(span.label, style=Style.parse(LINK_STYLE) + Style(link=span.url))
        else:
            text.append(span.text)
    return text


def _block_renderable(block: BlockNode) -> RenderableType:
    if isinstance(block, Break):
        return Text("")

    if isinstance(block, CodeBlock):
        return Panel(Text(block.code), border_style="dim", expand=False)

    if isinstance(block, ListBlock):
        lines = []
        for number, item in enumerate(block.items, 1):
            marker = "• " if block.list_kind is ListKind.BULLET else f"{number}. "
            line = Text(marker, style="dim")
            line.append_text(spans_to_text(item.spans) if item.spans else Text(item.text))
            lines.append(line)
        return Padding(Group(*lines), (0, 0, 0, 2))

    return spans_to_text(block.spans) if block.spans else Text(block.text)


def render_nodes(nodes: list[BlockNode]) -> RenderableType:
    """Build a single renderable for a formatted post body."""
    if not nodes:
        return Text("No content available", style="dim")
    return Group(*(_block_renderable(block) for block in nodes))
