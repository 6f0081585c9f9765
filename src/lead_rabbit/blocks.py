"""Block-level parsing of sanitized post bodies.

The parser makes one pass over the lines with three states:

- NORMAL: classify the line as code, blank, list start or paragraph
- IN_LIST: keep consuming lines with the same marker kind
- IN_CODE: keep consuming lines indented by four or more spaces

A line that ends a list or code block is then classified from NORMAL, so no
line is skipped and nothing is re-read.
"""

from __future__ import annotations

import re
from enum import Enum

from .models import BlockNode, Break, CodeBlock, ListBlock, ListItem, ListKind, Paragraph

CODE_INDENT = 4

_CODE_LINE_RE = re.compile(r"^ {4,}")
_BULLET_RE = re.compile(r"^[•\-*]\s")
_NUMBERED_RE = re.compile(r"^[0-9]+\.\s")

_MARKERS: dict[ListKind, re.Pattern[str]] = {
    ListKind.BULLET: _BULLET_RE,
    ListKind.NUMBERED: _NUMBERED_RE,
}


class _State(Enum):
    NORMAL = "normal"
    IN_LIST = "in_list"
    IN_CODE = "in_code"


def list_kind_of(trimmed: str) -> ListKind | None:
    """Return the list kind a trimmed line starts, if any."""
    for kind, pattern in _MARKERS.items():
        if pattern.match(trimmed):
            return kind
    return None


def strip_list_marker(trimmed: str, kind: ListKind) -> str:
    """Remove the leading marker (and one whitespace character) from a list line."""
    return _MARKERS[kind].sub("", trimmed, count=1)


def _code_block(raw_lines: list[str]) -> CodeBlock:
    return CodeBlock(lines=[line[CODE_INDENT:] for line in raw_lines])


def _list_block(kind: ListKind, items: list[str]) -> ListBlock:
    return ListBlock(list_kind=kind, items=[ListItem(text=item) for item in items])


def parse_blocks(text: str) -> list[BlockNode]:
    """Split text into paragraphs, lists, code blocks and breaks.

    Args:
        text: Sanitized post body

    Returns:
        Block nodes in source order. Paragraph and list item spans are left
        empty; see ``lead_rabbit.content`` for the inline pass.
    """
    blocks: list[BlockNode] = []
    state = _State.NORMAL
    code_lines: list[str] = []
    list_kind: ListKind | None = None
    list_items: list[str] = []

    for line in text.split("\n"):
        trimmed = line.strip()

        if state is _State.IN_CODE:
            if _CODE_LINE_RE.match(line):
                code_lines.append(line)
                continue
            blocks.append(_code_block(code_lines))
            code_lines = []
            state = _State.NORMAL

        elif state is _State.IN_LIST:
            # Checked on the trimmed line, so an indented "    - x" still continues the list
            if list_kind_of(trimmed) is list_kind:
                list_items.append(strip_list_marker(trimmed, list_kind))
                continue
            blocks.append(_list_block(list_kind, list_items))
            list_kind = None
            list_items = []
            state = _State.NORMAL

        if _CODE_LINE_RE.match(line):
            code_lines = [line]
            state = _State.IN_CODE
            continue

        if not trimmed:
            if blocks and not isinstance(blocks[-1], Break):
                blocks.append(Break())
            continue

        kind = list_kind_of(trimmed)
        if kind is not None:
            list_kind = kind
            list_items = [strip_list_marker(trimmed, kind)]
            state = _State.IN_LIST
            continue

        blocks.append(Paragraph(text=trimmed))

    if state is _State.IN_CODE:
        blocks.append(_code_block(code_lines))
    elif state is _State.IN_LIST:
        blocks.append(_list_block(list_kind, list_items))

    return blocks
