"""Pydantic models for formatted Reddit post content.

Block and inline nodes are closed sets of variants discriminated by their
``type`` field. All nodes are frozen: a formatting pass builds new nodes
instead of mutating existing ones.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


# =============================================================================
# Inline spans
# =============================================================================


class PlainText(_Node):
    """Unformatted text between (or instead of) recognised markup."""

    type: Literal["text"] = "text"
    text: str


class Bold(_Node):
    """``**text**``"""

    type: Literal["bold"] = "bold"
    text: str


class Italic(_Node):
    """``*text*``"""

    type: Literal["italic"] = "italic"
    text: str


class Link(_Node):
    """``[label](url)``"""

    type: Literal["link"] = "link"
    label: str
    url: str


class BareUrl(_Node):
    """An ``http://`` or ``https://`` URL written inline without link syntax."""

    type: Literal["url"] = "url"
    url: str

    @property
    def label(self) -> str:
        return self.url


InlineSpan = Annotated[
    Union[PlainText, Bold, Italic, Link, BareUrl],
    Field(discriminator="type"),
]


# =============================================================================
# Block nodes
# =============================================================================


class ListKind(str, Enum):
    """Kind of list marker that opened a list."""

    BULLET = "bullet"  # •, - or *
    NUMBERED = "numbered"  # 1., 2., ...


class Paragraph(_Node):
    """A single non-blank line of text.

    ``spans`` is empty until the inline pass has run over ``text``.
    """

    type: Literal["paragraph"] = "paragraph"
    text: str
    spans: list[InlineSpan] = Field(default_factory=list)


class ListItem(_Node):
    """One list entry with its marker already stripped."""

    text: str
    spans: list[InlineSpan] = Field(default_factory=list)


class ListBlock(_Node):
    """Consecutive lines sharing the same list marker kind."""

    type: Literal["list"] = "list"
    list_kind: ListKind
    items: list[ListItem]


class CodeBlock(_Node):
    """Consecutive lines indented by four or more spaces."""

    type: Literal["code"] = "code"
    lines: list[str]

    @property
    def code(self) -> str:
        return "\n".join(self.lines)


class Break(_Node):
    """Blank-line paragraph separator."""

    type: Literal["break"] = "break"


BlockNode = Annotated[
    Union[Paragraph, ListBlock, CodeBlock, Break],
    Field(discriminator="type"),
]


class PostContent(BaseModel):
    """Formatted post body handed to a rendering layer."""

    nodes: list[BlockNode] = Field(default_factory=list)

    @computed_field
    @property
    def is_empty(self) -> bool:
        """True when there is nothing to render ("No content available")."""
        return not self.nodes
