"""Generic syntax tree nodes and the persisted card/block/inline schema"""

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field


class NodeType(str, Enum):
    """Node kinds produced by the markdown parser adapter"""
    root = "root"
    heading = "heading"
    paragraph = "paragraph"
    text = "text"
    inlineCode = "inlineCode"
    strong = "strong"
    emphasis = "emphasis"
    delete = "delete"
    link = "link"
    image = "image"
    list = "list"
    listItem = "listItem"
    code = "code"
    blockquote = "blockquote"
    table = "table"
    tableRow = "tableRow"
    tableCell = "tableCell"
    thematicBreak = "thematicBreak"
    html = "html"
    hard_break = "break"


@dataclass
class Node:
    """Generic syntax tree node; ephemeral, never persisted."""
    type:     str
    children: Optional[list["Node"]] = None
    value:    Any = None
    depth:    Optional[int] = None     # heading level
    ordered:  Optional[bool] = None    # list
    url:      Optional[str] = None     # link, image
    alt:      Optional[str] = None     # image
    lang:     Optional[str] = None     # code


# --- inline tokens ---

class TextToken(BaseModel):
    type: Literal["text"] = "text"
    value: str = ""


class InlineCodeToken(BaseModel):
    type: Literal["inlineCode"] = "inlineCode"
    value: str = ""


class StrongToken(BaseModel):
    type: Literal["strong"] = "strong"
    children: list["Inline"] = []


class EmphasisToken(BaseModel):
    type: Literal["emphasis"] = "emphasis"
    children: list["Inline"] = []


class LinkToken(BaseModel):
    type: Literal["link"] = "link"
    url: Optional[str] = None
    children: list["Inline"] = []


class ImageToken(BaseModel):
    type: Literal["image"] = "image"
    url: Optional[str] = None
    alt: str = ""


Inline = Annotated[
    Union[TextToken, InlineCodeToken, StrongToken, EmphasisToken, LinkToken, ImageToken],
    Field(discriminator="type"),
]

for _model in (StrongToken, EmphasisToken, LinkToken):
    _model.model_rebuild()


# --- blocks ---

class HeadingBlock(BaseModel):
    type: Literal["heading"] = "heading"
    level: Optional[int] = None      # 1-6 from the parser; clamped on render
    inlines: Optional[list[Inline]] = None
    content: str = ""


class ParagraphBlock(BaseModel):
    type: Literal["paragraph"] = "paragraph"
    inlines: Optional[list[Inline]] = None
    content: str = ""


class ListItem(BaseModel):
    content: str = ""
    inlines: Optional[list[Inline]] = None


class ListBlock(BaseModel):
    type: Literal["list"] = "list"
    ordered: bool = False
    items: list[ListItem] = []


class CodeBlock(BaseModel):
    type: Literal["code"] = "code"
    language: Optional[str] = None
    content: Any = ""               # str in practice; other values pass through untouched


class QuoteBlock(BaseModel):
    type: Literal["quote"] = "quote"
    inlines: Optional[list[Inline]] = None
    content: str = ""


class ImageBlock(BaseModel):
    type: Literal["image"] = "image"
    url: Optional[str] = None
    alt: str = ""


class LinkBlock(BaseModel):
    type: Literal["link"] = "link"
    url: Optional[str] = None
    text: str = ""
    inlines: Optional[list[Inline]] = None


class TableBlock(BaseModel):
    type: Literal["table"] = "table"
    header: list[str] = []
    rows: list[list[str]] = []


Block = Annotated[
    Union[
        HeadingBlock, ParagraphBlock, ListBlock, CodeBlock,
        QuoteBlock, ImageBlock, LinkBlock, TableBlock,
    ],
    Field(discriminator="type"),
]


class Card(BaseModel):
    """One delimiter-bounded run of normalized blocks."""
    id: str
    blocks: list[Block] = []


class CardDocument(BaseModel):
    """Persisted interchange contract between segmentation and rendering."""
    cards: list[Card] = []
