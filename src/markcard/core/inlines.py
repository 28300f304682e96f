"""Inline token extraction from generic nodes and plain-text flattening"""

from collections.abc import Mapping
from typing import Any, Sequence

from markcard.core.models import (
    EmphasisToken,
    ImageToken,
    Inline,
    InlineCodeToken,
    LinkToken,
    Node,
    NodeType,
    StrongToken,
    TextToken,
)


def extract_inlines(node: Node | Sequence[Node] | None) -> list[Inline]:
    """Flatten a node (or node sequence) into ordered inline tokens.

    strong/emphasis/link keep their nesting; any other node with children
    is descended into without emitting a wrapper token.
    """
    if node is None:
        return []
    if isinstance(node, (list, tuple)):
        return [tok for n in node for tok in extract_inlines(n)]

    t = node.type
    if t == NodeType.text:
        return [TextToken(value=node.value or "")]
    if t == NodeType.inlineCode:
        return [InlineCodeToken(value=node.value or "")]
    if t == NodeType.strong:
        return [StrongToken(children=extract_inlines(node.children))]
    if t == NodeType.emphasis:
        return [EmphasisToken(children=extract_inlines(node.children))]
    if t == NodeType.link:
        return [LinkToken(url=node.url or None, children=extract_inlines(node.children))]
    if t == NodeType.image:
        return [ImageToken(url=node.url or None, alt=node.alt or "")]
    if node.children:
        return extract_inlines(node.children)
    return []


def _field(tok: Any, name: str) -> Any:
    """Read a token field from a model or a JSON-loaded mapping."""
    if isinstance(tok, Mapping):
        return tok.get(name)
    return getattr(tok, name, None)


def flatten_inlines(tokens: Sequence[Inline] | None) -> str:
    """Collapse inline tokens to plain text; only inline code keeps its backticks.

    Accepts token models and their JSON-loaded dict form alike.
    """
    if not isinstance(tokens, (list, tuple)):
        return ""
    parts = []
    for tok in tokens:
        t = _field(tok, "type")
        if t == "text":
            parts.append(str(_field(tok, "value") or ""))
        elif t == "inlineCode":
            parts.append(f"`{_field(tok, 'value') or ''}`")
        elif t in ("strong", "emphasis", "link"):
            parts.append(flatten_inlines(_field(tok, "children")))
        elif t == "image":
            parts.append(str(_field(tok, "alt") or ""))
    return "".join(parts)
