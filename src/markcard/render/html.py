"""Card document to HTML: escaping, inline and block rendering, card sections"""

import json
from collections.abc import Mapping
from html import escape
from typing import Any

from pydantic import BaseModel

from markcard.render.page import DEFAULT_TITLE, build_page


LINK_ATTRS = 'target="_blank" rel="noopener noreferrer"'


def escape_html(value: Any) -> str:
    """Entity-encode & < > " ' in str(value); None becomes an empty string."""
    if value is None:
        return ""
    return escape(str(value), quote=True)


def _plain(obj: Any) -> Any:
    """Return models as plain dicts so JSON-loaded and in-memory data render alike."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    return obj


def _seq(value: Any) -> list | tuple:
    """The value when it is a list or tuple, else an empty list."""
    return value if isinstance(value, (list, tuple)) else []


def _level(value: Any) -> int:
    try:
        level = int(value or 1)
    except (TypeError, ValueError):
        level = 1
    return min(max(level, 1), 6)


def render_inlines(tokens: Any) -> str:
    """Render inline tokens to HTML, mirroring extract_inlines nesting."""
    parts = []
    for tok in _seq(tokens):
        tok = _plain(tok)
        if not isinstance(tok, Mapping):
            continue
        t = tok.get("type")
        children = _seq(tok.get("children"))
        if t == "text":
            parts.append(escape_html(tok.get("value")))
        elif t == "inlineCode":
            parts.append(f'<code class="inline-code">{escape_html(tok.get("value"))}</code>')
        elif t == "strong":
            parts.append(f"<strong>{render_inlines(children)}</strong>")
        elif t == "emphasis":
            parts.append(f"<em>{render_inlines(children)}</em>")
        elif t == "link":
            parts.append(f'<a href="{escape_html(tok.get("url"))}" {LINK_ATTRS}>{render_inlines(children)}</a>')
        elif t == "image":
            parts.append(
                f'<img class="inline-img" src="{escape_html(tok.get("url"))}" '
                f'alt="{escape_html(tok.get("alt"))}" />'
            )
    return "".join(parts)


def _inner(block: Mapping, fallback_key: str = "content") -> str:
    """Formatted inlines when present, else the escaped plain-text field."""
    if block.get("inlines") is not None:
        return render_inlines(block["inlines"])
    return escape_html(block.get(fallback_key) or "")


def _list_item(item: Any) -> str:
    item = _plain(item)
    if isinstance(item, str):
        return f"<li>{escape_html(item)}</li>"
    if isinstance(item, Mapping):
        return f"<li>{_inner(item)}</li>"
    return "<li></li>"


def _table(block: Mapping) -> str:
    header = "".join(f"<th>{escape_html(h)}</th>" for h in _seq(block.get("header")))
    rows = "\n".join(
        "<tr>" + "".join(f"<td>{escape_html(c)}</td>" for c in _seq(row)) + "</tr>"
        for row in _seq(block.get("rows"))
    )
    return f'<table class="table"><thead><tr>{header}</tr></thead><tbody>{rows}</tbody></table>'


def _fallback(block: Any) -> str:
    dump = json.dumps(block, indent=2, ensure_ascii=False, default=str)
    return f"<pre>{escape_html(dump)}</pre>"


def render_block(block: Any) -> str:
    """Render one block (model, mapping, or None) to an HTML fragment. Never raises."""
    block = _plain(block)
    if not block:
        return ""
    if not isinstance(block, Mapping):
        return _fallback(block)

    t = block.get("type")
    if t == "heading":
        level = _level(block.get("level"))
        return f"<h{level}>{_inner(block)}</h{level}>"
    if t == "paragraph":
        return f"<p>{_inner(block)}</p>"
    if t == "list":
        tag = "ol" if block.get("ordered") else "ul"
        items = "\n".join(_list_item(it) for it in _seq(block.get("items")))
        return f"<{tag}>\n{items}\n</{tag}>"
    if t == "code":
        lang = block.get("language")
        lang_class = f"language-{escape_html(lang)}" if lang else ""
        return f'<pre><code class="{lang_class}">{escape_html(block.get("content") or "")}</code></pre>'
    if t == "quote":
        return f"<blockquote>{_inner(block)}</blockquote>"
    if t == "image":
        return (
            f'<div class="img-wrap"><img src="{escape_html(block.get("url"))}" '
            f'alt="{escape_html(block.get("alt"))}"/></div>'
        )
    if t == "link":
        return f'<p><a href="{escape_html(block.get("url"))}" {LINK_ATTRS}>{_inner(block, "text")}</a></p>'
    if t == "table":
        return _table(block)
    return _fallback(block)


def _flat_blocks(blocks: Any):
    """Yield blocks with nested lists unrolled into siblings."""
    for b in _seq(blocks):
        if isinstance(b, (list, tuple)):
            yield from _flat_blocks(b)
        else:
            yield b


def render_card(card: Any) -> str:
    """Wrap one card's rendered blocks in a section element."""
    card = _plain(card)
    blocks = card.get("blocks") if isinstance(card, Mapping) else None
    inner = "\n".join(render_block(b) for b in _flat_blocks(blocks))
    return f'<section class="card"><div class="card-inner">{inner}</div></section>'


def render_cards(doc: Any) -> str:
    """Render every card of a document (model or mapping) to HTML sections."""
    doc = _plain(doc)
    cards = doc.get("cards") if isinstance(doc, Mapping) else None
    return "\n".join(render_card(c) for c in _seq(cards))


def render_document(doc: Any, title: str = DEFAULT_TITLE) -> str:
    """Render a card document into a complete standalone HTML page."""
    return build_page(render_cards(doc), title)
