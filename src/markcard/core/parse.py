"""markdown-it tokenization and conversion to the generic syntax tree"""

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from markcard.core.models import Node, NodeType


CONTAINER_MAP: dict[str, NodeType] = {
    'paragraph':  NodeType.paragraph,
    'blockquote': NodeType.blockquote,
    'list_item':  NodeType.listItem,
    'tr':         NodeType.tableRow,
    'th':         NodeType.tableCell,
    'td':         NodeType.tableCell,
    'strong':     NodeType.strong,
    'em':         NodeType.emphasis,
    's':          NodeType.delete,
}

# Wrapper nodes whose children are spliced into the parent.
SPLICED = {'inline', 'thead', 'tbody'}


def make_parser(preset: str = 'gfm-like') -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def _heading_depth(node: SyntaxTreeNode) -> int | None:
    """Return heading depth (1-6) from an hN tag, else None."""
    if node.tag and node.tag[0] == 'h' and node.tag[1:].isdigit():
        return int(node.tag[1:])
    return None


def _code_lang(info: str) -> str | None:
    """First word of a fence info string, or None."""
    words = (info or '').split()
    return words[0] if words else None


def _code_value(content: str) -> str:
    """Fence content without the closing newline markdown-it keeps."""
    return content[:-1] if content.endswith('\n') else content


def _merge_text(nodes: list[Node]) -> list[Node]:
    """Join runs of adjacent text nodes into one, dropping empty ones."""
    merged: list[Node] = []
    for n in nodes:
        if n.type == NodeType.text and not n.value:
            continue
        if merged and n.type == NodeType.text and merged[-1].type == NodeType.text:
            merged[-1] = Node(type=NodeType.text.value, value=merged[-1].value + n.value)
        else:
            merged.append(n)
    return merged


def _plain_text(nodes: list[Node]) -> str:
    """Concatenated literal text of converted nodes, markup dropped."""
    parts = []
    for n in nodes:
        if n.type in (NodeType.text, NodeType.inlineCode):
            parts.append(n.value or "")
        elif n.type == NodeType.image:
            parts.append(n.alt or "")
        elif n.children:
            parts.append(_plain_text(n.children))
    return "".join(parts)


def _image_alt(node: SyntaxTreeNode) -> str:
    """Plain alt text from the parsed label; raw label source only when it has no children."""
    if node.children:
        return _plain_text(_children(node))
    return node.content or ""


def _children(node: SyntaxTreeNode) -> list[Node]:
    result: list[Node] = []
    for child in node.children:
        converted = to_generic(child)
        if isinstance(converted, list):
            result.extend(converted)
        elif converted is not None:
            result.append(converted)
    return _merge_text(result)


def to_generic(node: SyntaxTreeNode) -> Node | list[Node] | None:
    """Convert one markdown-it tree node into generic node(s)."""
    t = node.type

    if t in SPLICED:
        return _children(node)
    if t in ('text', 'text_special'):
        return Node(type=NodeType.text.value, value=node.content)
    if t == 'softbreak':
        return Node(type=NodeType.text.value, value='\n')
    if t == 'hardbreak':
        return Node(type=NodeType.hard_break.value)
    if t == 'code_inline':
        return Node(type=NodeType.inlineCode.value, value=node.content)
    if t == 'image':
        return Node(type=NodeType.image.value, url=node.attrs.get('src'), alt=_image_alt(node))
    if t == 'link':
        return Node(type=NodeType.link.value, url=node.attrs.get('href'), children=_children(node))
    if t == 'heading':
        return Node(type=NodeType.heading.value, depth=_heading_depth(node), children=_children(node))
    if t in ('bullet_list', 'ordered_list'):
        return Node(type=NodeType.list.value, ordered=t == 'ordered_list', children=_children(node))
    if t in ('fence', 'code_block'):
        return Node(type=NodeType.code.value, lang=_code_lang(node.info), value=_code_value(node.content))
    if t == 'table':
        return Node(type=NodeType.table.value, children=_children(node))
    if t == 'hr':
        return Node(type=NodeType.thematicBreak.value)
    if t in ('html_block', 'html_inline'):
        return Node(type=NodeType.html.value, value=node.content)
    if t in CONTAINER_MAP:
        return Node(type=CONTAINER_MAP[t].value, children=_children(node))
    return Node(type=t, children=_children(node) or None)


def parse_markdown(text: str, preset: str = 'gfm-like') -> Node:
    """Parse markdown text into a generic root node."""
    tree = SyntaxTreeNode(make_parser(preset).parse(text))
    return Node(type=NodeType.root.value, children=_children(tree))
