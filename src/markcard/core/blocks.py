"""Generic node to normalized Block conversion"""

from markcard.core.inlines import extract_inlines, flatten_inlines
from markcard.core.models import (
    Block,
    CodeBlock,
    HeadingBlock,
    ImageBlock,
    Inline,
    LinkBlock,
    ListBlock,
    ListItem,
    Node,
    NodeType,
    ParagraphBlock,
    QuoteBlock,
    TableBlock,
)


def _paragraph(tokens: list[Inline]) -> ParagraphBlock:
    return ParagraphBlock(inlines=tokens, content=flatten_inlines(tokens))


def split_paragraph(tokens: list[Inline]) -> list[Block]:
    """Lift image tokens out of a paragraph into standalone image blocks.

    Text between images becomes its own paragraph; empty runs are skipped.
    """
    blocks: list[Block] = []
    pending: list[Inline] = []
    for tok in tokens:
        if tok.type == "image":
            if pending:
                blocks.append(_paragraph(pending))
                pending = []
            blocks.append(ImageBlock(url=tok.url, alt=tok.alt))
        else:
            pending.append(tok)
    if pending:
        blocks.append(_paragraph(pending))
    return blocks


def _cell_text(cell: Node) -> str:
    return flatten_inlines(extract_inlines(cell))


def _table(node: Node) -> TableBlock:
    rows = node.children or []
    if not rows:
        return TableBlock(header=[], rows=[])
    return TableBlock(
        header=[_cell_text(c) for c in rows[0].children or []],
        rows=[[_cell_text(c) for c in row.children or []] for row in rows[1:]],
    )


def _list(node: Node) -> ListBlock:
    items = []
    for item in node.children or []:
        inlines = extract_inlines(item)
        items.append(ListItem(content=flatten_inlines(inlines), inlines=inlines))
    return ListBlock(ordered=bool(node.ordered), items=items)


def _code(node: Node) -> CodeBlock:
    value = node.value
    if isinstance(value, str):
        value = value.replace("\r\n", "\n")
    return CodeBlock(language=node.lang or None, content=value)


def normalize_node(node: Node) -> Block | list[Block] | None:
    """Map one generic node to a block, a list of blocks (paragraphs only), or None."""
    t = node.type

    if t == NodeType.heading:
        inlines = extract_inlines(node.children)
        return HeadingBlock(level=node.depth, inlines=inlines, content=flatten_inlines(inlines))
    if t == NodeType.paragraph:
        blocks = split_paragraph(extract_inlines(node.children))
        return blocks[0] if len(blocks) == 1 else blocks
    if t == NodeType.list:
        return _list(node)
    if t == NodeType.code:
        return _code(node)
    if t == NodeType.blockquote:
        inlines = extract_inlines(node.children)
        return QuoteBlock(inlines=inlines, content=flatten_inlines(inlines))
    if t == NodeType.image:
        return ImageBlock(url=node.url or None, alt=node.alt or "")
    if t == NodeType.link:
        inlines = extract_inlines(node.children)
        return LinkBlock(url=node.url or None, text=flatten_inlines(inlines), inlines=inlines)
    if t == NodeType.table:
        return _table(node)
    return None
