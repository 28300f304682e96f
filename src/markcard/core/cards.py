"""Card segmentation at sentinel headings"""

from typing import Sequence

from markcard.core.blocks import normalize_node
from markcard.core.models import Block, Card, CardDocument, Node, NodeType
from markcard.core.parse import parse_markdown


CARD_DELIMITER = "c-a-r-d"


def is_delimiter(node: Node) -> bool:
    """True for a heading whose only child is text reading exactly c-a-r-d (after strip)."""
    if node.type != NodeType.heading or not node.children or len(node.children) != 1:
        return False
    child = node.children[0]
    return child.type == NodeType.text and (child.value or "").strip() == CARD_DELIMITER


def group_cards(nodes: Sequence[Node]) -> list[list[Node]]:
    """Split top-level nodes into runs between delimiters; empty runs are dropped."""
    groups: list[list[Node]] = []
    current: list[Node] = []

    for node in nodes:
        if is_delimiter(node):
            if current:
                groups.append(current)
            current = []
        else:
            current.append(node)
    if current:
        groups.append(current)

    return groups


def _blocks(nodes: list[Node]) -> list[Block]:
    blocks: list[Block] = []
    for node in nodes:
        result = normalize_node(node)
        if isinstance(result, list):
            blocks.extend(result)
        elif result is not None:
            blocks.append(result)
    return blocks


def segment(tree: Node | Sequence[Node]) -> CardDocument:
    """Convert a root node (or its top-level children) into a CardDocument."""
    nodes = (tree.children or []) if isinstance(tree, Node) else tree
    return CardDocument(cards=[
        Card(id=f"card-{i}", blocks=_blocks(group))
        for i, group in enumerate(group_cards(nodes), start=1)
    ])


def parse_markdown_to_cards(text: str, preset: str = 'gfm-like') -> CardDocument:
    """Parse markdown text and segment it into cards."""
    return segment(parse_markdown(text, preset))
