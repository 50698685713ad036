"""Read-only structural queries over markdown-it SyntaxTreeNode trees.

markdown-it wraps the inline content of paragraphs and headings in an
``inline`` container node. The queries here look through that container so a
text node's parent is its paragraph and a paragraph's first child is its
first text run.
"""

from markdown_it.tree import SyntaxTreeNode

from mdgrip.markdown.models import NodeKind

_NODE_KINDS: dict[str, NodeKind] = {
    "blockquote": NodeKind.BLOCK_QUOTE,
    "paragraph": NodeKind.PARAGRAPH,
    "text": NodeKind.TEXT,
    "list_item": NodeKind.LIST_ITEM,
    "fence": NodeKind.CODE_BLOCK,
    "code_block": NodeKind.CODE_BLOCK,
}


def is_transparent(node: SyntaxTreeNode) -> bool:
    """Root and inline containers produce no markup of their own."""
    return node.is_root or node.type == "inline"


def node_kind(node: SyntaxTreeNode | None) -> NodeKind:
    if node is None:
        return NodeKind.OTHER
    return _NODE_KINDS.get(node.type, NodeKind.OTHER)


def parent(node: SyntaxTreeNode) -> SyntaxTreeNode | None:
    """Structural parent of `node`, skipping the inline container."""
    up = node.parent
    if up is not None and up.type == "inline":
        up = up.parent
    return up


def _is_empty_text(node: SyntaxTreeNode) -> bool:
    return node.type == "text" and not node.content


def first_child(node: SyntaxTreeNode) -> SyntaxTreeNode | None:
    """First structural child of `node`, descending into the inline container.

    Empty text runs are skipped; markdown-it-py 4 emits them in front of
    emphasis delimiters (`**bold**` starts with `text('')`).
    """
    if not node.children:
        return None
    child = node.children[0]
    if child.type != "inline":
        return child
    return next((inline_child for inline_child in child.children if not _is_empty_text(inline_child)), None)


def leading_text(node: SyntaxTreeNode) -> SyntaxTreeNode | None:
    """Return the text node that opens a paragraph, or None if it starts with anything else."""
    child = first_child(node)
    return child if node_kind(child) is NodeKind.TEXT else None
