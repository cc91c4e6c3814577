"""
mrkdwn Renderer

Renders a typed document tree into Slack mrkdwn text.

``render_node`` is the single node-to-syntax table. It is parameterized by
the function used to render child sequences, so the flat renderer
(``render``) and the block segmenter (``md2mrkdwn.blocks``) share it.

List nesting depth is passed down as an argument: 0 at top level, one more
inside each list.
"""

from typing import Callable, Optional, Sequence

from md2mrkdwn import nodes
from md2mrkdwn.constants import (
    BULLET,
    BULLET_GAP,
    CODE_FENCE,
    INDENT_UNIT,
    ORDERED_GAP,
    TASK_CHECKED,
    TASK_UNCHECKED,
    THEMATIC_BREAK,
)
from md2mrkdwn.logger import logger
from md2mrkdwn.parser import MarkdownParser

RenderChildren = Callable[[Sequence[nodes.Node], int], str]


def render(children: Sequence[nodes.Node], depth: int = 0) -> str:
    """Render a node sequence, concatenating results in document order."""
    return "".join(render_node(child, render, depth) for child in children)


def render_node(node: nodes.Node, render_children: RenderChildren, depth: int = 0) -> str:
    """
    Render one node to mrkdwn.

    Args:
        node: Node to render
        render_children: Renders a child sequence at a given depth
        depth: Current list nesting depth

    Returns:
        mrkdwn text; empty for constructs without a mrkdwn form
    """
    if isinstance(node, nodes.BlockQuote):
        return "> " + render_children(node.children, depth)
    if isinstance(node, nodes.Break):
        return "\n"
    if isinstance(node, nodes.Code):
        return f"{CODE_FENCE}\n{node.value}\n{CODE_FENCE}\n"
    if isinstance(node, nodes.Delete):
        return "~" + render_children(node.children, depth) + "~"
    if isinstance(node, nodes.Emphasis):
        return "_" + render_children(node.children, depth) + "_"
    if isinstance(node, nodes.Heading):
        return "*" + render_children(node.children, depth) + "*\n\n"
    if isinstance(node, nodes.InlineCode):
        return f"`{node.value}`"
    if isinstance(node, nodes.Link):
        return f"<{node.url}|{render_children(node.children, depth)}>"
    if isinstance(node, nodes.List):
        return render_list(node, render_children, depth)
    if isinstance(node, nodes.ListItem):
        # Decoration belongs to the enclosing list
        return render_children(node.children, depth)
    if isinstance(node, nodes.Paragraph):
        return render_children(node.children, depth) + "\n"
    if isinstance(node, nodes.Strong):
        return "*" + render_children(node.children, depth) + "*"
    if isinstance(node, nodes.Text):
        return node.value
    if isinstance(node, nodes.ThematicBreak):
        return THEMATIC_BREAK
    # Unsupported, Root and anything else without a mrkdwn form
    return ""


def list_item_prefix(lst: nodes.List, index: int, item: nodes.Node) -> str:
    """
    Decoration for the item at 0-based ``index``.

    Ordered lists are renumbered from 1. Unordered items use a checkbox when
    they carry task state, a bullet otherwise.
    """
    if lst.ordered:
        return f"{index + 1}{ORDERED_GAP}"

    checked = item.checked if isinstance(item, nodes.ListItem) else None
    if checked is None:
        mark = BULLET
    elif checked:
        mark = TASK_CHECKED
    else:
        mark = TASK_UNCHECKED
    return mark + BULLET_GAP


def render_list(lst: nodes.List, render_children: RenderChildren, depth: int = 0) -> str:
    """Render a list whose parent sits at ``depth``."""
    level = depth + 1
    indent = INDENT_UNIT * (level - 1)

    lines = []
    for index, item in enumerate(lst.children):
        item_children = getattr(item, "children", ())
        lines.append(
            indent
            + list_item_prefix(lst, index, item)
            + render_children(item_children, level)
            + "\n"
        )

    return "".join(lines).replace("\n\n", "\n") + "\n"


def escape(text: str) -> str:
    """
    Escape mrkdwn text for embedding in a JSON string literal.

    Order: ``"`` then ``&`` then newlines, then one trailing ``\\n`` is
    dropped. ``<`` and ``>`` are left alone since they delimit links.
    """
    escaped = text.replace('"', '\\"').replace("&", "&amp;").replace("\n", "\\n")
    if escaped.endswith("\\n"):
        escaped = escaped[:-2]
    return escaped


def unescape(text: str) -> str:
    """Undo ``escape`` for human-readable output."""
    return text.replace('\\"', '"').replace("&amp;", "&").replace("\\n", "\n")


def mrkdwnify(text: str, parser: Optional[MarkdownParser] = None) -> str:
    """
    Convert Markdown to a single escaped mrkdwn string.

    Raises:
        ParseError: If the input cannot be parsed or is empty
    """
    root = (parser or MarkdownParser()).parse(text)
    result = escape(render(root.children).strip())
    logger.debug(f"Rendered {len(root.children)} node(s) into {len(result)} chars")
    return result
