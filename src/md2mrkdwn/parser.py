"""
Markdown Parser Adapter

Parses GitHub Flavored Markdown with markdown-it-py and converts the
resulting syntax tree into the typed nodes in ``md2mrkdwn.nodes``.

Usage:
    from md2mrkdwn.parser import MarkdownParser

    root = MarkdownParser().parse("# Title\n\n- [x] done")
"""

from typing import Any, Dict, List, Optional, Tuple

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from md2mrkdwn import nodes
from md2mrkdwn.exceptions import ParseError
from md2mrkdwn.logger import logger


# Markers emitted by the tasklists plugin
_TASK_ITEM_CLASS = "task-list-item"
_CHECKBOX_CLASS = "task-list-item-checkbox"
_CHECKED_ATTR = 'checked="checked"'

# Container tokens whose children map one-to-one onto a typed node
_CONTAINERS = {
    "blockquote": nodes.BlockQuote,
    "paragraph": nodes.Paragraph,
    "em": nodes.Emphasis,
    "strong": nodes.Strong,
    "s": nodes.Delete,
}


def create_markdown_it() -> MarkdownIt:
    """Build a markdown-it instance configured for GitHub Flavored Markdown."""
    md = MarkdownIt("commonmark", {"linkify": True})
    md.enable(["table", "strikethrough", "linkify"])
    md.use(tasklists_plugin)
    md.use(footnote_plugin)
    return md


class MarkdownParser:
    """Turns Markdown source into a ``nodes.Root`` tree."""

    def __init__(self, md: Optional[MarkdownIt] = None):
        self.md = md or create_markdown_it()

    def parse(self, text: str) -> nodes.Root:
        """
        Parse Markdown text into a typed document tree.

        Args:
            text: GitHub Flavored Markdown source

        Returns:
            Root node holding the top-level blocks

        Raises:
            ParseError: If markdown-it rejects the input or the document
                has no top-level blocks and no definitions
        """
        env: Dict[str, Any] = {}
        try:
            tree = SyntaxTreeNode(self.md.parse(text, env))
        except Exception as e:
            raise ParseError(f"failed to parse markdown: {e}") from e

        children = self._convert_children(tree.children)
        if not children:
            # Link and footnote definitions leave no tokens behind
            if env.get("references") or env.get("footnotes"):
                logger.debug("Document holds only definitions")
                return nodes.Root(children=())
            raise ParseError("no input?")

        logger.debug(f"Parsed {len(children)} top-level node(s)")
        return nodes.Root(children=children)

    def _convert_children(self, children: List[SyntaxTreeNode]) -> Tuple[nodes.Node, ...]:
        converted: List[nodes.Node] = []
        for child in children:
            if child.type == "inline":
                # Inline wrappers only group content; splice their children in
                converted.extend(self._convert_children(child.children))
            else:
                converted.append(self._convert(child))
        return tuple(converted)

    def _convert(self, node: SyntaxTreeNode) -> nodes.Node:
        t = node.type

        if t in _CONTAINERS:
            return _CONTAINERS[t](children=self._convert_children(node.children))

        if t == "heading":
            return nodes.Heading(
                depth=int(node.tag[1:]),
                children=self._convert_children(node.children),
            )

        if t in ("bullet_list", "ordered_list"):
            return nodes.List(
                ordered=t == "ordered_list",
                children=self._convert_children(node.children),
            )

        if t == "list_item":
            return self._convert_list_item(node)

        if t in ("fence", "code_block"):
            value = node.content
            if value.endswith("\n"):
                value = value[:-1]
            return nodes.Code(value=value)

        if t == "link":
            return nodes.Link(
                url=str(node.attrs.get("href", "")),
                children=self._convert_children(node.children),
            )

        if t in ("text", "text_special"):
            return nodes.Text(value=node.content)
        if t == "softbreak":
            return nodes.Text(value="\n")
        if t == "hardbreak":
            return nodes.Break()
        if t == "code_inline":
            return nodes.InlineCode(value=node.content)
        if t == "hr":
            return nodes.ThematicBreak()

        # Tables, images, html, ...
        return nodes.Unsupported(kind=t)

    def _convert_list_item(self, node: SyntaxTreeNode) -> nodes.ListItem:
        children = self._convert_children(node.children)
        checked = None

        if children and isinstance(children[0], nodes.Paragraph):
            first = children[0]
            state = _checkbox_state(node)
            if state is not None:
                checked = state
                children = (nodes.Paragraph(children=_strip_checkbox(first.children)),) + children[1:]

        return nodes.ListItem(checked=checked, children=children)


def _checkbox_state(item: SyntaxTreeNode) -> Optional[bool]:
    """Return the task state of a list item, or None for a plain item."""
    # Only the plugin marks the item itself; raw HTML checkboxes stay content
    if _TASK_ITEM_CLASS not in str(item.attrs.get("class", "")).split():
        return None
    if not item.children or item.children[0].type != "paragraph":
        return None
    paragraph = item.children[0]
    if not paragraph.children or paragraph.children[0].type != "inline":
        return None
    inline = paragraph.children[0]
    if not inline.children:
        return None

    first = inline.children[0]
    if first.type != "html_inline" or _CHECKBOX_CLASS not in first.content:
        return None
    return _CHECKED_ATTR in first.content


def _strip_checkbox(children: Tuple[nodes.Node, ...]) -> Tuple[nodes.Node, ...]:
    """Drop the checkbox placeholder and the space that followed the marker."""
    rest = children[1:]
    if rest and isinstance(rest[0], nodes.Text) and rest[0].value.startswith(" "):
        rest = (nodes.Text(value=rest[0].value[1:]),) + rest[1:]
    return rest
