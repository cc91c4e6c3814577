"""
Block Kit Segmenter

Splits the top-level children of a document into Slack Block Kit blocks and
maps them onto the JSON records the Slack API expects.

Usage:
    from md2mrkdwn.blocks import blockify, blocks_to_payload

    blocks = blockify("# Title\n\nHello **world**")
    payload = blocks_to_payload(blocks)
"""

import json
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Iterable, List, Optional, Sequence, Union

from md2mrkdwn import nodes
from md2mrkdwn.constants import BlockType, TextType
from md2mrkdwn.logger import logger
from md2mrkdwn.parser import MarkdownParser
from md2mrkdwn.renderer import render, render_node


@dataclass(frozen=True)
class Header:
    """Plain-text title block."""
    text: str
    type: ClassVar[str] = BlockType.HEADER


@dataclass(frozen=True)
class Divider:
    type: ClassVar[str] = BlockType.DIVIDER


@dataclass(frozen=True)
class Section:
    """mrkdwn text block."""
    text: str
    type: ClassVar[str] = BlockType.SECTION


Block = Union[Header, Divider, Section]


def blocks_for_node(node: nodes.Node) -> List[Block]:
    """
    Blocks emitted for one top-level node.

    A level 1 heading is a title banner and is followed by a divider. Other
    headings become a lone header, thematic breaks a divider, and anything
    else one section holding the node's rendered text.
    """
    if isinstance(node, nodes.Heading):
        header = Header(render(node.children))
        if node.depth == 1:
            return [header, Divider()]
        return [header]
    if isinstance(node, nodes.ThematicBreak):
        return [Divider()]
    return [Section(render_node(node, render, 0))]


def blockify_nodes(children: Sequence[nodes.Node]) -> List[Block]:
    """Segment already parsed top-level nodes, preserving document order."""
    blocks: List[Block] = []
    for child in children:
        blocks.extend(blocks_for_node(child))
    return blocks


def blockify(text: str, parser: Optional[MarkdownParser] = None) -> List[Block]:
    """
    Convert Markdown into a list of blocks.

    Section text is not escaped; JSON serialization takes care of quoting.

    Raises:
        ParseError: If the input cannot be parsed or is empty
    """
    root = (parser or MarkdownParser()).parse(text)
    blocks = blockify_nodes(root.children)
    logger.debug(f"Segmented {len(root.children)} node(s) into {len(blocks)} block(s)")
    return blocks


# =============================================================================
# Wire format
# =============================================================================

def block_to_dict(block: Block) -> Dict[str, Any]:
    """Map a block onto its Slack Block Kit record."""
    if isinstance(block, Header):
        return {
            "type": BlockType.HEADER,
            "text": {
                "type": TextType.PLAIN_TEXT,
                "text": block.text,
                "emoji": True,
            },
        }
    if isinstance(block, Divider):
        return {"type": BlockType.DIVIDER}
    if isinstance(block, Section):
        return {
            "type": BlockType.SECTION,
            "text": {
                "type": TextType.MRKDWN,
                "text": block.text,
            },
        }
    raise TypeError(f"Not a block: {block!r}")


def blocks_to_payload(blocks: Iterable[Block]) -> Dict[str, List[Dict[str, Any]]]:
    """Wrap blocks in the ``{"blocks": [...]}`` message document."""
    return {"blocks": [block_to_dict(block) for block in blocks]}


def blocks_stringify(text: str, parser: Optional[MarkdownParser] = None,
                     indent: Optional[int] = None) -> str:
    """
    Convert Markdown into the JSON text of a Block Kit message.

    Args:
        text: Markdown source
        parser: Parser to reuse; a new one is created when omitted
        indent: Pretty-print indentation, compact output when None

    Raises:
        ParseError: If the input cannot be parsed or is empty
    """
    payload = blocks_to_payload(blockify(text, parser))
    return json.dumps(payload, ensure_ascii=False, indent=indent)
