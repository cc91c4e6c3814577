"""
md2mrkdwn

Converts GitHub Flavored Markdown into Slack mrkdwn, either as one escaped
string or as Block Kit blocks.

Usage:
    from md2mrkdwn import MarkdownToMrkdwn

    converter = MarkdownToMrkdwn()

    # Markdown → escaped mrkdwn string
    text = converter.mrkdwnify("**bold** and ~~gone~~")

    # Markdown → Block Kit JSON
    payload = converter.blocks_stringify("# Title\n\n- First\n- Second")
"""

from md2mrkdwn.blocks import (
    Block,
    Divider,
    Header,
    Section,
    block_to_dict,
    blockify,
    blockify_nodes,
    blocks_stringify,
    blocks_to_payload,
)
from md2mrkdwn.converter import MarkdownToMrkdwn
from md2mrkdwn.exceptions import Md2MrkdwnError, ParseError
from md2mrkdwn.parser import MarkdownParser
from md2mrkdwn.renderer import escape, mrkdwnify, render, render_node, unescape

__version__ = "0.1.0"

__all__ = [
    'Block',
    'Divider',
    'Header',
    'MarkdownParser',
    'MarkdownToMrkdwn',
    'Md2MrkdwnError',
    'ParseError',
    'Section',
    'block_to_dict',
    'blockify',
    'blockify_nodes',
    'blocks_stringify',
    'blocks_to_payload',
    'escape',
    'mrkdwnify',
    'render',
    'render_node',
    'unescape',
]
