from typing import List, Optional

from md2mrkdwn.blocks import Block, blockify, blocks_stringify
from md2mrkdwn.nodes import Root
from md2mrkdwn.parser import MarkdownParser
from md2mrkdwn.renderer import mrkdwnify


class MarkdownToMrkdwn:
    """
    Converts GitHub Flavored Markdown to Slack mrkdwn.

    Keeps one parser around; every call builds its own render state, so an
    instance can be shared between threads.
    """

    def __init__(self, parser: Optional[MarkdownParser] = None):
        self.parser = parser or MarkdownParser()

    def parse(self, text: str) -> Root:
        return self.parser.parse(text)

    def mrkdwnify(self, text: str) -> str:
        """Convert to a single escaped mrkdwn string."""
        return mrkdwnify(text, self.parser)

    def blockify(self, text: str) -> List[Block]:
        """Convert to header / divider / section blocks."""
        return blockify(text, self.parser)

    def blocks_stringify(self, text: str, indent: Optional[int] = None) -> str:
        """Convert to the JSON text of a Block Kit message."""
        return blocks_stringify(text, self.parser, indent=indent)
