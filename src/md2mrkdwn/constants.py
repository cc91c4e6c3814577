"""
Constants Module

Defines constants used across the md2mrkdwn project.
"""

# =============================================================================
# Slack Block Types
# =============================================================================

class BlockType:
    """Slack Block Kit block types produced by the segmenter."""
    HEADER = "header"
    DIVIDER = "divider"
    SECTION = "section"


class TextType:
    """Slack text object types."""
    PLAIN_TEXT = "plain_text"
    MRKDWN = "mrkdwn"


# =============================================================================
# mrkdwn Templates
# =============================================================================

# One level of list indentation
INDENT_UNIT = "    "

# Ordered items are "<n>." followed by this gap
ORDERED_GAP = ".  "

# Unordered decorations share the same fixed-width gap
BULLET = "\u2022"           # •
TASK_CHECKED = "\u2611"     # ☑
TASK_UNCHECKED = "\u2610"   # ☐
BULLET_GAP = "   "

THEMATIC_BREAK = "\n----------\n"
CODE_FENCE = "```"


# =============================================================================
# CLI / Config Constants
# =============================================================================

DEFAULT_CONFIG_FILE = "md2mrkdwn.json"

OUTPUT_TEXT = "text"
OUTPUT_BLOCKS = "blocks"
OUTPUT_MODES = (OUTPUT_TEXT, OUTPUT_BLOCKS)

# Exit codes
EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_IO_ERROR = 2
