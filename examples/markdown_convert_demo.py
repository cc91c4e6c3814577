#!/usr/bin/env python3
"""Markdown conversion demo - mrkdwn string vs Block Kit blocks

Runs one document through both output modes:
1. mrkdwnify: a single escaped mrkdwn string
2. blocks_stringify: Block Kit JSON

Usage:
    python examples/markdown_convert_demo.py
"""

import os
import sys

# Add src/ to path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from md2mrkdwn import MarkdownToMrkdwn, unescape


TEST_MARKDOWN = """# heading1
## heading 2

Text with **bold**, *italic*, ~~strike~~, `code` and a [link](https://slack.com/).

- First
    - Second
- Third

- [ ] Todo
- [x] Done

```
$ md2mrkdwn --blocks README.md
```
"""


def main():
    converter = MarkdownToMrkdwn()

    print("=" * 60)
    print(" mrkdwn")
    print("=" * 60)
    print(unescape(converter.mrkdwnify(TEST_MARKDOWN)))

    print()
    print("=" * 60)
    print(" Block Kit")
    print("=" * 60)
    print(converter.blocks_stringify(TEST_MARKDOWN, indent=2))


if __name__ == "__main__":
    main()
