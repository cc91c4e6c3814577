"""
Pytest configuration and shared fixtures.
"""

import os
import sys

import pytest

# Add src/ to path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from md2mrkdwn.converter import MarkdownToMrkdwn  # noqa: E402


@pytest.fixture
def converter() -> MarkdownToMrkdwn:
    return MarkdownToMrkdwn()


@pytest.fixture
def sample_markdown() -> str:
    """Provide sample markdown content for testing."""
    return """# Heading 1
## Heading 2
### Heading 3

Hello, ~~Markdown~~ **mrkdwn**! and _markdown_.

`mrkdwn` is text formatting markup style in [Slack](https://slack.com/).

---

- First
    - Second
        - Third
    - Fourth
        - Fifth
        - Sixth
- Seventh


1. Ordered list 1
    - Ordered list 1-1
        - Ordered list 1-2
1. Ordered list 2
    1. Ordered list 2-1
    1. Ordered list 2-2
1. Ordered list 3

> *This is blockquote.*

```
console.log('Hello, mrkdwn!')
```

Another paragraph.
"""


@pytest.fixture
def markdown_file(tmp_path, sample_markdown) -> str:
    """Write the sample markdown to a file and return its path."""
    path = tmp_path / "sample.md"
    path.write_text(sample_markdown, encoding="utf-8")
    return str(path)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep MD2MRKDWN_* variables and config files from leaking into tests."""
    for name in list(os.environ):
        if name.startswith("MD2MRKDWN_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
