"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_document() -> str:
    """Generate a large markdown document (~100KB)."""
    sections = []
    for i in range(100):
        sections.append(f"""
# Section {i}

This is paragraph {i} with **bold**, *italic*, ~~struck~~ and `code`.

- List item 1
- List item 2
  1. Nested ordered item
  2. Another nested item

```python
def function_{i}():
    return {i}
```

| Column A | Column B |
|----------|----------|
| Cell {i} | Data {i} |

> This is a blockquote in section {i}.
> It has multiple lines.

Here is a [link](https://example.com/{i}) and an ![image](https://example.com/{i}.png).

---
""")
    return "\n".join(sections)


@pytest.fixture
def real_world_docs() -> list[str]:
    """Collection of real-world markdown patterns."""
    return [
        "Hello **world**!",
        """# Title

This is a paragraph with *emphasis* and **strong**.

## Subtitle

More content here.""",
        """# API Reference

```python
from mylib import Client

client = Client(api_key="xxx")
```

See the [docs](https://example.com/docs) for details.""",
        """1. First
2. Second
   - nested *bullet*
   - another
3. Third""",
        """> **Note**
> Quoted release notes with `inline code`.

Thanks!""",
    ]


@pytest.fixture
def deeply_nested() -> str:
    """Blockquotes nested close to markdown-it-py's nesting limit, repeated."""
    return "\n\n".join("> " * 15 + f"deep {i}" for i in range(200))
