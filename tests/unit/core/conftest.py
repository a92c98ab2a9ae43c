"""Shared fixtures for core unit tests"""

from dataclasses import dataclass, field
from typing import Any, Union

import pytest
from markdown_it import MarkdownIt


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text.

## Heading 2

- item one
- item two

```python
print("hello")
```

See [the docs](https://example.com "Docs").
"""


@dataclass
class FakeNode:
    """Minimal stand-in for markdown_it.tree.SyntaxTreeNode."""
    type: str
    content: Union[str, bytes] = ""
    info: Union[str, bytes] = ""
    attrs: dict[str, Any] = field(default_factory=dict)
    children: list = field(default_factory=list)


@pytest.fixture(name="node")
def node_fixture():
    """Factory: node("heading", node("text", content="x"))."""
    def _node(type_: str, *children, **kwargs) -> FakeNode:
        return FakeNode(type=type_, children=list(children), **kwargs)
    return _node


@pytest.fixture(name="parser")
def parser_fixture():
    return MarkdownIt("commonmark")


@pytest.fixture(name="table_parser")
def table_parser_fixture():
    return MarkdownIt("commonmark").enable("table")


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD
