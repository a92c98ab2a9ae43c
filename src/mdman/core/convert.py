"""Markdown syntax tree to roff output nodes: a one-token lookback state machine"""

import logging
from typing import Optional

from markdown_it import MarkdownIt

from mdman.core.classify import MarkdownKind, classify
from mdman.core.models import (
    RoffNode,
    bold,
    example,
    indented_paragraph,
    italic,
    linebreak,
    nested,
    paragraph,
    text,
    url,
)
from mdman.core.parse import parse_markdown
from mdman.core.utils.text import to_text
from mdman.core.walk import walk


logger = logging.getLogger(__name__)

CODE_BLOCK_INDENT = 2

# markdown-it wraps heading/paragraph inline content in an `inline` node; it is
# skipped without touching last_kind so the enclosing block still decides.
TRANSPARENT_TYPES = {'inline'}
SILENT_TYPES = {'root'}


class MarkdownConverter:
    """Visit callback for walk(); remembers only the last classified node kind."""

    def __init__(self):
        self.nodes: list[RoffNode] = []
        self.last_kind = MarkdownKind.empty

    def append(self, *nodes: RoffNode) -> None:
        self.nodes.extend(nodes)

    def finalize(self) -> list[RoffNode]:
        return self.nodes

    def visit(self, node) -> None:
        node_type = getattr(node, 'type', None)
        if node_type in TRANSPARENT_TYPES:
            return
        kind = classify(node)

        if kind in (MarkdownKind.link, MarkdownKind.image):
            attrs = node.attrs or {}
            target = attrs.get('href' if kind is MarkdownKind.link else 'src')
            self.append(url(to_text(attrs.get('title')), to_text(target)))
        elif kind is MarkdownKind.code:
            self.append(text("`"), italic(to_text(node.content)), text("`"))
        elif kind is MarkdownKind.code_block:
            self._code_block(to_text(node.content), to_text(node.info).strip())
        elif kind is MarkdownKind.line_break:
            self.append(linebreak())
        elif kind is MarkdownKind.text:
            content = to_text(node.content)
            if not content:
                # markdown-it leaves empty text leaves where emphasis delimiters were
                return
            if self.last_kind is MarkdownKind.heading:
                # last_kind stays heading: sibling text runs get the same treatment
                self._heading(content)
                return
            self._text(content)
        elif kind is MarkdownKind.empty and node_type not in SILENT_TYPES:
            logger.debug("unhandled node: %s", node_type)

        self.last_kind = kind

    def _code_block(self, code: str, info: str) -> None:
        title = bold(info) if info else None
        block = indented_paragraph([linebreak(), example(code)], CODE_BLOCK_INDENT, title)
        self.append(nested([block]))

    def _heading(self, title: str) -> None:
        self.append(
            linebreak(),
            linebreak(),
            bold(title),
            linebreak(),
            text("=" * (len(title.encode("utf-8")) + 2)),
            linebreak(),
        )

    def _text(self, content: str) -> None:
        last = self.last_kind
        if last is MarkdownKind.paragraph:
            self.append(paragraph(content))
        elif last is MarkdownKind.emphasis:
            self.append(italic(content))
        elif last is MarkdownKind.strong:
            self.append(bold(content))
        elif last is MarkdownKind.list_item:
            self.append(text(content), linebreak())
        else:
            self.append(text(content))


def convert_tree(root) -> list[RoffNode]:
    """Convert an already-parsed syntax tree with a fresh converter."""
    converter = MarkdownConverter()
    walk(root, converter.visit)
    return converter.finalize()


def markdown_to_roff(content, parser: Optional[MarkdownIt] = None) -> list[RoffNode]:
    """Parse one chapter's markdown and convert it to an ordered list of roff nodes."""
    return convert_tree(parse_markdown(content, parser))
