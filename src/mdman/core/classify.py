"""Classification of markdown-it tree nodes into the kinds the converter tracks"""

from enum import Enum


class MarkdownKind(str, Enum):
    """Closed set of node kinds that drive text formatting; empty is the fallback."""
    heading = "heading"
    paragraph = "paragraph"
    code = "code"
    code_block = "code_block"
    strong = "strong"
    emphasis = "emphasis"
    link = "link"
    image = "image"
    soft_break = "soft_break"
    line_break = "line_break"
    list = "list"
    list_item = "list_item"
    text = "text"
    empty = "empty"


NODE_KIND_MAP: dict[str, MarkdownKind] = {
    'heading':      MarkdownKind.heading,
    'paragraph':    MarkdownKind.paragraph,
    'code_inline':  MarkdownKind.code,
    'fence':        MarkdownKind.code_block,
    'code_block':   MarkdownKind.code_block,
    'strong':       MarkdownKind.strong,
    'em':           MarkdownKind.emphasis,
    'link':         MarkdownKind.link,
    'image':        MarkdownKind.image,
    'softbreak':    MarkdownKind.soft_break,
    'hardbreak':    MarkdownKind.line_break,
    'bullet_list':  MarkdownKind.list,
    'ordered_list': MarkdownKind.list,
    'list_item':    MarkdownKind.list_item,
    'text':         MarkdownKind.text,
}


def classify(node) -> MarkdownKind:
    """Map a tree node to its MarkdownKind; unknown types (root, table, html...) are empty."""
    return NODE_KIND_MAP.get(getattr(node, 'type', None), MarkdownKind.empty)
