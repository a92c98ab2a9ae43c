"""Unit tests for core/classify.py"""

import pytest

from mdman.core.classify import MarkdownKind, classify


@pytest.mark.parametrize("node_type,expected", [
    ("heading",      MarkdownKind.heading),
    ("paragraph",    MarkdownKind.paragraph),
    ("code_inline",  MarkdownKind.code),
    ("fence",        MarkdownKind.code_block),
    ("code_block",   MarkdownKind.code_block),
    ("strong",       MarkdownKind.strong),
    ("em",           MarkdownKind.emphasis),
    ("link",         MarkdownKind.link),
    ("image",        MarkdownKind.image),
    ("softbreak",    MarkdownKind.soft_break),
    ("hardbreak",    MarkdownKind.line_break),
    ("bullet_list",  MarkdownKind.list),
    ("ordered_list", MarkdownKind.list),
    ("list_item",    MarkdownKind.list_item),
    ("text",         MarkdownKind.text),
])
def test_known_types(node, node_type, expected):
    """Each handled markdown-it node type maps to its MarkdownKind."""
    assert classify(node(node_type)) is expected


@pytest.mark.parametrize("node_type", ["root", "table", "html_block", "blockquote", "hr", "s", "footnote_ref"])
def test_unknown_types_are_empty(node, node_type):
    assert classify(node(node_type)) is MarkdownKind.empty


def test_node_without_type_is_empty():
    assert classify(object()) is MarkdownKind.empty


def test_real_tree_root_is_empty(parser):
    from markdown_it.tree import SyntaxTreeNode
    root = SyntaxTreeNode(parser.parse("# x\n"))
    assert classify(root) is MarkdownKind.empty
    assert classify(root.children[0]) is MarkdownKind.heading
