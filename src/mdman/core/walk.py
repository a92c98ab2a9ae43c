"""Pre-order depth-first traversal of a markdown-it syntax tree"""

from typing import Callable, Iterator


def iter_nodes(root) -> Iterator:
    """Yield root and every descendant in document (pre-)order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        # reversed so the first child is popped next
        stack.extend(reversed(node.children))


def walk(root, visit: Callable) -> None:
    """Call visit(node) for root, then for each child subtree in source order."""
    for node in iter_nodes(root):
        visit(node)
