"""markdown-it parser construction and chapter parsing"""

from typing import Optional, Union

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from mdman.core.utils.text import to_text


DEFAULT_PRESET = 'commonmark'


def make_parser(preset: str = DEFAULT_PRESET) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    try:
        return MarkdownIt(preset)
    except KeyError as e:
        raise ValueError(f"Unknown markdown-it preset: {preset!r}") from e


def parse_markdown(text: Union[str, bytes], parser: Optional[MarkdownIt] = None) -> SyntaxTreeNode:
    """Parse chapter text into a syntax tree; undecodable bytes are replaced, not raised."""
    md = parser or make_parser()
    return SyntaxTreeNode(md.parse(to_text(text)))
