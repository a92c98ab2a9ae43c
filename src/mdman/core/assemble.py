"""Assemble converted chapters into man page documents"""

from typing import Optional

from markdown_it import MarkdownIt

from mdman.core.context import Book
from mdman.core.convert import markdown_to_roff
from mdman.core.models import Document
from mdman.core.parse import make_parser


def book_to_roff(
    book: Book,
    title: str = "",
    parser: Optional[MarkdownIt] = None,
    section_number: int = 7,
    ) -> Document:
    """Build one document titled after the book with a section per chapter, in book order."""
    md = parser or make_parser()
    page = Document(title=title or "", section_number=section_number)
    for chapter in book.chapters():
        page.section(chapter.name, markdown_to_roff(chapter.content, md))
    return page


def book_to_roff_chapters(
    book: Book,
    parser: Optional[MarkdownIt] = None,
    section_number: int = 7,
    ) -> list[Document]:
    """Build one single-section document per chapter, each titled after its chapter."""
    md = parser or make_parser()
    pages = []
    for chapter in book.chapters():
        page = Document(title=chapter.name, section_number=section_number)
        pages.append(page.section(chapter.name, markdown_to_roff(chapter.content, md)))
    return pages
