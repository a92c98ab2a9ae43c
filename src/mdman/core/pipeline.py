"""Render orchestration: render context -> man page text -> files or stdout"""

import logging
from pathlib import Path

from mdman.config import Settings
from mdman.core.assemble import book_to_roff, book_to_roff_chapters
from mdman.core.context import RenderContext
from mdman.core.parse import make_parser
from mdman.core.roff import render_document


logger = logging.getLogger(__name__)


def chapter_filename(index: int) -> str:
    return f"chapter{index}.man"


def render_pages(ctx: RenderContext, settings: Settings) -> list[tuple[str, str]]:
    """Render the book to (filename, roff text) pairs; one pair unless split_chapters is set."""
    parser = make_parser(settings.parser_config)
    if settings.split_chapters:
        docs = book_to_roff_chapters(ctx.book, parser, settings.section_number)
        named = [(chapter_filename(i), doc) for i, doc in enumerate(docs)]
    else:
        doc = book_to_roff(ctx.book, ctx.book_title, parser, settings.section_number)
        named = [(settings.filename, doc)]

    pages = []
    for filename, doc in named:
        try:
            pages.append((filename, render_document(doc)))
        except Exception as e:
            raise RuntimeError(f"Failed to render {filename}: {e}") from e
        logger.info("rendered %s (%d section(s))", filename, len(doc.sections))
    return pages


def write_pages(pages: list[tuple[str, str]], output_dir: Path) -> list[Path]:
    """Write rendered pages under output_dir (created if missing). Returns written paths."""
    written = []
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        for filename, page in pages:
            path = output_dir / filename
            path.write_text(page, encoding="utf-8")
            written.append(path)
    except OSError as e:
        raise RuntimeError(f"Failed to write {output_dir}: {e}") from e
    return written
