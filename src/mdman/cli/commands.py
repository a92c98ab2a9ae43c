"""CLI command implementations"""

import json
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdman.config import Settings, load_config
from mdman.core.context import RenderContext
from mdman.core.convert import markdown_to_roff
from mdman.core.models import Document
from mdman.core.parse import make_parser
from mdman.core.pipeline import render_pages, write_pages
from mdman.core.roff import render_document
from mdman.logging_utils import configure_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(renderer_config: dict = None, overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(renderer_config=renderer_config, overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _read_context(path: Optional[Path]) -> RenderContext:
    """Read the render context from path, or stdin when path is None."""
    try:
        raw = path.read_bytes() if path else sys.stdin.buffer.read()
        return RenderContext.from_json(raw)
    except (OSError, ValueError) as e:
        _fail("Could not read render context", e)


def render_cmd(
    context: Annotated[Optional[Path], typer.Option("--context", help="Render context JSON file (default: stdin)")] = None,
    out: Annotated[Optional[str], typer.Option("--output-dir", help="Output directory (default: stdout)")] = None,
    split: Annotated[Optional[bool], typer.Option("--split-chapters/--no-split-chapters", help="One page per chapter")] = None,
    filename: Annotated[Optional[str], typer.Option("--filename", help="Single-page output filename")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level")] = None,
    ):
    """Render an mdbook render context to man page(s)."""
    ctx = _read_context(context)
    settings = _settings(
        renderer_config=ctx.renderer_config("man"),
        overrides={"output_dir": out, "split_chapters": split, "filename": filename, "log_level": log_level},
    )
    configure_logging(settings.log_level)

    try:
        pages = render_pages(ctx, settings)
    except (RuntimeError, ValueError) as e:
        _fail(str(e))

    if settings.output_dir is None:
        for _, page in pages:
            typer.echo(page, nl=False)
        return

    try:
        written = write_pages(pages, Path(settings.output_dir))
    except RuntimeError as e:
        _fail(str(e))
    for path in written:
        typer.echo(f"  wrote {path}", err=True)


def convert_cmd(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, help="Markdown file to convert")],
    title: Annotated[Optional[str], typer.Option("--title", help="Page title (default: file stem)")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print output nodes as JSON instead of roff")] = False,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level")] = None,
    ):
    """Convert a single markdown file to a one-section man page on stdout."""
    settings = _settings(overrides={"parser_config": parser, "log_level": log_level})
    configure_logging(settings.log_level)

    name = title or path.stem
    try:
        nodes = markdown_to_roff(path.read_bytes(), make_parser(settings.parser_config))
    except OSError as e:
        _fail(f"Could not read {path}", e)
    except ValueError as e:
        _fail(str(e))

    if as_json:
        payload = [node.model_dump(mode="json") for node in nodes]
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    doc = Document(title=name, section_number=settings.section_number).section(name, nodes)
    typer.echo(render_document(doc), nl=False)
