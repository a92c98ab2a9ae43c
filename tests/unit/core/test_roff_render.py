"""Unit tests for core/roff.py"""

from mdman.core.convert import markdown_to_roff
from mdman.core.models import (
    Document,
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
from mdman.core.roff import escape, render_document


def _page(*nodes) -> str:
    return render_document(Document(title="Book").section("Intro", list(nodes)))


def test_header_and_section():
    out = render_document(Document(title="My Book", section_number=1).section("First", []))
    assert out == '.TH "My Book" 1\n.SH "First"\n'


def test_heading_decoration():
    out = _page(linebreak(), linebreak(), bold("Title"), linebreak(), text("======="), linebreak())
    assert out.splitlines()[2:] == [".br", ".br", "\\fBTitle\\fR", ".br", "=======", ".br"]


def test_escaping():
    assert escape("a-b\\c") == "a\\-b\\ec"
    assert _page(text("-v")).splitlines()[-1] == "\\-v"


def test_inline_runs_join_on_one_line():
    out = _page(paragraph("Run "), text("`"), italic("ls"), text("`"), text(" now"))
    assert out.splitlines()[2:] == [".P", "Run ", "`\\fIls\\fR` now"]


def test_leading_dot_is_guarded():
    assert _page(text(".hidden")).splitlines()[-1] == "\\&.hidden"


def test_code_block():
    block = nested([indented_paragraph([linebreak(), example("fn main() {}\n.x\n")], 2, bold("rust"))])
    assert _page(block).splitlines()[2:] == [
        ".RS", '.IP "\\fBrust\\fR" 2', ".br", ".EX", "fn main() {}", "\\&.x", ".EE", ".RE",
    ]


def test_code_block_without_caption():
    block = indented_paragraph([example("a\\b")], 2)
    assert _page(block).splitlines()[2:] == ['.IP "" 2', ".EX", "a\\eb", ".EE"]


def test_url():
    assert _page(url("Docs", "https://example.com")).splitlines()[2:] == [
        '.UR "https://example.com"', "Docs", ".UE",
    ]


def test_url_without_name():
    assert _page(url("", "http://x")).splitlines()[2:] == ['.UR "http://x"', ".UE"]


def test_quotes_in_title():
    out = render_document(Document(title='say "hi"'))
    assert out == '.TH "say \\(dqhi\\(dq" 7\n'


def test_converted_chapter_renders(parser):
    nodes = markdown_to_roff("# Name\n\nSome *text* here.\n", parser)
    out = _page(*nodes)
    assert "\\fBName\\fR" in out
    assert "\\fItext\\fR" in out
    assert out.endswith("\n")


def test_url_address_is_quoted():
    """Addresses are quoted as one argument; hyphens are left as-is."""
    out = _page(url("x", 'http://a-b.org/"q" p'))
    assert out.splitlines()[2] == '.UR "http://a-b.org/\\(dqq\\(dq p"'
