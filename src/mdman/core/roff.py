"""Serialize output node documents to man(7) roff text"""

from mdman.core.models import (
    Document,
    Example,
    FontStyle,
    IndentedParagraph,
    LineBreak,
    Nested,
    Paragraph,
    Text,
    Url,
)


FONT_ESCAPES = {
    FontStyle.bold:   ("\\fB", "\\fR"),
    FontStyle.italic: ("\\fI", "\\fR"),
}


def escape(content: str) -> str:
    """Escape characters troff would otherwise interpret inside text."""
    return content.replace("\\", "\\e").replace("-", "\\-")


def quote_address(address: str) -> str:
    """Quote a URL argument; hyphens stay literal so the address is not altered."""
    return '"' + address.replace("\\", "\\e").replace('"', "\\(dq") + '"'


def quote(arg: str) -> str:
    """Render a request argument as a double-quoted string."""
    return '"' + escape(arg).replace('"', '\\(dq') + '"'


def guard_line(line: str) -> str:
    """Keep a text line from being read as a control line."""
    if line.startswith((".", "'")):
        return "\\&" + line
    return line


def render_text(node: Text) -> str:
    body = escape(node.content.replace("\n", " "))
    if node.style in FONT_ESCAPES:
        start, end = FONT_ESCAPES[node.style]
        return f"{start}{body}{end}"
    return body


class RoffWriter:
    """Accumulates roff lines; text runs are joined onto the current line."""

    def __init__(self):
        self.lines: list[str] = []
        self._line = ""

    def inline(self, content: str) -> None:
        if not self._line:
            # leading blanks on a text line cause a break
            content = content.lstrip(" \t")
        self._line += content

    def flush(self) -> None:
        if self._line:
            self.lines.append(guard_line(self._line))
            self._line = ""

    def request(self, name: str, *args: str) -> None:
        self.flush()
        self.lines.append(" ".join([f".{name}", *args]))

    def literal(self, content: str) -> None:
        self.flush()
        for line in content.rstrip("\n").split("\n"):
            self.lines.append(guard_line(line.replace("\\", "\\e")))

    def node(self, node) -> None:
        if isinstance(node, Text):
            self.inline(render_text(node))
        elif isinstance(node, LineBreak):
            self.request("br")
        elif isinstance(node, Paragraph):
            self.request("P")
            for run in node.content:
                self.inline(render_text(run))
            self.flush()
        elif isinstance(node, IndentedParagraph):
            args = [render_title(node.title) if node.title else '""']
            if node.indent is not None:
                args.append(str(node.indent))
            self.request("IP", *args)
            for child in node.content:
                self.node(child)
            self.flush()
        elif isinstance(node, Example):
            self.request("EX")
            for chunk in node.content:
                self.literal(chunk)
            self.request("EE")
        elif isinstance(node, Url):
            self.request("UR", quote_address(node.address))
            if node.name:
                self.inline(escape(node.name))
            self.request("UE")
        elif isinstance(node, Nested):
            self.request("RS")
            for child in node.content:
                self.node(child)
            self.request("RE")
        else:
            raise TypeError(f"Unsupported roff node: {type(node).__name__}")

    def getvalue(self) -> str:
        self.flush()
        return "\n".join(self.lines) + "\n"


def render_title(title: Text) -> str:
    """Quoted, font-styled request argument."""
    return '"' + render_text(title).replace('"', "\\(dq") + '"'


def render_document(doc: Document) -> str:
    """Render a Document as a complete man page."""
    writer = RoffWriter()
    writer.request("TH", quote(doc.title), str(doc.section_number))
    for section in doc.sections:
        writer.request("SH", quote(section.name))
        for node in section.nodes:
            writer.node(node)
    return writer.getvalue()
