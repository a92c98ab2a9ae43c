"""Output node model: formatter-agnostic roff constructs, sections and documents"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field


class FontStyle(str, Enum):
    """Font applied to a run of text"""
    roman = "roman"
    bold = "bold"
    italic = "italic"


class Text(BaseModel):
    kind: Literal["text"] = "text"
    content: str
    style: FontStyle = FontStyle.roman


class LineBreak(BaseModel):
    kind: Literal["linebreak"] = "linebreak"


class Paragraph(BaseModel):
    kind: Literal["paragraph"] = "paragraph"
    content: list[Text]


class Example(BaseModel):
    """Pre-formatted literal lines; never font-styled."""
    kind: Literal["example"] = "example"
    content: list[str]


class Url(BaseModel):
    kind: Literal["url"] = "url"
    name: str                       # display text; may be empty
    address: str


class IndentedParagraph(BaseModel):
    kind: Literal["indented_paragraph"] = "indented_paragraph"
    content: list["RoffNode"]
    indent: Optional[int] = None
    title: Optional[Text] = None    # caption shown in the tag column


class Nested(BaseModel):
    kind: Literal["nested"] = "nested"
    content: list["RoffNode"]


RoffNode = Annotated[
    Union[Text, LineBreak, Paragraph, Example, Url, IndentedParagraph, Nested],
    Field(discriminator="kind"),
]

IndentedParagraph.model_rebuild()
Nested.model_rebuild()


class Section(BaseModel):
    """A named, ordered run of output nodes (one per chapter)."""
    name: str
    nodes: list[RoffNode] = Field(default_factory=list)


class Document(BaseModel):
    """A titled man page made of one or more sections."""
    title: str = ""
    section_number: int = Field(default=7, ge=1, le=9)
    sections: list[Section] = Field(default_factory=list)

    def section(self, name: str, nodes: list) -> "Document":
        """Append a section and return self so calls can be chained."""
        self.sections.append(Section(name=name, nodes=list(nodes)))
        return self


def text(content: str) -> Text:
    return Text(content=content)


def bold(content: str) -> Text:
    return Text(content=content, style=FontStyle.bold)


def italic(content: str) -> Text:
    return Text(content=content, style=FontStyle.italic)


def linebreak() -> LineBreak:
    return LineBreak()


def paragraph(*content: Union[str, Text]) -> Paragraph:
    """Wrap strings or Text runs in a paragraph."""
    return Paragraph(content=[c if isinstance(c, Text) else text(c) for c in content])


def example(*lines: str) -> Example:
    return Example(content=list(lines))


def url(name: str, address: str) -> Url:
    return Url(name=name, address=address)


def indented_paragraph(content: list, indent: Optional[int] = None, title: Optional[Text] = None) -> IndentedParagraph:
    return IndentedParagraph(content=list(content), indent=indent, title=title)


def nested(content: list) -> Nested:
    return Nested(content=list(content))
