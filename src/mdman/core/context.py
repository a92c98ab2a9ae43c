"""Render context handed to renderers by mdbook (JSON on stdin)"""

import json
from typing import Any, Iterator, Optional, Union

from pydantic import BaseModel, Field, ValidationError, model_validator

from mdman.core.utils.text import to_text


class Chapter(BaseModel):
    """A chapter: its title, raw markdown content and nested sub-items."""
    name: str
    content: str = ""
    number: Optional[list[int]] = None
    sub_items: list["BookItem"] = Field(default_factory=list)
    path: Optional[str] = None          # None for draft chapters
    source_path: Optional[str] = None
    parent_names: list[str] = Field(default_factory=list)


class BookItem(BaseModel):
    """One entry in the book summary; exactly one of the fields is set.

    mdbook serializes the item enum externally tagged:
    {"Chapter": {...}}, "Separator", or {"PartTitle": "..."}.
    """
    chapter: Optional[Chapter] = None
    part_title: Optional[str] = None
    separator: bool = False

    @model_validator(mode="before")
    @classmethod
    def _from_tagged(cls, value: Any) -> Any:
        if value == "Separator":
            return {"separator": True}
        if isinstance(value, dict):
            if "Chapter" in value:
                return {"chapter": value["Chapter"]}
            if "PartTitle" in value:
                return {"part_title": value["PartTitle"]}
        return value

    @property
    def is_chapter(self) -> bool:
        return self.chapter is not None


Chapter.model_rebuild()
BookItem.model_rebuild()


class Book(BaseModel):
    sections: list[BookItem] = Field(default_factory=list)

    def iter(self) -> Iterator[BookItem]:
        """Depth-first pre-order over items and their sub-items (book order)."""
        stack = list(reversed(self.sections))
        while stack:
            item = stack.pop()
            yield item
            if item.chapter is not None:
                stack.extend(reversed(item.chapter.sub_items))

    def chapters(self) -> list[Chapter]:
        return [item.chapter for item in self.iter() if item.chapter is not None]


class RenderContext(BaseModel):
    version: str = ""
    root: str = ""
    book: Book = Field(default_factory=Book)
    config: dict[str, Any] = Field(default_factory=dict)
    destination: str = ""

    @property
    def book_title(self) -> str:
        return (self.config.get("book") or {}).get("title") or ""

    def renderer_config(self, name: str = "man") -> dict[str, Any]:
        """Return the [output.<name>] table from book.toml, or {} if absent."""
        return dict((self.config.get("output") or {}).get(name) or {})

    @classmethod
    def from_json(cls, data: Union[str, bytes]) -> "RenderContext":
        """Parse a serialized render context; raises ValueError on bad JSON or schema."""
        try:
            return cls.model_validate(json.loads(to_text(data)))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid render context JSON: {e}") from e
        except ValidationError as e:
            raise ValueError(f"Invalid render context: {e}") from e
