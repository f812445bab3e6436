from __future__ import annotations

from typing import Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class PageLink(_Record):
    url: str
    text: str
    is_external: bool


class PageImage(_Record):
    src: str
    alt: str = ""
    title: str = ""


class PageHeading(_Record):
    level: int = Field(ge=1, le=6)
    text: str


class PageList(_Record):
    type: Literal["ul", "ol"]
    items: Tuple[str, ...]


class PageTable(_Record):
    rows: Tuple[Tuple[str, ...], ...]


class ExtractedPage(_Record):
    """
    Flat structured record for one fetched page.

    Serialized with camelCase keys (``fullText``, ``wordCount``, ``isExternal``).
    Collections are stored as tuples so the record cannot change after construction.
    """

    url: str
    timestamp: str
    title: str = ""
    description: str = ""
    keywords: str = ""
    author: str = ""
    links: Tuple[PageLink, ...] = ()
    images: Tuple[PageImage, ...] = ()
    headings: Tuple[PageHeading, ...] = ()
    paragraphs: Tuple[str, ...] = ()
    lists: Tuple[PageList, ...] = ()
    tables: Tuple[PageTable, ...] = ()
    full_text: str = ""
    word_count: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_word_count(self) -> "ExtractedPage":
        expected = len(self.full_text.split())
        if self.word_count != expected:
            raise ValueError(
                f"word_count={self.word_count} does not match full_text ({expected} words)"
            )
        return self

    def to_json(self, indent: int = 2) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)
