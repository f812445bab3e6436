import json

import pytest
from pydantic import ValidationError

from scraper.models import ExtractedPage, PageHeading, PageLink, PageList, PageTable


def _page(**overrides) -> ExtractedPage:
    data = {
        "url": "https://example.com",
        "timestamp": "2024-01-01T00:00:00.000Z",
        "full_text": "two words",
        "word_count": 2,
    }
    data.update(overrides)
    return ExtractedPage(**data)


def test_word_count_must_match_full_text():
    with pytest.raises(ValidationError):
        _page(word_count=3)


def test_record_is_immutable():
    page = _page()

    with pytest.raises(ValidationError):
        page.title = "changed"


def test_record_collections_are_immutable():
    page = _page(
        paragraphs=["first"],
        tables=[PageTable(rows=[["a", "b"]])],
    )

    assert page.paragraphs == ("first",)
    assert page.tables[0].rows == (("a", "b"),)
    with pytest.raises(AttributeError):
        page.paragraphs.append("injected")
    with pytest.raises(AttributeError):
        page.tables[0].rows[0].append("c")
    with pytest.raises(TypeError):
        page.links[0:0] = [PageLink(url="/x", text="X", is_external=False)]


def test_heading_level_bounds():
    with pytest.raises(ValidationError):
        PageHeading(level=7, text="x")
    with pytest.raises(ValidationError):
        PageHeading(level=0, text="x")


def test_list_type_is_restricted():
    with pytest.raises(ValidationError):
        PageList(type="dl", items=["x"])


def test_json_uses_camel_case_keys():
    page = _page(links=[PageLink(url="/a", text="A", is_external=False)])

    data = json.loads(page.to_json())

    assert data["fullText"] == "two words"
    assert data["wordCount"] == 2
    assert data["links"] == [{"url": "/a", "text": "A", "isExternal": False}]
    assert data["description"] == ""


def test_accepts_camel_case_input():
    page = ExtractedPage.model_validate(
        {
            "url": "https://example.com",
            "timestamp": "2024-01-01T00:00:00.000Z",
            "fullText": "one",
            "wordCount": 1,
        }
    )

    assert page.word_count == 1
