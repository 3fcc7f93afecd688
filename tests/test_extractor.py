from __future__ import annotations

import base64

import pytest

from fandom_scraper.errors import FetchError
from fandom_scraper.extractor import FieldExtractor
from fandom_scraper.fetcher import Page
from fandom_scraper.models import ScrapeFailure
from fandom_scraper.schemas import DataSource
from tests.conftest import FakeFetcher, character_html, entry_url

GOKU_URL = entry_url("Goku")
PNG_1 = b"\x89PNG\r\n\x1a\nfirst"
PNG_2 = b"\x89PNG\r\n\x1a\nsecond"


@pytest.fixture
def extractor(fetcher: FakeFetcher) -> FieldExtractor:
    return FieldExtractor(fetcher)


def _page(**kwargs) -> Page:
    return Page.from_html(GOKU_URL, character_html(**kwargs))


def test_text_fields_are_extracted_and_cleaned(extractor: FieldExtractor, data_source: DataSource) -> None:
    page = _page(fields={"name": "Son Goku<sup>[1]</sup>", "age": "  43 [2]\n", "gender": "Male"})

    data = extractor.extract(page, data_source, base64=False)

    assert data == {"name": "Son Goku", "age": "43", "gender": "Male"}


def test_missing_field_is_absent_and_others_unaffected(extractor: FieldExtractor, data_source: DataSource) -> None:
    page = _page(fields={"name": "Vegeta", "gender": "Male"})

    data = extractor.extract(page, data_source, base64=False)

    assert "age" not in data
    assert data == {"name": "Vegeta", "gender": "Male"}


def test_row_without_value_element_or_text_is_skipped(extractor: FieldExtractor, data_source: DataSource) -> None:
    html = (
        '<aside><div data-source="age"><h3 class="pi-data-label">Age</h3></div>'
        '<div data-source="gender"><div class="pi-data-value">[1]</div></div>'
        '<div data-source="name"><div class="pi-data-value">Bulma</div></div></aside>'
    )
    page = Page.from_html(GOKU_URL, html)

    assert extractor.extract(page, data_source, base64=False) == {"name": "Bulma"}


def test_empty_locators_are_skipped(extractor: FieldExtractor) -> None:
    page = _page(fields={"name": "Goku", "age": "43"})

    data = extractor.extract(page, DataSource(name="name", age="", images=None), base64=False)

    assert data == {"name": "Goku"}


def test_locator_with_quotes_does_not_break_selector(extractor: FieldExtractor) -> None:
    page = Page.from_html(
        GOKU_URL,
        '<div data-source=\'say "hi"\'><div class="pi-data-value">Hello</div></div>',
    )

    assert extractor.extract(page, DataSource(status='say "hi"'), base64=False) == {"status": "Hello"}


def test_images_as_urls_resolved_against_page(extractor: FieldExtractor, fetcher: FakeFetcher) -> None:
    page = _page(images=["/images/goku.png", "https://static.test/goku2.png"])

    data = extractor.extract(page, DataSource(images="pi-image-thumbnail"), base64=False)

    assert data == {"images": ["https://test.fandom.com/images/goku.png", "https://static.test/goku2.png"]}
    assert fetcher.requests == []


def test_lazy_loaded_images_prefer_data_src(extractor: FieldExtractor) -> None:
    page = Page.from_html(
        GOKU_URL,
        '<img class="pi-image-thumbnail" src="data:image/gif;base64,R0lGOD" data-src="https://static.test/real.png">',
    )

    data = extractor.extract(page, DataSource(images="pi-image-thumbnail"), base64=False)

    assert data == {"images": ["https://static.test/real.png"]}


def test_images_as_base64_decode_to_source_bytes(extractor: FieldExtractor, fetcher: FakeFetcher) -> None:
    fetcher.add_blob("https://static.test/a.png", PNG_1)
    fetcher.add_blob("https://static.test/b.png", PNG_2)
    page = _page(images=["https://static.test/a.png", "https://static.test/b.png"])

    data = extractor.extract(page, DataSource(images="pi-image-thumbnail"), base64=True)

    assert [base64.b64decode(v) for v in data["images"]] == [PNG_1, PNG_2]


def test_image_without_src_is_skipped(extractor: FieldExtractor) -> None:
    page = _page(images=[None, "https://static.test/a.png"])

    data = extractor.extract(page, DataSource(images="pi-image-thumbnail"), base64=False)

    assert data == {"images": ["https://static.test/a.png"]}


def test_no_image_elements_means_field_absent(extractor: FieldExtractor) -> None:
    page = _page(fields={"name": "Goku"})

    assert extractor.extract(page, DataSource(name="name", images="pi-image-thumbnail"), base64=True) == {
        "name": "Goku"
    }


def test_failed_image_is_skipped_and_reported(extractor: FieldExtractor, fetcher: FakeFetcher) -> None:
    fetcher.add_blob("https://static.test/b.png", PNG_2)
    page = _page(fields={"name": "Goku"}, images=["https://static.test/gone.png", "https://static.test/b.png"])
    failures: list[ScrapeFailure] = []

    data = extractor.extract(
        page, DataSource(name="name", images="pi-image-thumbnail"), base64=True, failures=failures
    )

    assert data["name"] == "Goku"
    assert [base64.b64decode(v) for v in data["images"]] == [PNG_2]
    assert [(f.url, f.stage) for f in failures] == [("https://static.test/gone.png", "image")]


def test_unexpected_field_error_degrades_to_absent(
    extractor: FieldExtractor, data_source: DataSource, monkeypatch: pytest.MonkeyPatch
) -> None:
    def _boom(*_args, **_kwargs):  # noqa: ANN001
        raise RuntimeError("boom")

    monkeypatch.setitem(extractor._strategies, "images", _boom)
    failures: list[ScrapeFailure] = []
    page = _page(fields={"name": "Goku"}, images=["https://static.test/a.png"])

    data = extractor.extract(page, data_source, failures=failures)

    assert data == {"name": "Goku"}
    assert [(f.stage, f.error) for f in failures] == [("field", "images: boom")]


def test_convert_image_to_base64_propagates_fetch_errors(extractor: FieldExtractor, fetcher: FakeFetcher) -> None:
    fetcher.add_blob("https://static.test/a.png", PNG_1)

    assert base64.b64decode(extractor.convert_image_to_base64("https://static.test/a.png")) == PNG_1
    with pytest.raises(FetchError):
        extractor.convert_image_to_base64("https://static.test/missing.png")
