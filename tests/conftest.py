from __future__ import annotations

from typing import Iterable, Optional

import pytest

from fandom_scraper.errors import FetchError
from fandom_scraper.fetcher import Page
from fandom_scraper.schemas import DataSource, SchemaRegistry, SiteSchema

BASE_URL = "https://test.fandom.com/wiki/"
LISTING_URL = "https://test.fandom.com/wiki/Category:Characters"


class FakeFetcher:
    """Serves canned HTML/bytes keyed by absolute URL and records every request."""

    def __init__(self) -> None:
        self.pages: dict[str, str] = {}
        self.blobs: dict[str, bytes] = {}
        self.requests: list[str] = []
        self.closed = False

    def add_page(self, url: str, html: str) -> None:
        self.pages[url] = html

    def add_blob(self, url: str, content: bytes) -> None:
        self.blobs[url] = content

    def fetch(self, url: str) -> Page:
        self.requests.append(url)
        if url not in self.pages:
            raise FetchError(url, "404 Client Error: Not Found")
        return Page.from_html(url, self.pages[url])

    def download(self, url: str) -> tuple[bytes, str]:
        self.requests.append(url)
        if url not in self.blobs:
            raise FetchError(url, "404 Client Error: Not Found")
        return self.blobs[url], "image/png"

    def close(self) -> None:
        self.closed = True


def listing_html(entries: Iterable, next_href: Optional[str] = None, next_without_href: bool = False) -> str:
    """``entries`` holds (href, text) pairs; an href of None renders an <a> without one."""
    items = []
    for href, text in entries:
        href_attr = f' href="{href}"' if href is not None else ""
        items.append(f'<li><a class="category-page__member-link"{href_attr}>{text}</a></li>')
    nav = ""
    if next_href:
        nav = f'<a class="category-page__pagination-next wds-button" href="{next_href}">Next</a>'
    elif next_without_href:
        nav = '<span class="category-page__pagination-next">Next</span>'
    return f"<html><body><ul>{''.join(items)}</ul><div>{nav}</div></body></html>"


def character_html(
    fields: Optional[dict[str, str]] = None,
    images: Iterable[Optional[str]] = (),
    page_id: Optional[int] = None,
) -> str:
    rows = []
    for source, value in (fields or {}).items():
        rows.append(
            f'<div class="pi-item pi-data" data-source="{source}">'
            f'<h3 class="pi-data-label">{source}</h3>'
            f'<div class="pi-data-value pi-font">{value}</div></div>'
        )
    imgs = []
    for src in images:
        src_attr = f' src="{src}"' if src is not None else ""
        imgs.append(f'<img class="pi-image-thumbnail"{src_attr}>')
    scripts = ['<script>var wgPageName = "Test";</script>']
    if page_id is not None:
        scripts.append(f'<script>window.__config = {{"wiki":"test","pageId":{page_id},"ns":0}};</script>')
    return (
        "<html><head>" + "".join(scripts) + "</head><body>"
        '<aside class="portable-infobox">' + "".join(imgs) + "".join(rows) + "</aside>"
        "</body></html>"
    )


def entry_url(slug: str) -> str:
    return BASE_URL + slug


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def data_source() -> DataSource:
    return DataSource(name="name", age="age", gender="gender", images="pi-image-thumbnail")


@pytest.fixture
def schema(data_source: DataSource) -> SiteSchema:
    return SiteSchema(
        name="test-wiki",
        language="en",
        url=BASE_URL,
        characters_url=LISTING_URL,
        page_format="classic",
        data_source=data_source,
    )


@pytest.fixture
def registry(schema: SiteSchema) -> SchemaRegistry:
    return SchemaRegistry([schema])
