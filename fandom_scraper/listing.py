# -*- coding: utf-8 -*-

"""
Paginated character index ("classic" Fandom category page).
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence

from bs4 import Tag

from .errors import MalformedEntryError
from .fetcher import Page
from .parsing import clean_text, filter_banned

logger = logging.getLogger(__name__)

# -----------------------------
# Classic layout locators
# -----------------------------

CLASSIC_ITEM_CLASS = "category-page__member-link"
CLASSIC_NEXT_CLASS = "category-page__pagination-next"

# Administrative / non-character members of a character category
CLASSIC_BAN_LIST = (
    "category:",
    "catégorie:",
    "template:",
    "modèle:",
    "user:",
    "utilisateur:",
    "user blog:",
    "list of",
    "liste des",
)


@dataclass(frozen=True)
class ListEntry:
    url: str
    name: str

    @classmethod
    def from_element(cls, element: Tag, page: Page) -> "ListEntry":
        href = element.get("href")
        if not href:
            raise MalformedEntryError("No URL found", page.url)
        name = clean_text(element.get_text())
        if not name:
            raise MalformedEntryError("No name found", page.resolve(href))
        return cls(url=page.resolve(href), name=name)


class ListingWalker:
    """
    Iterates a paginated listing lazily, one page at a time.

    Malformed elements are logged, kept in ``malformed`` and skipped; fetch
    failures on listing pages propagate.
    """

    def __init__(
        self,
        fetch: Callable[[str], Page],
        start_url: str,
        item_class: str = CLASSIC_ITEM_CLASS,
        next_class: str = CLASSIC_NEXT_CLASS,
        ban_list: Sequence[str] = CLASSIC_BAN_LIST,
    ) -> None:
        self.fetch = fetch
        self.start_url = start_url
        self.item_class = item_class
        self.next_class = next_class
        self.ban_list = ban_list
        self.current_page: Optional[Page] = None
        self.pages_loaded = 0
        self.malformed: List[MalformedEntryError] = []

    def _load(self, url: str) -> Page:
        self.current_page = self.fetch(url)
        self.pages_loaded += 1
        logger.info("Listing page %d: %s", self.pages_loaded, url)
        return self.current_page

    def entries_on(self, page: Page) -> Iterator[ListEntry]:
        elements = filter_banned(page.soup.find_all(class_=self.item_class), self.ban_list)
        for el in elements:
            try:
                yield ListEntry.from_element(el, page)
            except MalformedEntryError as e:
                logger.warning("Skipping listing element: %s", e)
                self.malformed.append(e)

    def next_url(self, page: Page) -> Optional[str]:
        nxt = page.soup.find(class_=self.next_class)
        if nxt is None:
            return None
        href = nxt.get("href")
        if not href:
            return None
        return page.resolve(href)

    def __iter__(self) -> Iterator[ListEntry]:
        page = self._load(self.start_url)
        while True:
            yield from self.entries_on(page)
            nxt = self.next_url(page)
            if not nxt:
                return
            page = self._load(nxt)
