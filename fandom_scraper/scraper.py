# -*- coding: utf-8 -*-

"""
FandomScraper: walks a wiki's character listing and builds CharacterRecords.

Usage:
  scraper = FandomScraper("dragon-ball", language="fr")
  result = scraper.get_all(limit=20, recursive=True, base64=False)
  for character in result:
      print(character.name, character.data)
"""

import logging
from typing import Any, Callable, Dict, Optional

from . import config
from .errors import FetchError
from .extractor import FieldExtractor
from .fetcher import Page, PageFetcher
from .listing import ListingWalker
from .models import CharacterRecord, ScrapeFailure, ScrapeOptions, ScrapeResult
from .parsing import extract_page_id
from .schemas import SchemaRegistry, SiteSchema
from .sites import DEFAULT_REGISTRY

logger = logging.getLogger(__name__)


class FandomScraper:
    def __init__(
        self,
        name: str,
        language: Optional[str] = None,
        registry: SchemaRegistry = DEFAULT_REGISTRY,
        fetcher: Optional[PageFetcher] = None,
    ) -> None:
        self._schema: SiteSchema = registry.get(name, language or config.DEFAULT_LANGUAGE)
        self.fetcher = fetcher or PageFetcher()
        self.extractor = FieldExtractor(self.fetcher)
        self._characters_page: Optional[Page] = None
        self._layouts: Dict[str, Callable[[ScrapeOptions, ScrapeResult], None]] = {
            "classic": self._get_all_classic,
            "table-1": self._get_all_unsupported,
            "table-2": self._get_all_unsupported,
        }

    @property
    def schema(self) -> SiteSchema:
        return self._schema

    @property
    def characters_page(self) -> Optional[Page]:
        """The listing page currently loaded (None before the first walk)."""
        return self._characters_page

    def fetch_page(self, url: str) -> Page:
        return self.fetcher.fetch(url)

    def load_characters_page(self, url: str) -> Page:
        self._characters_page = self.fetch_page(url)
        return self._characters_page

    def get_all(self, options: Optional[ScrapeOptions] = None, **overrides: Any) -> ScrapeResult:
        """
        Scrape characters from the listing, honoring offset/limit.

        Invalid options raise InvalidOptionsError before any request is made.
        Every other failure is recorded in ``result.failures``; the records
        collected up to that point are kept.
        """
        if options is None:
            options = ScrapeOptions(**overrides)
        elif overrides:
            raise TypeError("Pass either a ScrapeOptions instance or keyword options, not both")
        options.validate()

        result = ScrapeResult()
        try:
            self._layouts[self._schema.page_format](options, result)
        except Exception as e:
            logger.exception("Scrape of %s (%s) aborted", self._schema.name, self._schema.language)
            result.failures.append(ScrapeFailure(url=None, stage="run", error=str(e)))
        return result

    def _get_all_unsupported(self, options: ScrapeOptions, result: ScrapeResult) -> None:
        logger.warning("Page format %r is not implemented yet", self._schema.page_format)

    def _get_all_classic(self, options: ScrapeOptions, result: ScrapeResult) -> None:
        walker = ListingWalker(self.load_characters_page, self._schema.characters_url)
        offset = 0
        count = 0
        try:
            for entry in walker:
                if offset < options.offset:
                    offset += 1
                    continue
                offset += 1

                try:
                    page = self.fetch_page(entry.url)
                except FetchError as e:
                    logger.warning("Failed for %s: %s", entry.url, e.cause)
                    result.failures.append(ScrapeFailure(url=entry.url, stage="entry", error=str(e)))
                    continue

                record = CharacterRecord(url=entry.url, name=entry.name)
                if options.recursive:
                    record.data = self.extractor.extract(
                        page, self._schema.data_source, base64=options.base64, failures=result.failures
                    )
                if options.with_id:
                    record.id = extract_page_id(page.soup)

                result.records.append(record)
                count += 1
                logger.info("Scraped %s (%d so far)", entry.name, count)
                if count == options.limit:
                    return
        except FetchError as e:
            logger.warning("Listing stopped at %s: %s", e.url, e.cause)
            result.failures.append(ScrapeFailure(url=e.url, stage="listing", error=str(e)))
        finally:
            for err in walker.malformed:
                result.failures.append(ScrapeFailure(url=err.url, stage="listing", error=str(err)))
