"""Scrape character data from Fandom wikis that use the classic category/infobox layout."""

from .errors import FetchError, InvalidOptionsError, MalformedEntryError, ScraperError, UnknownSiteError
from .extractor import FieldExtractor
from .fetcher import Page, PageFetcher
from .listing import ListEntry, ListingWalker
from .models import CharacterRecord, ScrapeFailure, ScrapeOptions, ScrapeResult
from .schemas import DataSource, SchemaRegistry, SiteSchema
from .scraper import FandomScraper
from .sites import DEFAULT_REGISTRY

__all__ = [
    # Errors
    "ScraperError",
    "UnknownSiteError",
    "InvalidOptionsError",
    "FetchError",
    "MalformedEntryError",
    # Schemas
    "DataSource",
    "SiteSchema",
    "SchemaRegistry",
    "DEFAULT_REGISTRY",
    # Components
    "Page",
    "PageFetcher",
    "ListEntry",
    "ListingWalker",
    "FieldExtractor",
    "FandomScraper",
    # Results
    "ScrapeOptions",
    "CharacterRecord",
    "ScrapeFailure",
    "ScrapeResult",
]
