# -*- coding: utf-8 -*-

"""
Infobox field extraction for a single character page.

Two strategies, selected by the field kind declared on DataSource:
  - text:   [data-source="<locator>"] .pi-data-value  -> cleaned string
  - images: elements with class <locator>             -> list of URLs or base64 strings
"""

import base64 as b64
import logging
from typing import Any, Callable, Dict, List, Optional

from .errors import FetchError
from .fetcher import Page, PageFetcher
from .models import ScrapeFailure
from .parsing import clean_text, remove_brackets
from .schemas import IMAGES, TEXT, DataSource

logger = logging.getLogger(__name__)

DATA_VALUE_CLASS = "pi-data-value"


def _css_string(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


class FieldExtractor:
    def __init__(self, fetcher: PageFetcher) -> None:
        self.fetcher = fetcher
        self._strategies: Dict[str, Callable[..., Any]] = {
            TEXT: self._extract_text,
            IMAGES: self._extract_images,
        }

    def extract(
        self,
        page: Page,
        data_source: DataSource,
        base64: bool = True,
        failures: Optional[List[ScrapeFailure]] = None,
    ) -> Dict[str, Any]:
        """
        Returns {field name: value} for every field found on the page.
        A field that cannot be extracted is left out; it never aborts the others.
        """
        failures = failures if failures is not None else []
        data: Dict[str, Any] = {}
        for key, kind, locator in data_source.locators():
            if not locator:
                continue
            try:
                value = self._strategies[kind](page, key, locator, base64, failures)
            except Exception as e:
                logger.warning("Field %r failed on %s: %s", key, page.url, e)
                failures.append(ScrapeFailure(url=page.url, stage="field", error=f"{key}: {e}"))
                continue
            if value is None:
                continue
            data[key] = value
        return data

    def _extract_text(self, page: Page, key: str, locator: str, base64: bool, failures) -> Optional[str]:
        element = page.soup.select_one(f"[data-source={_css_string(locator)}]")
        if element is None:
            return None
        value_el = element.find(class_=DATA_VALUE_CLASS)
        if value_el is None:
            return None
        value = remove_brackets(value_el.get_text(" ", strip=True))
        return value or None

    def _extract_images(
        self, page: Page, key: str, locator: str, base64: bool, failures: List[ScrapeFailure]
    ) -> Optional[List[str]]:
        elements = page.soup.find_all(class_=locator)
        if not elements:
            return None

        images: List[str] = []
        for el in elements:
            # lazy-loaded thumbnails keep the real URL in data-src
            src = clean_text(el.get("data-src") or el.get("src") or "")
            if not src:
                logger.warning("No src found for key %s on %s", key, page.url)
                continue
            src = page.resolve(src)
            if not base64:
                images.append(src)
                continue
            try:
                images.append(self.convert_image_to_base64(src))
            except FetchError as e:
                logger.warning("Skipping image %s: %s", src, e.cause)
                failures.append(ScrapeFailure(url=src, stage="image", error=str(e)))
        return images

    def convert_image_to_base64(self, image_url: str) -> str:
        """
        Fetch the image at ``image_url`` and return its bytes as a base64 string.
        Raises FetchError if the image cannot be fetched.
        """
        content, _ = self.fetcher.download(image_url)
        return b64.b64encode(content).decode("ascii")
