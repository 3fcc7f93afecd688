# -*- coding: utf-8 -*-

"""
HTTP access: fetch a URL, parse it into a navigable document.
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional, Tuple, Union
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup

from . import config
from .errors import FetchError

logger = logging.getLogger(__name__)


@dataclass
class Page:
    """A parsed HTML document anchored at the URL it was fetched from."""

    url: str
    soup: BeautifulSoup

    @classmethod
    def from_html(cls, url: str, html: Union[str, bytes], from_encoding: Optional[str] = None) -> "Page":
        """
        ``html`` may be raw bytes, in which case bs4 sniffs the encoding from the
        document (<meta charset>) unless ``from_encoding`` pins it.
        """
        if isinstance(html, bytes):
            return cls(url=url, soup=BeautifulSoup(html, "html.parser", from_encoding=from_encoding))
        return cls(url=url, soup=BeautifulSoup(html, "html.parser"))

    def resolve(self, href: str) -> str:
        return urljoin(self.url, href)


def _is_retryable(err: requests.RequestException) -> bool:
    if isinstance(err, requests.HTTPError):
        return err.response is not None and err.response.status_code in config.RETRY_STATUS_CODES
    return True


class PageFetcher:
    def __init__(
        self,
        max_retries: Optional[int] = None,
        backoff_s: float = 0.5,
        timeout: Optional[Tuple[float, float]] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.max_retries = max(1, max_retries if max_retries is not None else config.HTTP_MAX_RETRIES)
        self.backoff_s = backoff_s
        self.timeout = timeout or (config.HTTP_CONNECT_TIMEOUT, config.HTTP_READ_TIMEOUT)
        self.s = session or requests.Session()
        self.s.headers.update(
            {
                "User-Agent": config.USER_AGENT,
                "Accept": "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8",
            }
        )

    def _backoff(self, attempt: int) -> None:
        wait = min(config.MAX_BACKOFF_S, self.backoff_s * (2 ** (attempt - 1)) + 0.2)
        time.sleep(wait)

    def _get(self, url: str) -> requests.Response:
        last_err: Optional[requests.RequestException] = None
        for attempt in range(1, self.max_retries + 1):
            try:
                r = self.s.get(url, timeout=self.timeout)
                r.raise_for_status()
                return r
            except requests.RequestException as e:
                last_err = e
                if attempt >= self.max_retries or not _is_retryable(e):
                    break
                logger.warning("Retrying %s (attempt %d/%d): %s", url, attempt + 1, self.max_retries, e)
                self._backoff(attempt)
        raise FetchError(url, last_err) from last_err

    def fetch(self, url: str) -> Page:
        """GET ``url`` and parse the body as HTML. Raises FetchError on any transport/HTTP failure."""
        logger.debug("GET %s", url)
        r = self._get(url)
        # requests falls back to ISO-8859-1 for text/html without a charset; only
        # trust the header when it names one explicitly
        ct = r.headers.get("Content-Type") or ""
        declared = r.encoding if "charset=" in ct.lower() else None
        return Page.from_html(url, r.content, from_encoding=declared)

    def download(self, url: str) -> Tuple[bytes, str]:
        """
        Returns (content, content_type)
        """
        r = self._get(url)
        ct = (r.headers.get("Content-Type") or "").split(";")[0].strip().lower()
        return r.content, ct

    def close(self) -> None:
        self.s.close()

    def __enter__(self) -> "PageFetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
