# -*- coding: utf-8 -*-

"""Exception taxonomy for the scraper."""

from typing import Optional


class ScraperError(Exception):
    """Base class for every error raised by fandom_scraper."""


class UnknownSiteError(ScraperError):
    def __init__(self, name: str, language: Optional[str] = None) -> None:
        self.name = name
        self.language = language
        if language:
            msg = f"Invalid wiki name: {name} (language={language})"
        else:
            msg = f"Invalid wiki name: {name}"
        super().__init__(msg)


class InvalidOptionsError(ScraperError, ValueError):
    pass


class FetchError(ScraperError):
    """A page or image could not be retrieved."""

    def __init__(self, url: str, cause: object) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Error while fetching {url}: {cause}")


class MalformedEntryError(ScraperError):
    """A listing element is missing its link or its text."""

    def __init__(self, reason: str, url: Optional[str] = None) -> None:
        self.reason = reason
        self.url = url
        super().__init__(reason if not url else f"{reason} ({url})")


__all__ = [
    "ScraperError",
    "UnknownSiteError",
    "InvalidOptionsError",
    "FetchError",
    "MalformedEntryError",
]
