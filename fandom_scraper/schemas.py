# -*- coding: utf-8 -*-

"""
Per-site configuration: where the character listing lives and which infobox
rows hold which logical field.
"""

from dataclasses import dataclass, field, fields
from typing import Dict, Iterator, List, Optional, Tuple

from .errors import UnknownSiteError

PAGE_FORMATS = ("classic", "table-1", "table-2")

TEXT = "text"
IMAGES = "images"


def _locator(kind: str = TEXT):
    return field(default=None, metadata={"kind": kind})


@dataclass(frozen=True)
class DataSource:
    """
    Logical field name -> site locator.

    Text fields hold the infobox ``data-source`` attribute value; image fields
    hold the class name of the <img> elements. None or "" skips the field.
    """

    name: Optional[str] = _locator()
    kanji: Optional[str] = _locator()
    romaji: Optional[str] = _locator()
    status: Optional[str] = _locator()
    species: Optional[str] = _locator()
    gender: Optional[str] = _locator()
    images: Optional[str] = _locator(IMAGES)
    age: Optional[str] = _locator()
    birthday: Optional[str] = _locator()
    height: Optional[str] = _locator()
    weight: Optional[str] = _locator()
    affiliation: Optional[str] = _locator()
    occupation: Optional[str] = _locator()
    relatives: Optional[str] = _locator()
    hair_color: Optional[str] = _locator()
    eye_color: Optional[str] = _locator()
    nationality: Optional[str] = _locator()
    episode: Optional[str] = _locator()
    manga: Optional[str] = _locator()
    anime: Optional[str] = _locator()
    seiyu: Optional[str] = _locator()
    voice_actor: Optional[str] = _locator()

    def locators(self) -> Iterator[Tuple[str, str, Optional[str]]]:
        """Yields (field name, kind, locator) for every field, set or not."""
        for f in fields(self):
            yield f.name, f.metadata.get("kind", TEXT), getattr(self, f.name)


@dataclass(frozen=True)
class SiteSchema:
    name: str
    language: str
    url: str
    characters_url: str
    data_source: DataSource
    page_format: str = "classic"

    def __post_init__(self) -> None:
        if self.page_format not in PAGE_FORMATS:
            raise ValueError(f"Unknown page format: {self.page_format!r} (expected one of {PAGE_FORMATS})")


class SchemaRegistry:
    """
    (fiction name, language) -> SiteSchema.

    A frozen registry rejects further registration once constructed.
    """

    def __init__(self, schemas: Optional[List[SiteSchema]] = None, frozen: bool = False) -> None:
        self._schemas: Dict[Tuple[str, str], SiteSchema] = {}
        self._frozen = False
        for s in schemas or []:
            self.register(s)
        self._frozen = frozen

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, schema: SiteSchema) -> None:
        if self._frozen:
            raise RuntimeError(f"Registry is read-only; cannot register {schema.name} ({schema.language})")
        key = (schema.name, schema.language)
        if key in self._schemas:
            raise ValueError(f"Schema already registered: {schema.name} ({schema.language})")
        self._schemas[key] = schema

    def get(self, name: str, language: str) -> SiteSchema:
        if not name or name not in self.names():
            raise UnknownSiteError(name)
        try:
            return self._schemas[(name, language)]
        except KeyError:
            raise UnknownSiteError(name, language) from None

    def names(self) -> List[str]:
        return sorted({n for n, _ in self._schemas})

    def languages(self, name: str) -> List[str]:
        return sorted(lang for n, lang in self._schemas if n == name)

    def __contains__(self, key: object) -> bool:
        return key in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)
