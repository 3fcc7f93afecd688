# -*- coding: utf-8 -*-

"""Options and result types for a scrape run."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from .errors import InvalidOptionsError


@dataclass
class ScrapeOptions:
    limit: int = 100000
    offset: int = 0
    recursive: bool = False
    base64: bool = True
    with_id: bool = True

    def validate(self) -> None:
        if self.limit < 1:
            raise InvalidOptionsError("Limit must be greater than 0")
        if self.offset < 0:
            raise InvalidOptionsError("Offset must be greater than or equal to 0")
        if self.offset > self.limit:
            raise InvalidOptionsError("Offset must be less than or equal to limit")


@dataclass
class CharacterRecord:
    """One scraped character. ``data`` is None unless recursive extraction ran."""

    url: str
    name: str
    id: Optional[int] = None
    data: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        if self.id is not None:
            out["id"] = self.id
        out["url"] = self.url
        out["name"] = self.name
        if self.data is not None:
            out["data"] = self.data
        return out


@dataclass
class ScrapeFailure:
    url: Optional[str]
    stage: str
    error: str

    def to_dict(self) -> Dict[str, Any]:
        return {"url": self.url, "stage": self.stage, "error": self.error}


@dataclass
class ScrapeResult:
    """Records collected by a run plus whatever went wrong along the way."""

    records: List[CharacterRecord] = field(default_factory=list)
    failures: List[ScrapeFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def __iter__(self) -> Iterator[CharacterRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, idx):
        return self.records[idx]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ok": self.ok,
            "count": len(self.records),
            "characters": [r.to_dict() for r in self.records],
            "failures": [f.to_dict() for f in self.failures],
        }
