# -*- coding: utf-8 -*-

"""
Text and metadata helpers shared by the listing walker and the field extractor.
"""

import re
from typing import Iterable, List, Sequence

from bs4 import BeautifulSoup, Tag

# Innermost bracket group first, so nested markers like "[[1]]" fall away over passes
BRACKETS_RE = re.compile(r"\[[^\[\]]*\]")
WS_RE = re.compile(r"\s+")

# Fandom embeds the MediaWiki article id in an inline JSON config blob
PAGE_ID_RE = re.compile(r'"pageId":(\d+)')


def clean_text(s: str) -> str:
    if not s:
        return ""
    return WS_RE.sub(" ", s).strip()


def remove_brackets(s: str) -> str:
    """
    Strip bracketed annotations such as reference markers ("[1]", "[note 2]",
    "[citation needed]") and collapse whitespace. Idempotent.
    """
    if not s:
        return ""
    prev = None
    while prev != s:
        prev = s
        s = BRACKETS_RE.sub("", s)
    return clean_text(s)


def is_banned(text: str, ban_list: Sequence[str]) -> bool:
    lowered = (text or "").lower()
    return any(b.lower() in lowered for b in ban_list)


def filter_banned(elements: Iterable[Tag], ban_list: Sequence[str]) -> List[Tag]:
    """Drop elements whose text contains any ban-list substring (case-insensitive)."""
    return [el for el in elements if not is_banned(el.get_text(), ban_list)]


def extract_page_id(soup: BeautifulSoup) -> int:
    """
    Returns the numeric page id embedded in the page's inline scripts,
    or 0 when none of them carries a "pageId":N pair. The first match wins,
    even when it is 0.
    """
    for script in soup.find_all("script"):
        text = script.get_text()
        if "pageId" not in text:
            continue
        m = PAGE_ID_RE.search(text)
        if m is not None:
            return int(m.group(1))
    return 0
