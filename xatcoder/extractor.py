"""Locate the language block of a page and return its markup."""

from __future__ import annotations

import soupsieve
from bs4 import BeautifulSoup

from .errors import NotFoundError, SelectorError
from .models import Language


def selector_for(language: Language | str) -> str:
    try:
        return Language(language).selector
    except ValueError as exc:
        raise SelectorError(f"No selector for language {language!r}") from exc


class ContentExtractor:
    """Parse HTML leniently and pull the inner HTML of the first match."""

    def __init__(self, parser: str = "lxml") -> None:
        self.parser = parser

    def extract(self, html: str, language: Language | str) -> str:
        return self.extract_first(html, selector_for(language))

    def extract_first(self, html: str, selector: str) -> str:
        """Return the inner HTML of the first element matching ``selector``.

        Raises ``SelectorError`` for a malformed selector and ``NotFoundError``
        when nothing in the document matches.
        """
        try:
            pattern = soupsieve.compile(selector)
        except soupsieve.SelectorSyntaxError as exc:
            raise SelectorError(f"Failed to parse selector {selector!r}: {exc}") from exc

        soup = BeautifulSoup(html, self.parser)
        node = pattern.select_one(soup)
        if node is None:
            raise NotFoundError(f"No elements found with the selector {selector!r}")
        return node.decode_contents()
