"""HTML parsing and serialization helpers."""

from __future__ import annotations

from typing import List, Optional

from bs4 import BeautifulSoup, Tag

_PARSER = "html.parser"


class HtmlDocument:
    """Mutable parsed page passed between the pipeline stages.

    Wraps BeautifulSoup so the rest of the package only needs to select
    elements, read and write attributes, and serialize back to text.
    """

    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup

    @classmethod
    def parse(cls, html: str) -> "HtmlDocument":
        return cls(BeautifulSoup(html, _PARSER))

    def select(self, selector: str) -> List[Tag]:
        """Return elements matching a CSS selector in document order."""
        return list(self._soup.select(selector))

    @staticmethod
    def get_attribute(element: Tag, name: str) -> Optional[str]:
        value = element.get(name)
        if isinstance(value, list):
            # multi-valued attributes such as rel come back as lists
            value = " ".join(value)
        return value

    @staticmethod
    def set_attribute(element: Tag, name: str, value: str) -> None:
        element[name] = value

    def serialize(self) -> str:
        return self._soup.decode()

    def __str__(self) -> str:
        return self.serialize()
