from __future__ import annotations

from typing import Any

from bs4 import BeautifulSoup, Comment, NavigableString, Tag

from packages.ports.html_parser_port import DomIndex, HtmlParserPort


def scope_selector(selector: str) -> str:
    """Anchor each comma-separated part of ``selector`` at ``:scope``.

    ``'tbody tr, th'`` becomes ``':scope tbody tr, :scope th'``. Commas nested
    in brackets or parentheses are left alone.
    """
    parts: list[str] = []
    depth = 0
    start = 0
    for idx, char in enumerate(selector):
        if char in '([':
            depth += 1
        elif char in ')]':
            depth -= 1
        elif char == ',' and depth == 0:
            parts.append(selector[start:idx])
            start = idx + 1
    parts.append(selector[start:])
    return ', '.join(f':scope {part.strip()}' for part in parts if part.strip())


class BeautifulSoupDomIndex(DomIndex):
    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup
        # One depth-first pass; positions are unique and increase in document order.
        self._positions: dict[int, int] = {
            id(tag): idx for idx, tag in enumerate(soup.find_all(True))
        }

    @property
    def root(self) -> BeautifulSoup:
        return self._soup

    def find_all(self, node: Any, selector: str) -> list[Tag]:
        if isinstance(node, BeautifulSoup):
            return list(node.select(selector))
        # Every compound of the selector must sit inside ``node``, not just the last one.
        return list(node.select(scope_selector(selector)))

    def text_content(self, node: Any) -> str:
        return ' '.join(node.get_text().split())

    def document_position(self, node: Any) -> int:
        try:
            return self._positions[id(node)]
        except KeyError as exc:
            raise ValueError('node does not belong to this document') from exc

    def preceding_sibling(self, node: Any) -> Tag | None:
        for sibling in node.previous_siblings:
            if isinstance(sibling, Tag):
                return sibling
            if isinstance(sibling, Comment):
                continue
            if isinstance(sibling, NavigableString) and not sibling.strip():
                continue
            return None
        return None

    def tag_name(self, node: Any) -> str:
        return str(getattr(node, 'name', '') or '').lower()


class BeautifulSoupParserAdapter(HtmlParserPort):
    """HTML parser backed by BeautifulSoup.

    The default ``html.parser`` tree builder keeps the markup's structure as
    written: no implicit ``<tbody>`` is inserted and a ``<caption>`` placed
    outside its table stays where it is.
    """

    def __init__(self, features: str = 'html.parser') -> None:
        self._features = features

    def parse(self, html: str) -> BeautifulSoupDomIndex:
        return BeautifulSoupDomIndex(BeautifulSoup(html or '', self._features))
