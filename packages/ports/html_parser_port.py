from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class DomIndex(ABC):
    """Queryable view over one parsed HTML document.

    Nodes are opaque to callers; they are only ever handed back to the same
    index that produced them.
    """

    @property
    @abstractmethod
    def root(self) -> Any:
        raise NotImplementedError

    @abstractmethod
    def find_all(self, node: Any, selector: str) -> list[Any]:
        """Descendants of ``node`` matching a CSS selector, in document order."""
        raise NotImplementedError

    @abstractmethod
    def text_content(self, node: Any) -> str:
        raise NotImplementedError

    @abstractmethod
    def document_position(self, node: Any) -> int:
        raise NotImplementedError

    @abstractmethod
    def preceding_sibling(self, node: Any) -> Any | None:
        raise NotImplementedError

    @abstractmethod
    def tag_name(self, node: Any) -> str:
        raise NotImplementedError


class HtmlParserPort(ABC):
    @abstractmethod
    def parse(self, html: str) -> DomIndex:
        raise NotImplementedError
