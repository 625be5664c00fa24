from __future__ import annotations

from abc import ABC, abstractmethod


class PageFetcherPort(ABC):
    @abstractmethod
    def fetch(self, source: str) -> str:
        """Return the raw HTML for ``source`` or raise RetrievalFailed."""
        raise NotImplementedError
