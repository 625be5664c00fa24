from __future__ import annotations

import urllib.parse
import urllib.request
from pathlib import Path

from packages.domain.errors import RetrievalFailed
from packages.ports.page_fetcher_port import PageFetcherPort


def local_path_for(source: str) -> Path:
    parsed = urllib.parse.urlparse(source)
    if parsed.scheme == 'file':
        return Path(urllib.request.url2pathname(parsed.path))
    return Path(source)


class FilePageFetcherAdapter(PageFetcherPort):
    """Reads a saved HTML page from disk."""

    def __init__(self, encoding: str = 'utf-8') -> None:
        self._encoding = encoding

    def fetch(self, source: str) -> str:
        path = local_path_for(source)
        try:
            return path.read_text(encoding=self._encoding, errors='replace')
        except OSError as exc:
            raise RetrievalFailed(f'Failed to read page file: {path}') from exc
