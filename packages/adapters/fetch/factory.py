from __future__ import annotations

import urllib.parse

from packages.adapters.fetch.file_page_fetcher_adapter import FilePageFetcherAdapter, local_path_for
from packages.adapters.fetch.urllib_page_fetcher_adapter import (
    DEFAULT_USER_AGENT,
    UrllibPageFetcherAdapter,
)
from packages.ports.page_fetcher_port import PageFetcherPort


def create_page_fetcher(
    source: str,
    *,
    timeout_seconds: int = 30,
    max_redirects: int = 5,
    user_agent: str = DEFAULT_USER_AGENT,
) -> PageFetcherPort:
    scheme = urllib.parse.urlparse(source).scheme.lower()
    if scheme == 'file' or (scheme not in {'http', 'https'} and local_path_for(source).is_file()):
        return FilePageFetcherAdapter()
    return UrllibPageFetcherAdapter(
        timeout_seconds=timeout_seconds,
        max_redirects=max_redirects,
        user_agent=user_agent,
    )
