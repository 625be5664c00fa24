from __future__ import annotations

import logging
import urllib.error
import urllib.request
from typing import Any

from packages.domain.errors import RetrievalFailed
from packages.ports.page_fetcher_port import PageFetcherPort

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = 'WikipediaTableExtractor/1.0 (contact@example.com)'


class _LimitedRedirectHandler(urllib.request.HTTPRedirectHandler):
    """Follows at most ``max_redirects`` hops and sends the previous URL as Referer."""

    def __init__(self, max_redirects: int) -> None:
        super().__init__()
        self.max_redirections = max_redirects

    def redirect_request(self, req, fp, code, msg, headers, newurl):  # type: ignore[no-untyped-def]
        new_req = super().redirect_request(req, fp, code, msg, headers, newurl)
        if new_req is not None:
            new_req.add_unredirected_header('Referer', req.full_url)
        return new_req


class UrllibPageFetcherAdapter(PageFetcherPort):
    def __init__(
        self,
        *,
        timeout_seconds: int = 30,
        max_redirects: int = 5,
        user_agent: str = DEFAULT_USER_AGENT,
        opener: Any | None = None,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._user_agent = user_agent
        self._opener = opener or urllib.request.build_opener(
            _LimitedRedirectHandler(max_redirects)
        )

    def fetch(self, source: str) -> str:
        try:
            req = urllib.request.Request(
                source,
                method='GET',
                headers={'User-Agent': self._user_agent},
            )
            with self._opener.open(req, timeout=self._timeout_seconds) as response:
                status = int(getattr(response, 'status', None) or response.getcode())
                if status != 200:
                    raise RetrievalFailed(f'Failed to fetch page: HTTP {status}')
                charset = response.headers.get_content_charset() or 'utf-8'
                body = response.read()
        except urllib.error.HTTPError as exc:
            raise RetrievalFailed(f'Failed to fetch page: HTTP {exc.code}') from exc
        except (urllib.error.URLError, TimeoutError, ValueError) as exc:
            reason = getattr(exc, 'reason', exc)
            raise RetrievalFailed(f'Failed to fetch page: {reason}') from exc

        logger.debug('Fetched %d bytes from %s', len(body), source)
        try:
            return body.decode(charset, errors='replace')
        except LookupError:
            return body.decode('utf-8', errors='replace')
