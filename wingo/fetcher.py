import time
from typing import Any, Callable, Optional

import requests
from loguru import logger

from wingo.config import settings
from wingo.errors import FetchError


class HistoryFetcher:
    def __init__(self, url: Optional[str] = None, retries: Optional[int] = None,
                 timeout: Optional[float] = None, backoff: Optional[float] = None,
                 session: Optional[requests.Session] = None,
                 sleep: Callable[[float], None] = time.sleep):
        self.url = url or settings.data_url
        self.retries = retries if retries is not None else settings.fetch_retries
        self.timeout = timeout if timeout is not None else settings.fetch_timeout
        self.backoff = backoff if backoff is not None else settings.fetch_backoff
        self.session = session or requests.Session()
        self.session.headers.update({
            "User-Agent": settings.user_agent,
            "Accept": "application/json",
        })
        self._sleep = sleep

    def fetch(self) -> Any:
        """GET the history page, retrying with a fixed backoff. Raises FetchError when exhausted."""
        for attempt in range(1, self.retries + 1):
            try:
                r = self.session.get(self.url, timeout=self.timeout)
                r.raise_for_status()
                return r.json()
            except (requests.RequestException, ValueError) as e:
                logger.warning(f"Fetch attempt {attempt} failed: {e}")
                if attempt < self.retries:
                    self._sleep(self.backoff)
        raise FetchError("Failed to fetch lottery data after retries")
