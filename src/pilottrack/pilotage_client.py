"""Pilotage API client."""

import logging
import time
from typing import Any, Dict, List, Tuple

import requests

from .models import Snapshot

logger = logging.getLogger(__name__)

# Pilotage snapshots endpoint; the IMO number is appended to the path
PILOTAGE_API_URL = "https://uat.engineering.sgtradex.net/api/v1/pilotage/"

RETRIEVAL_ERROR_MESSAGE = (
    "There was an error retrieving the pilotage data. Check the imo you have entered!"
)


class PilotageRetrievalError(Exception):
    """Raised when pilotage snapshots cannot be retrieved."""

    def __init__(self, message: str = RETRIEVAL_ERROR_MESSAGE):
        super().__init__(message)


class PilotageClient:
    """Fetches pilotage snapshots for a vessel."""

    def __init__(
        self,
        base_url: str = PILOTAGE_API_URL,
        timeout: float = 10,
        cache_ttl: float = 30,
        max_cache_size: int = 10,
    ):
        """
        Initialize the pilotage client.

        Args:
            base_url: Endpoint prefix; the IMO number is appended to it.
            timeout: Request timeout in seconds.
            cache_ttl: Seconds a response is reused before refetching.
            max_cache_size: Maximum number of vessels kept in the cache.
        """
        self.base_url = base_url
        self.timeout = timeout
        self._cache: Dict[str, Tuple[List[Snapshot], float]] = {}  # imo -> (snapshots, timestamp)
        self._cache_ttl = cache_ttl
        self._max_cache_size = max_cache_size
        self._session = requests.Session()

    def get_snapshots(self, imo: str) -> List[Snapshot]:
        """
        Get all pilotage snapshots for a vessel.

        Args:
            imo: 7-digit IMO number (e.g., "9074729").

        Returns:
            List of Snapshot objects in the order the API returned them.

        Raises:
            PilotageRetrievalError: If the request fails or the response
                cannot be read.
        """
        now = time.time()
        if imo in self._cache:
            snapshots, timestamp = self._cache[imo]
            if now - timestamp < self._cache_ttl:
                logger.debug(f"Using cached snapshots for {imo}")
                return list(snapshots)

        # Evict expired entries to prevent unbounded growth
        self._evict_expired_cache(now)

        # Enforce max cache size
        if len(self._cache) >= self._max_cache_size:
            oldest_key = min(self._cache.keys(), key=lambda k: self._cache[k][1])
            del self._cache[oldest_key]

        snapshots = self._parse_snapshots(self._fetch(imo))
        self._cache[imo] = (snapshots, now)
        return list(snapshots)

    def _fetch(self, imo: str) -> Any:
        """Request the raw JSON body for a vessel."""
        url = f"{self.base_url}{imo}"
        logger.debug(f"Fetching {url}")
        try:
            response = self._session.get(url, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Failed to fetch {url}: {e}")
            raise PilotageRetrievalError() from e

    @staticmethod
    def _parse_snapshots(payload: Any) -> List[Snapshot]:
        """
        Convert the API response body into Snapshot objects.

        Args:
            payload: Decoded JSON body, expected to be a list of records.

        Returns:
            List of Snapshot objects.
        """
        if not isinstance(payload, list):
            logger.error(f"Unexpected pilotage response type: {type(payload).__name__}")
            raise PilotageRetrievalError()

        try:
            snapshots = [Snapshot.from_api(record) for record in payload]
        except (KeyError, TypeError, AttributeError) as e:
            logger.error(f"Malformed pilotage record: {e}")
            raise PilotageRetrievalError() from e

        logger.debug(f"Parsed {len(snapshots)} snapshots")
        return snapshots

    def _evict_expired_cache(self, current_time: float) -> None:
        """Remove expired cache entries."""
        expired_keys = [
            imo for imo, (_, timestamp) in self._cache.items()
            if current_time - timestamp >= self._cache_ttl
        ]
        for key in expired_keys:
            del self._cache[key]

        if expired_keys:
            logger.debug(f"Evicted {len(expired_keys)} expired cache entries")

    def clear_cache(self) -> None:
        """Manually clear the cache."""
        self._cache.clear()
