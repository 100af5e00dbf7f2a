"""SIBR Eventually fetcher for consumer attack events.

API Documentation: https://alisww.github.io/eventually/#/default/events

Two queries are used:
- every event whose description mentions "consumer", ascending, which covers
  the attacks together with their stat-loss and item fragments
- the newest consumer attack events (type 67) for the outcome tallies
"""

import logging
from typing import Any, Dict, List, Optional

from .base_fetcher import BaseFetcher, FetchError

logger = logging.getLogger(__name__)


class EventLogFetcher(BaseFetcher):
    """Fetch raw event dicts from the Eventually API."""

    source_id = "eventually"

    def _events(self, query: Dict[str, Any]) -> List[Dict[str, Any]]:
        url = self.config["eventually"]["url"]
        data = self.query_api(url, params=query)
        if not isinstance(data, list):
            raise FetchError(self.source_id, f"expected a list of events, got {type(data).__name__}")
        logger.info(f"Fetched {len(data)} events from {self.source_id}")
        return data

    def fetch_attack_events(self) -> List[Dict[str, Any]]:
        """All events mentioning consumers, oldest first."""
        return self._events(dict(self.config["eventually"]["attack_query"]))

    def fetch_outcome_events(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Newest consumer attack events, for per-season outcome counts."""
        query = dict(self.config["eventually"]["stats_query"])
        if limit is not None:
            query["limit"] = limit
        return self._events(query)
