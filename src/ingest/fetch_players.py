"""Blaseball players API fetcher used for identity lookups."""

import logging
from typing import Any, Dict, List

from .base_fetcher import BaseFetcher, FetchError

logger = logging.getLogger(__name__)

# The players endpoint rejects requests for more ids than this
MAX_IDS_PER_REQUEST = 10


class PlayerFetcher(BaseFetcher):
    """Look up player records by a comma-joined id list."""

    source_id = "players"

    @property
    def batch_size(self) -> int:
        configured = int(self.config["players"].get("batch_size", MAX_IDS_PER_REQUEST))
        return min(max(configured, 1), MAX_IDS_PER_REQUEST)

    def fetch_identities(self, ids: str) -> List[Dict[str, Any]]:
        data = self.query_api(self.config["players"]["url"], params={"ids": ids})
        if not isinstance(data, list):
            raise FetchError(self.source_id, f"expected a list of players, got {type(data).__name__}")
        return data
