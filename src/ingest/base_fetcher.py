"""Shared HTTP plumbing and configuration for the remote event log and player API."""

import copy
import logging
import os
from typing import Any, Dict, Optional

import requests
import yaml
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "eventually": {
        "url": "https://api.sibr.dev/eventually/v2/events",
        "attack_query": {"description": "consumer", "limit": 2000},
        "stats_query": {"sortorder": "desc", "type": 67, "limit": 10000},
    },
    "players": {
        "url": "https://www.blaseball.com/database/players",
        "batch_size": 10,
    },
    "http": {
        "connect_timeout": 10,
        "read_timeout": 60,
        # A failed call aborts the run; raise above 0 only for flaky networks.
        "max_retries": 0,
    },
    "output": {
        "path": "data.js",
    },
    "logging": {
        "level": "INFO",
        "file": "logs/credits.log",
    },
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_ingest_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load endpoint and output settings from config/ingest.yaml.

    Args:
        path: Explicit config path. When omitted, ``config/ingest.yaml`` is
            looked up in the working directory and then at the repo root.

    Returns:
        DEFAULT_CONFIG overlaid with whatever the YAML file provides
    """
    if path:
        config_paths = [path]
    else:
        config_paths = [
            "config/ingest.yaml",
            os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "config/ingest.yaml"),
        ]

    for candidate in config_paths:
        if os.path.exists(candidate):
            with open(candidate, 'r') as f:
                loaded = yaml.safe_load(f) or {}
            logger.debug(f"Loaded ingest config from {candidate}")
            return _deep_merge(DEFAULT_CONFIG, loaded)

    if path:
        logger.warning(f"Config file {path} not found, using defaults")
    return copy.deepcopy(DEFAULT_CONFIG)


class FetchError(Exception):
    """Raised when a remote call fails. Always fatal for the run."""
    def __init__(self, source_id: str, message: str, original_error: Optional[Exception] = None):
        self.source_id = source_id
        self.message = message
        self.original_error = original_error
        super().__init__(f"{source_id}: {message}")


def build_session(max_retries: int = 0) -> requests.Session:
    """Create a session with an explicit urllib3 retry policy for GET requests."""
    retry = Retry(
        total=max_retries,
        allowed_methods=["GET"],
        backoff_factor=1,
        status_forcelist=[502, 503, 504],
        raise_on_status=False,
    )
    session = requests.Session()
    session.mount("https://", HTTPAdapter(max_retries=retry))
    session.mount("http://", HTTPAdapter(max_retries=retry))
    return session


class BaseFetcher:
    """Issues GET requests against one JSON API and decodes the response."""

    source_id = "remote"

    def __init__(self, config: Optional[Dict[str, Any]] = None, session: Optional[requests.Session] = None):
        self.config = config if config is not None else load_ingest_config()
        http = self.config.get("http", {})
        self.timeout = (http.get("connect_timeout", 10), http.get("read_timeout", 60))
        self.session = session or build_session(http.get("max_retries", 0))

    def query_api(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Fetch ``url`` and return the decoded JSON document.

        Raises:
            FetchError: on connection errors, non-2xx status or undecodable JSON
        """
        logger.info(f"GET {url} params={params or {}}")
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            raise FetchError(self.source_id, f"request failed: {e}", e) from e
        except ValueError as e:
            logger.error(f"Response from {url} was not valid JSON: {e}")
            raise FetchError(self.source_id, f"invalid JSON: {e}", e) from e
