"""Fetch corpus bytes over HTTP."""

from __future__ import annotations

import requests

from ..core.exceptions import CorpusLoadError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


def is_remote(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def fetch_bytes(url: str, timeout_seconds: float = 30.0) -> bytes:
    """Download ``url`` and return the raw body."""

    LOGGER.info("Fetching corpus from %s", url)
    try:
        response = requests.get(url, timeout=timeout_seconds)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise CorpusLoadError(f"Corpus request failed: {exc}") from exc
    return response.content
