"""Shared OpenLigaDB HTTP helpers.

The standings service reuses these for the blocking fetch + decode step.
"""

import logging
from typing import Any, Optional

import requests

from league_table.core.config import settings
from league_table.core.errors import DecodeError, FetchError
from league_table.entities.standing import SeasonRequest

logger = logging.getLogger(__name__)


def build_table_url(season: str, base_url: Optional[str] = None) -> str:
    """Append *season* verbatim to the league table endpoint."""
    base = settings.API_BASE_URL if base_url is None else base_url
    return SeasonRequest(season).url(base)


def fetch_json(url: str, timeout: Optional[float] = None) -> Any:
    """GET *url* and decode the body as JSON.

    Raises FetchError for transport failures and non-2xx statuses,
    DecodeError when the body is not valid JSON.
    """
    headers = {"Accept": "application/json", "User-Agent": settings.USER_AGENT}
    if timeout is None:
        timeout = settings.REQUEST_TIMEOUT
    try:
        res = requests.get(url, headers=headers, timeout=timeout)
        res.raise_for_status()
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        raise FetchError(
            f"Standings API returned HTTP {status}", url=url, status_code=status
        ) from e
    except requests.exceptions.RequestException as e:
        raise FetchError(f"Failed to fetch standings: {e}", url=url) from e

    try:
        return res.json()
    except ValueError as e:
        raise DecodeError(f"Response from {url} is not valid JSON") from e


def fetch_table_records(url: str, timeout: Optional[float] = None) -> list[dict]:
    """Top-level convenience: fetch *url*, require a JSON array of records."""
    logger.info("Fetching league table from %s", url)
    payload = fetch_json(url, timeout=timeout)
    if not isinstance(payload, list):
        raise DecodeError(
            f"Expected a JSON array of team records, got {type(payload).__name__}"
        )
    logger.info("Received %d team records from %s", len(payload), url)
    return payload
