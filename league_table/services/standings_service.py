import asyncio
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Optional

from league_table.core.config import settings
from league_table.core.errors import DecodeError
from league_table.core.openligadb_client import fetch_table_records
from league_table.entities.standing import SeasonRequest, Standing

logger = logging.getLogger(__name__)

OnComplete = Callable[[list[Standing]], Any]


@dataclass(frozen=True)
class FetcherConfig:
    base_url: str
    timeout: float

    @classmethod
    def from_settings(cls) -> "FetcherConfig":
        return cls(base_url=settings.API_BASE_URL, timeout=settings.REQUEST_TIMEOUT)


def parse_records(payload: Sequence[Any]) -> list[Standing]:
    """Map raw team records to Standings, keeping the server's order."""
    if isinstance(payload, (str, bytes)) or not isinstance(payload, Sequence):
        raise DecodeError(
            f"Expected a sequence of team records, got {type(payload).__name__}"
        )
    return [Standing.from_raw_record(raw, index) for index, raw in enumerate(payload)]


class SeasonFetcher:
    """
    Fetches one season's league table and maps it to Standings.

    Each ``run``/``schedule`` call issues its own request; concurrent calls
    are independent and are not de-duplicated.
    """

    def __init__(self, config: Optional[FetcherConfig] = None) -> None:
        self.config = config or FetcherConfig.from_settings()

    def url_for(self, season: str) -> str:
        return SeasonRequest(season).url(self.config.base_url)

    async def run(
        self, season: str, on_complete: Optional[OnComplete] = None
    ) -> list[Standing]:
        """
        Fetch and map the table for *season*.

        Args:
            season: First year of the season, e.g. "2021" for 2021/22
            on_complete: Optional continuation, called once with the result

        Returns:
            Standings in server order, rank 1 first

        Raises:
            FetchError: transport failure or non-2xx status
            DecodeError: body is not a JSON array of valid team records
        """
        url = self.url_for(season)
        payload = await asyncio.to_thread(fetch_table_records, url, self.config.timeout)
        standings = parse_records(payload)
        logger.info("Parsed %d standings for season %s", len(standings), season)

        if on_complete is not None:
            on_complete(standings)
        return standings

    def schedule(
        self, season: str, on_complete: Optional[OnComplete] = None
    ) -> "asyncio.Task[list[Standing]]":
        """Start ``run`` as a task on the running loop and return it."""
        return asyncio.create_task(
            self.run(season, on_complete), name=f"fetch-standings-{season}"
        )


def get_fetcher() -> SeasonFetcher:
    """FastAPI dependency that provides a fetcher configured from settings."""
    return SeasonFetcher(FetcherConfig.from_settings())
