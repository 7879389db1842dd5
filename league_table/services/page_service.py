"""
Page orchestration: fetch a season's table and render it into the page.

Flow:
    SeasonFetcher.run(season) -> list[Standing]
    page template -> first <table> -> TableView.show(standings) -> HTML

StandingsPipeline keeps one fetcher bound to one view for repeated
refreshes. Policy for overlapping refreshes: the latest request wins. A new
refresh cancels the outstanding one, so a superseded response is never
rendered and two fetches never race to write the same table.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from league_table.core.config import settings
from league_table.core.page_document import find_table, load_template, parse_document
from league_table.entities.standing import Standing
from league_table.services.standings_service import SeasonFetcher
from league_table.services.table_view import TableView

logger = logging.getLogger(__name__)


async def render_standings_page(
    season: Optional[str] = None,
    *,
    fetcher: Optional[SeasonFetcher] = None,
    template: Optional[str] = None,
) -> str:
    """
    Fetch the table for *season* and return the page with it rendered.

    Args:
        season: Season identifier; defaults to settings.DEFAULT_SEASON
        fetcher: SeasonFetcher to use (a default one is built from settings)
        template: Page HTML; defaults to the packaged index.html

    Raises:
        FetchError, DecodeError: from the fetch step
        RenderTargetMissing: the page has no table or table body
    """
    season = season or settings.DEFAULT_SEASON
    fetcher = fetcher or SeasonFetcher()

    standings = await fetcher.run(season)

    document = parse_document(template if template is not None else load_template())
    table_view = TableView(find_table(document))
    table_view.show(standings)

    caption = document.find(id="season")
    if caption is not None:
        caption.string = season

    logger.info("Rendered %d standings for season %s", len(standings), season)
    return str(document)


class StandingsPipeline:
    """One fetcher bound to one table view, refreshed on demand."""

    def __init__(self, fetcher: SeasonFetcher, view: TableView) -> None:
        self.fetcher = fetcher
        self.view = view
        self._current: Optional[asyncio.Task[list[Standing]]] = None

    @property
    def pending(self) -> bool:
        return self._current is not None and not self._current.done()

    def refresh(self, season: str) -> asyncio.Task[list[Standing]]:
        """Fetch *season* and show it, cancelling any refresh still in flight."""
        if self.pending:
            assert self._current is not None
            logger.info("Cancelling superseded standings fetch")
            self._current.cancel()
        self._current = self.fetcher.schedule(season, on_complete=self._show_if_current)
        return self._current

    def _show_if_current(self, standings: list[Standing]) -> None:
        # Runs inside the task that produced the standings.
        if asyncio.current_task() is not self._current:
            return
        self.view.show(standings)
