"""
Unit tests for standings_service.py

Tests cover:
- parse_records: order, length and rank assignment
- SeasonFetcher.run: URL building, continuation semantics, error propagation
- SeasonFetcher.schedule: independent tasks per call
"""

import ast
import asyncio
import inspect
from unittest.mock import Mock, patch

import pytest

from league_table.core.errors import DecodeError, FetchError
from league_table.services import standings_service
from league_table.services.standings_service import (
    FetcherConfig,
    SeasonFetcher,
    get_fetcher,
    parse_records,
)

FETCH = "league_table.services.standings_service.fetch_table_records"


def _record(name, won=1):
    return {
        "TeamName": name, "TeamIconUrl": f"{name}.png", "Won": won, "Draw": 0,
        "Lost": 0, "Points": 3 * won, "Goals": won, "OpponentGoals": 0,
    }


class TestParseRecords:
    def test_preserves_order_and_length(self):
        names = ["Bayern", "Dortmund", "Leverkusen", "Leipzig", "Union"]
        standings = parse_records([_record(n) for n in names])

        assert len(standings) == len(names)
        assert [s.name for s in standings] == names
        assert [s.rank for s in standings] == [1, 2, 3, 4, 5]

    def test_rank_is_positional_not_sorted(self):
        # Server order is authoritative even if points disagree.
        standings = parse_records([_record("Low", won=1), _record("High", won=9)])
        assert [(s.rank, s.name) for s in standings] == [(1, "Low"), (2, "High")]

    def test_empty_payload(self):
        assert parse_records([]) == []

    def test_non_sequence_raises_decode_error(self):
        with pytest.raises(DecodeError):
            parse_records({"TeamName": "A"})

    def test_string_payload_raises_decode_error(self):
        with pytest.raises(DecodeError):
            parse_records("[]")

    def test_bad_record_raises_decode_error(self):
        with pytest.raises(DecodeError, match="index 1"):
            parse_records([_record("A"), {"TeamName": "B"}])


class TestSeasonFetcher:
    def test_default_config_from_settings(self):
        fetcher = SeasonFetcher()
        assert fetcher.config.base_url == "https://api.test/getbltable/bl1/"
        assert fetcher.config.timeout == 10.0

    def test_get_fetcher_dependency(self):
        assert isinstance(get_fetcher(), SeasonFetcher)

    def test_config_is_immutable(self):
        config = FetcherConfig(base_url="https://x/", timeout=1)
        with pytest.raises(Exception):
            config.base_url = "https://y/"

    def test_url_for(self, fetcher):
        assert fetcher.url_for("2021") == "https://api.test/table/2021"

    @pytest.mark.asyncio
    async def test_run_returns_standings(self, fetcher, table_payload):
        with patch(FETCH, return_value=table_payload) as mock_fetch:
            standings = await fetcher.run("2021")

        mock_fetch.assert_called_once_with("https://api.test/table/2021", 5)
        assert [s.name for s in standings] == ["A", "B"]
        assert standings[0].rank == 1

    @pytest.mark.asyncio
    async def test_run_calls_continuation_once(self, fetcher, table_payload):
        on_complete = Mock()
        with patch(FETCH, return_value=table_payload):
            standings = await fetcher.run("2021", on_complete)

        on_complete.assert_called_once_with(standings)

    @pytest.mark.asyncio
    async def test_continuation_not_called_on_fetch_error(self, fetcher):
        on_complete = Mock()
        with patch(FETCH, side_effect=FetchError("down")):
            with pytest.raises(FetchError):
                await fetcher.run("2021", on_complete)

        on_complete.assert_not_called()

    @pytest.mark.asyncio
    async def test_continuation_not_called_on_decode_error(self, fetcher):
        on_complete = Mock()
        with patch(FETCH, return_value=[{"TeamName": "broken"}]):
            with pytest.raises(DecodeError):
                await fetcher.run("2021", on_complete)

        on_complete.assert_not_called()

    @pytest.mark.asyncio
    async def test_schedule_returns_task(self, fetcher, table_payload):
        with patch(FETCH, return_value=table_payload):
            task = fetcher.schedule("2021")
            assert isinstance(task, asyncio.Task)
            standings = await task

        assert len(standings) == 2

    @pytest.mark.asyncio
    async def test_schedule_twice_runs_independently(self, fetcher, table_payload):
        on_complete = Mock()
        with patch(FETCH, return_value=table_payload) as mock_fetch:
            first = fetcher.schedule("2020", on_complete)
            second = fetcher.schedule("2021", on_complete)
            await asyncio.gather(first, second)

        assert first is not second
        assert mock_fetch.call_count == 2
        assert on_complete.call_count == 2


class TestAsyncThreadPool:
    def test_fetch_runs_in_worker_thread(self):
        """The blocking requests call must go through asyncio.to_thread."""
        tree = ast.parse(inspect.getsource(standings_service))
        found = any(
            isinstance(node, ast.Attribute)
            and isinstance(node.value, ast.Name)
            and node.value.id == "asyncio"
            and node.attr == "to_thread"
            for node in ast.walk(tree)
        )
        assert found, "standings_service must use asyncio.to_thread for blocking calls"
