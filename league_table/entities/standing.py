"""
Entities for one league table snapshot.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from league_table.core.errors import DecodeError
from league_table.dtos.standing_dto import RawStandingRecord


@dataclass(frozen=True)
class Standing:
    """
    One team's row in a league table snapshot.

    ``rank`` is positional (response order + 1), not a server value.
    Snapshots for different seasons are unrelated; nothing links them.
    """

    rank: int
    crest_url: str
    name: str
    wins: int
    draws: int
    losses: int
    points: int
    goals_for: int
    goals_against: int

    @property
    def goals(self) -> str:
        return f"{self.goals_for}:{self.goals_against}"

    @classmethod
    def from_raw_record(
        cls, raw: RawStandingRecord | Mapping[str, Any], position_index: int
    ) -> Standing:
        """Build a Standing from a wire record and its zero-based index."""
        if not isinstance(raw, RawStandingRecord):
            try:
                raw = RawStandingRecord.model_validate(raw)
            except ValidationError as e:
                raise DecodeError(
                    f"Malformed team record at index {position_index}",
                    details=e.errors(include_url=False),
                ) from e

        return cls(
            rank=position_index + 1,
            crest_url=raw.team_icon_url,
            name=raw.team_name,
            wins=raw.won,
            draws=raw.draw,
            losses=raw.lost,
            points=raw.points,
            goals_for=raw.goals,
            goals_against=raw.opponent_goals,
        )


@dataclass(frozen=True)
class SeasonRequest:
    """A request for one season's table, e.g. ``"2021"`` for 2021/22."""

    season: str

    def url(self, base_url: str) -> str:
        return f"{base_url}{self.season}"
