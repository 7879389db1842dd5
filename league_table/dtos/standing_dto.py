"""
DTOs for league table records.
"""

from pydantic import BaseModel, ConfigDict, Field


class RawStandingRecord(BaseModel):
    """Wire format of one team's row as returned by OpenLigaDB."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    team_icon_url: str = Field(..., alias="TeamIconUrl", description="Crest image URL")
    team_name: str = Field(..., alias="TeamName", description="Club display name")
    won: int = Field(..., alias="Won", ge=0, description="Matches won")
    draw: int = Field(..., alias="Draw", ge=0, description="Matches drawn")
    lost: int = Field(..., alias="Lost", ge=0, description="Matches lost")
    points: int = Field(..., alias="Points", ge=0, description="Table points")
    goals: int = Field(..., alias="Goals", ge=0, description="Goals scored")
    opponent_goals: int = Field(
        ..., alias="OpponentGoals", ge=0, description="Goals conceded"
    )


class StandingRead(BaseModel):
    """DTO for reading a standing over the JSON API."""

    rank: int
    crest_url: str
    name: str
    wins: int
    draws: int
    losses: int
    points: int
    goals_for: int
    goals_against: int
    goals: str

    model_config = ConfigDict(from_attributes=True)
