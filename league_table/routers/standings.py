from fastapi import APIRouter, Depends

from league_table.dtos.standing_dto import StandingRead
from league_table.services.standings_service import SeasonFetcher, get_fetcher

router = APIRouter(prefix="/api/v1/standings", tags=["standings"])


@router.get("/{season}", response_model=list[StandingRead])
async def get_standings(season: str, fetcher: SeasonFetcher = Depends(get_fetcher)):
    standings = await fetcher.run(season)
    return [StandingRead.model_validate(s) for s in standings]
