"""比赛 API：创建、录入比分、球员单场数据。"""
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from rink_league.services.api.dependencies import get_db, get_match_service, get_player_service
from rink_league.services.api.schemas.match import CreateMatchInput, MatchResponse, UpdateMatchScoreInput
from rink_league.services.api.schemas.player import PlayerStatResponse
from rink_league.services.match_service import MatchService
from rink_league.services.player_service import PlayerService

router = APIRouter(prefix="/api/v1/matches", tags=["Match"])


@router.post("", response_model=MatchResponse, operation_id="createMatch")
async def create_match(
    payload: CreateMatchInput,
    db: AsyncSession = Depends(get_db),
    service: MatchService = Depends(get_match_service),
):
    return await service.create_match(db, **payload.model_dump())


@router.post("/score", response_model=MatchResponse, operation_id="updateMatchScore")
async def update_match_score(
    payload: UpdateMatchScoreInput,
    db: AsyncSession = Depends(get_db),
    service: MatchService = Depends(get_match_service),
):
    """
    录入比分

    无论原状态如何都会置为 completed；不会自动重算积分榜。
    """
    return await service.update_match_score(
        db,
        match_id=payload.match_id,
        home_score=payload.home_score,
        away_score=payload.away_score,
    )


@router.get("/{match_id}/player-stats", response_model=List[PlayerStatResponse], operation_id="getPlayerStatsByMatch")
async def get_player_stats_by_match(
    match_id: int,
    db: AsyncSession = Depends(get_db),
    service: PlayerService = Depends(get_player_service),
):
    return await service.get_player_stats_by_match(db, match_id)
