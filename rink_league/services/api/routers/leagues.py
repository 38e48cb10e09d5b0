"""联赛 API：赛程生成与积分榜。"""
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from rink_league.services.api.dependencies import (
    get_club_service,
    get_competition_service,
    get_db,
    get_match_service,
    get_schedule_service,
    get_standings_service,
)
from rink_league.services.api.schemas.club import TeamResponse
from rink_league.services.api.schemas.competition import CreateLeagueInput, LeagueResponse
from rink_league.services.api.schemas.match import LeagueStandingResponse, MatchResponse
from rink_league.services.club_service import ClubService
from rink_league.services.competition_service import CompetitionService
from rink_league.services.match_service import MatchService
from rink_league.services.schedule_service import ScheduleService
from rink_league.services.standings_service import StandingsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/leagues", tags=["League"])


@router.post("", response_model=LeagueResponse, operation_id="createLeague")
async def create_league(
    payload: CreateLeagueInput,
    db: AsyncSession = Depends(get_db),
    service: CompetitionService = Depends(get_competition_service),
):
    return await service.create_league(db, payload.model_dump())


@router.get("/{league_id}/teams", response_model=List[TeamResponse], operation_id="getTeamsByLeague")
async def get_teams_by_league(
    league_id: int,
    db: AsyncSession = Depends(get_db),
    service: ClubService = Depends(get_club_service),
):
    return await service.get_teams_by_league(db, league_id)


@router.get("/{league_id}/matches", response_model=List[MatchResponse], operation_id="getMatchesByLeague")
async def get_matches_by_league(
    league_id: int,
    db: AsyncSession = Depends(get_db),
    service: MatchService = Depends(get_match_service),
):
    return await service.get_matches_by_league(db, league_id)


@router.post("/{league_id}/schedule", response_model=List[MatchResponse], operation_id="generateLeagueSchedule")
async def generate_league_schedule(
    league_id: int,
    db: AsyncSession = Depends(get_db),
    service: ScheduleService = Depends(get_schedule_service),
):
    """
    生成单循环赛程

    - 404: 联赛不存在
    - 400: 报名球队少于 2 支
    - 重复调用会再追加一套赛程
    """
    logger.info(f"Generating schedule for league {league_id}")
    return await service.generate_league_schedule(db, league_id)


@router.get("/{league_id}/standings", response_model=List[LeagueStandingResponse], operation_id="getLeagueStandings")
async def get_league_standings(
    league_id: int,
    db: AsyncSession = Depends(get_db),
    service: StandingsService = Depends(get_standings_service),
):
    """按积分、净胜球降序返回积分榜"""
    return await service.get_league_standings(db, league_id)


@router.post("/{league_id}/standings", response_model=List[LeagueStandingResponse], operation_id="updateLeagueStandings")
async def update_league_standings(
    league_id: int,
    db: AsyncSession = Depends(get_db),
    service: StandingsService = Depends(get_standings_service),
):
    """根据已完赛比赛重算积分榜（录入比分后需显式调用）"""
    return await service.update_league_standings(db, league_id)
