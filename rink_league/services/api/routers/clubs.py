"""俱乐部 / 球队 / 球员 API。"""
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from rink_league.services.api.dependencies import get_club_service, get_db, get_player_service
from rink_league.services.api.schemas.club import (
    ClubResponse,
    CreateClubInput,
    CreateTeamInput,
    RegisterTeamInput,
    TeamResponse,
    UpdateClubInput,
)
from rink_league.services.api.schemas.player import (
    CreatePlayerInput,
    CreatePlayerStatInput,
    PlayerResponse,
    PlayerStatResponse,
    UpdatePlayerInput,
)
from rink_league.services.club_service import ClubService
from rink_league.services.player_service import PlayerService

router = APIRouter(prefix="/api/v1", tags=["Club"])


# ============ 俱乐部 ============

@router.post("/clubs", response_model=ClubResponse, operation_id="createClub")
async def create_club(
    payload: CreateClubInput,
    db: AsyncSession = Depends(get_db),
    service: ClubService = Depends(get_club_service),
):
    return await service.create_club(db, payload.model_dump())


@router.get("/clubs", response_model=List[ClubResponse], operation_id="getClubs")
async def get_clubs(
    manager_id: Optional[int] = Query(None, description="只返回该用户管理的俱乐部 (getClubsByManager)"),
    db: AsyncSession = Depends(get_db),
    service: ClubService = Depends(get_club_service),
):
    return await service.get_clubs(db, manager_id=manager_id)


@router.patch("/clubs/{club_id}", response_model=ClubResponse, operation_id="updateClub")
async def update_club(
    club_id: int,
    payload: UpdateClubInput,
    db: AsyncSession = Depends(get_db),
    service: ClubService = Depends(get_club_service),
):
    return await service.update_club(db, club_id, payload.model_dump(exclude_unset=True))


@router.get("/clubs/{club_id}/teams", response_model=List[TeamResponse], operation_id="getTeamsByClub")
async def get_teams_by_club(
    club_id: int,
    db: AsyncSession = Depends(get_db),
    service: ClubService = Depends(get_club_service),
):
    return await service.get_teams_by_club(db, club_id)


# ============ 球队 ============

@router.post("/teams", response_model=TeamResponse, operation_id="createTeam")
async def create_team(
    payload: CreateTeamInput,
    db: AsyncSession = Depends(get_db),
    service: ClubService = Depends(get_club_service),
):
    return await service.create_team(db, payload.model_dump())


@router.post("/teams/register", response_model=TeamResponse, operation_id="registerTeam")
async def register_team(
    payload: RegisterTeamInput,
    db: AsyncSession = Depends(get_db),
    service: ClubService = Depends(get_club_service),
):
    return await service.register_team(db, team_id=payload.team_id, league_id=payload.league_id)


@router.get("/teams/{team_id}/players", response_model=List[PlayerResponse], operation_id="getPlayersByTeam")
async def get_players_by_team(
    team_id: int,
    db: AsyncSession = Depends(get_db),
    service: PlayerService = Depends(get_player_service),
):
    return await service.get_players_by_team(db, team_id)


# ============ 球员 ============

@router.post("/players", response_model=PlayerResponse, operation_id="createPlayer")
async def create_player(
    payload: CreatePlayerInput,
    db: AsyncSession = Depends(get_db),
    service: PlayerService = Depends(get_player_service),
):
    return await service.create_player(db, payload.model_dump())


@router.patch("/players/{player_id}", response_model=PlayerResponse, operation_id="updatePlayer")
async def update_player(
    player_id: int,
    payload: UpdatePlayerInput,
    db: AsyncSession = Depends(get_db),
    service: PlayerService = Depends(get_player_service),
):
    return await service.update_player(db, player_id, payload.model_dump(exclude_unset=True))


@router.delete("/players/{player_id}", status_code=204, operation_id="deletePlayer")
async def delete_player(
    player_id: int,
    db: AsyncSession = Depends(get_db),
    service: PlayerService = Depends(get_player_service),
) -> Response:
    await service.delete_player(db, player_id)
    return Response(status_code=204)


@router.post("/player-stats", response_model=PlayerStatResponse, operation_id="createPlayerStat")
async def create_player_stat(
    payload: CreatePlayerStatInput,
    db: AsyncSession = Depends(get_db),
    service: PlayerService = Depends(get_player_service),
):
    return await service.create_player_stat(db, payload.model_dump())
