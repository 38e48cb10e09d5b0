"""用户 / 赛事 API。"""
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from rink_league.services.api.dependencies import get_competition_service, get_db
from rink_league.services.api.schemas.competition import (
    CompetitionResponse,
    CreateCompetitionInput,
    LeagueResponse,
    UpdateCompetitionInput,
)
from rink_league.services.api.schemas.user import CreateUserInput, UserResponse
from rink_league.services.competition_service import CompetitionService

router = APIRouter(prefix="/api/v1", tags=["Competition"])


# ============ 用户 ============

@router.post("/users", response_model=UserResponse, operation_id="createUser")
async def create_user(
    payload: CreateUserInput,
    db: AsyncSession = Depends(get_db),
    service: CompetitionService = Depends(get_competition_service),
):
    return await service.create_user(db, payload.model_dump())


@router.get("/users", response_model=List[UserResponse], operation_id="getUsers")
async def get_users(
    db: AsyncSession = Depends(get_db),
    service: CompetitionService = Depends(get_competition_service),
):
    return await service.get_users(db)


# ============ 赛事 ============

@router.post("/competitions", response_model=CompetitionResponse, operation_id="createCompetition")
async def create_competition(
    payload: CreateCompetitionInput,
    db: AsyncSession = Depends(get_db),
    service: CompetitionService = Depends(get_competition_service),
):
    return await service.create_competition(db, payload.model_dump())


@router.get("/competitions", response_model=List[CompetitionResponse], operation_id="getCompetitions")
async def get_competitions(
    db: AsyncSession = Depends(get_db),
    service: CompetitionService = Depends(get_competition_service),
):
    return await service.get_competitions(db)


@router.get("/competitions/{competition_id}", response_model=Optional[CompetitionResponse], operation_id="getCompetitionById")
async def get_competition_by_id(
    competition_id: int,
    db: AsyncSession = Depends(get_db),
    service: CompetitionService = Depends(get_competition_service),
):
    """不存在时返回 null"""
    return await service.get_competition(db, competition_id)


@router.patch("/competitions/{competition_id}", response_model=CompetitionResponse, operation_id="updateCompetition")
async def update_competition(
    competition_id: int,
    payload: UpdateCompetitionInput,
    db: AsyncSession = Depends(get_db),
    service: CompetitionService = Depends(get_competition_service),
):
    return await service.update_competition(
        db, competition_id, payload.model_dump(exclude_unset=True)
    )


@router.get("/competitions/{competition_id}/leagues", response_model=List[LeagueResponse], operation_id="getLeaguesByCompetition")
async def get_leagues_by_competition(
    competition_id: int,
    db: AsyncSession = Depends(get_db),
    service: CompetitionService = Depends(get_competition_service),
):
    return await service.get_leagues_by_competition(db, competition_id)
