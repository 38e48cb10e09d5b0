"""赛事 / 联赛相关的 Pydantic Schema。"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CreateCompetitionInput(BaseModel):
    name: str
    description: Optional[str] = None
    start_date: datetime
    end_date: datetime
    organizer_id: int


class UpdateCompetitionInput(BaseModel):
    """未传入的字段保持不变"""
    name: Optional[str] = None
    description: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    is_active: Optional[bool] = None


class CompetitionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    start_date: datetime
    end_date: datetime
    organizer_id: int
    is_active: bool
    created_at: datetime
    updated_at: datetime


class CreateLeagueInput(BaseModel):
    name: str
    competition_id: int
    max_teams: int = Field(..., gt=0)


class LeagueResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    competition_id: int
    max_teams: int
    created_at: datetime
    updated_at: datetime
