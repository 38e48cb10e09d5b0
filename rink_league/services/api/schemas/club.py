"""俱乐部 / 球队相关的 Pydantic Schema。"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from rink_league.services.api.schemas.user import EMAIL_PATTERN


class CreateClubInput(BaseModel):
    name: str
    description: Optional[str] = None
    contact_email: str = Field(..., pattern=EMAIL_PATTERN)
    contact_phone: Optional[str] = None
    manager_id: int


class UpdateClubInput(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    contact_email: Optional[str] = Field(default=None, pattern=EMAIL_PATTERN)
    contact_phone: Optional[str] = None


class ClubResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    contact_email: str
    contact_phone: Optional[str] = None
    manager_id: int
    created_at: datetime
    updated_at: datetime


class CreateTeamInput(BaseModel):
    name: str
    club_id: int
    league_id: Optional[int] = None


class RegisterTeamInput(BaseModel):
    team_id: int
    league_id: int


class TeamResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    club_id: int
    league_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime
