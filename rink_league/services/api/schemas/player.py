"""球员 / 球员单场数据相关的 Pydantic Schema。"""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CreatePlayerInput(BaseModel):
    first_name: str
    last_name: str
    jersey_number: int = Field(..., gt=0)
    team_id: int
    date_of_birth: datetime
    position: Optional[str] = None


class UpdatePlayerInput(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    jersey_number: Optional[int] = Field(default=None, gt=0)
    date_of_birth: Optional[datetime] = None
    position: Optional[str] = None


class PlayerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    jersey_number: int
    team_id: int
    date_of_birth: datetime
    position: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class CreatePlayerStatInput(BaseModel):
    match_id: int
    player_id: int
    goals: int = Field(default=0, ge=0)
    assists: int = Field(default=0, ge=0)


class PlayerStatResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    match_id: int
    player_id: int
    goals: int
    assists: int
    created_at: datetime
    updated_at: datetime
