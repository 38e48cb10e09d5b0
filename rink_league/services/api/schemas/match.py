"""比赛 / 积分榜相关的 Pydantic Schema。"""
from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

MatchStatus = Literal["scheduled", "in_progress", "completed", "cancelled"]


class CreateMatchInput(BaseModel):
    league_id: int
    home_team_id: int
    away_team_id: int
    scheduled_date: datetime


class UpdateMatchScoreInput(BaseModel):
    match_id: int
    home_score: int = Field(..., ge=0)
    away_score: int = Field(..., ge=0)


class MatchResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    league_id: int
    home_team_id: int
    away_team_id: int
    scheduled_date: datetime
    home_score: Optional[int] = Field(default=None, ge=0)
    away_score: Optional[int] = Field(default=None, ge=0)
    status: MatchStatus
    created_at: datetime
    updated_at: datetime


class LeagueStandingResponse(BaseModel):
    """积分榜行：不含排名字段，顺序即排名"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    league_id: int
    team_id: int
    games_played: int = Field(..., ge=0)
    wins: int = Field(..., ge=0)
    losses: int = Field(..., ge=0)
    draws: int = Field(..., ge=0)
    goals_for: int = Field(..., ge=0)
    goals_against: int = Field(..., ge=0)
    points: int = Field(..., ge=0)
    updated_at: datetime
