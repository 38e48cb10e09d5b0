"""用户相关的 Pydantic Schema。"""
from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

UserRole = Literal["admin", "competition_organizer", "club_manager"]

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class CreateUserInput(BaseModel):
    email: str = Field(..., pattern=EMAIL_PATTERN)
    # 原样保存，服务端不做哈希
    password_hash: str
    first_name: str
    last_name: str
    role: UserRole


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    password_hash: str
    first_name: str
    last_name: str
    role: UserRole
    created_at: datetime
    updated_at: datetime
