"""
CompetitionService - 用户 / 赛事 / 联赛管理

简单的增删改查，所有写操作在请求会话内一次提交。
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from rink_league.infra.db.models import Competition, League, User, utcnow
from rink_league.infra.db.session import commit_or_rollback
from rink_league.services.errors import NotFoundError

logger = logging.getLogger(__name__)


class CompetitionService:

    # ==================== 用户 ====================

    async def create_user(self, session: AsyncSession, data: Dict[str, Any]) -> User:
        user = User(**data)
        await commit_or_rollback(session, "User creation", user)
        return user

    async def get_users(self, session: AsyncSession) -> List[User]:
        result = await session.execute(select(User).order_by(User.id))
        return list(result.scalars().all())

    # ==================== 赛事 ====================

    async def create_competition(self, session: AsyncSession, data: Dict[str, Any]) -> Competition:
        competition = Competition(**data)
        await commit_or_rollback(session, "Competition creation", competition)
        return competition

    async def get_competitions(self, session: AsyncSession) -> List[Competition]:
        result = await session.execute(select(Competition).order_by(Competition.id))
        return list(result.scalars().all())

    async def get_competition(self, session: AsyncSession, competition_id: int) -> Optional[Competition]:
        """不存在时返回 None"""
        return await session.get(Competition, competition_id)

    async def update_competition(
        self,
        session: AsyncSession,
        competition_id: int,
        changes: Dict[str, Any]
    ) -> Competition:
        """
        只更新传入的字段，并刷新 updated_at

        Raises:
            NotFoundError: 赛事不存在
        """
        competition = await session.get(Competition, competition_id)
        if competition is None:
            raise NotFoundError(f"Competition with id {competition_id} not found")

        for field, value in changes.items():
            setattr(competition, field, value)
        competition.updated_at = utcnow()

        await commit_or_rollback(session, "Competition update")
        return competition

    # ==================== 联赛 ====================

    async def create_league(self, session: AsyncSession, data: Dict[str, Any]) -> League:
        league = League(**data)
        await commit_or_rollback(session, "League creation", league)
        logger.info(f"League {league.id} created in competition {league.competition_id}")
        return league

    async def get_leagues_by_competition(
        self,
        session: AsyncSession,
        competition_id: int
    ) -> List[League]:
        result = await session.execute(
            select(League)
            .where(League.competition_id == competition_id)
            .order_by(League.id)
        )
        return list(result.scalars().all())


# 全局单例
competition_service = CompetitionService()
