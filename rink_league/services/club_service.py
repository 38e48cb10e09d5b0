"""
ClubService - 俱乐部 / 球队管理

职责：
1. 俱乐部增改查
2. 球队创建、按俱乐部 / 联赛查询
3. 球队报名联赛（写入 league_id，一支球队同一时间只属于一个联赛）
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from rink_league.infra.db.models import Club, League, Team, utcnow
from rink_league.infra.db.session import commit_or_rollback
from rink_league.services.errors import NotFoundError

logger = logging.getLogger(__name__)


class ClubService:

    # ==================== 俱乐部 ====================

    async def create_club(self, session: AsyncSession, data: Dict[str, Any]) -> Club:
        club = Club(**data)
        session.add(club)
        await commit_or_rollback(session, "Club creation")
        return club

    async def get_clubs(
        self,
        session: AsyncSession,
        manager_id: Optional[int] = None
    ) -> List[Club]:
        """
        获取俱乐部列表

        Args:
            manager_id: 仅返回该用户管理的俱乐部
        """
        query = select(Club)
        if manager_id is not None:
            query = query.where(Club.manager_id == manager_id)

        result = await session.execute(query.order_by(Club.id))
        return list(result.scalars().all())

    async def update_club(
        self,
        session: AsyncSession,
        club_id: int,
        changes: Dict[str, Any]
    ) -> Club:
        club = await session.get(Club, club_id)
        if club is None:
            raise NotFoundError(f"Club with id {club_id} not found")

        for field, value in changes.items():
            setattr(club, field, value)
        club.updated_at = utcnow()

        await commit_or_rollback(session, "Club update")
        return club

    # ==================== 球队 ====================

    async def create_team(self, session: AsyncSession, data: Dict[str, Any]) -> Team:
        team = Team(**data)
        session.add(team)
        await commit_or_rollback(session, "Team creation")
        return team

    async def get_teams_by_club(self, session: AsyncSession, club_id: int) -> List[Team]:
        result = await session.execute(
            select(Team).where(Team.club_id == club_id).order_by(Team.id)
        )
        return list(result.scalars().all())

    async def get_teams_by_league(self, session: AsyncSession, league_id: int) -> List[Team]:
        """按球队 ID 升序，与赛程生成的配对顺序一致"""
        result = await session.execute(
            select(Team).where(Team.league_id == league_id).order_by(Team.id)
        )
        return list(result.scalars().all())

    async def register_team(
        self,
        session: AsyncSession,
        team_id: int,
        league_id: int
    ) -> Team:
        """
        球队报名联赛

        已在其他联赛的球队会被直接转入新联赛；不检查联赛 max_teams。

        Raises:
            NotFoundError: 联赛或球队不存在
        """
        league = await session.get(League, league_id)
        if league is None:
            raise NotFoundError("League not found")

        team = await session.get(Team, team_id)
        if team is None:
            raise NotFoundError("Team not found")

        team.league_id = league_id
        team.updated_at = utcnow()

        await commit_or_rollback(session, "Team registration")
        logger.info(f"Team {team_id} registered to league {league_id}")
        return team


# 全局单例
club_service = ClubService()
