"""
MatchService - 比赛管理

职责：
1. 单场比赛创建与按联赛查询
2. 录入比分：写入比分并强制将状态置为 completed

注意：
- 录入比分不校验原状态，重复录入直接覆盖旧比分
- 录入比分不会触发积分榜重算
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from rink_league.infra.db.models import Match, utcnow
from rink_league.infra.db.session import commit_or_rollback
from rink_league.services.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class MatchService:
    """比赛服务"""

    async def create_match(
        self,
        session: AsyncSession,
        league_id: int,
        home_team_id: int,
        away_team_id: int,
        scheduled_date: datetime
    ) -> Match:
        """创建一场 scheduled 状态的比赛"""
        match = Match(
            league_id=league_id,
            home_team_id=home_team_id,
            away_team_id=away_team_id,
            scheduled_date=scheduled_date,
            status="scheduled",
        )
        await commit_or_rollback(session, "Match creation", match)
        return match

    async def get_match(self, session: AsyncSession, match_id: int) -> Optional[Match]:
        return await session.get(Match, match_id)

    async def get_matches_by_league(
        self,
        session: AsyncSession,
        league_id: int
    ) -> List[Match]:
        """按比赛时间正序返回联赛全部比赛"""
        result = await session.execute(
            select(Match)
            .where(Match.league_id == league_id)
            .order_by(Match.scheduled_date, Match.id)
        )
        return list(result.scalars().all())

    async def update_match_score(
        self,
        session: AsyncSession,
        match_id: int,
        home_score: int,
        away_score: int
    ) -> Match:
        """
        录入比分

        Args:
            session: 数据库会话
            match_id: 比赛 ID
            home_score: 主队得分（>= 0）
            away_score: 客队得分（>= 0）

        Returns:
            更新后的比赛（status=completed）

        Raises:
            ValidationError: 比分为负
            NotFoundError: 比赛不存在
        """
        if home_score < 0 or away_score < 0:
            raise ValidationError("Scores must be non-negative")

        match = await self.get_match(session, match_id)
        if match is None:
            raise NotFoundError(f"Match with id {match_id} not found")

        previous_status = match.status
        match.home_score = home_score
        match.away_score = away_score
        match.status = "completed"
        match.updated_at = utcnow()

        await commit_or_rollback(session, "Match score update")

        logger.info(
            f"Match {match_id} scored {home_score}-{away_score} "
            f"(status {previous_status} -> completed)"
        )
        return match


# 全局单例
match_service = MatchService()
