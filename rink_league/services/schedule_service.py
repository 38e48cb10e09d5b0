"""
ScheduleService - 联赛赛程生成

职责：
1. 为联赛内所有已报名球队生成单循环赛程（每对球队只交手一次）
2. 按生成顺序依次间隔 7 天分配比赛时间
3. 整批比赛在一个事务中写入

注意：
- 配对顺序依赖球队顺序，统一按球队 ID 升序
- 非幂等：重复调用会追加一套新的赛程
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from rink_league.infra.db.models import League, Match, Team
from rink_league.infra.db.session import commit_or_rollback
from rink_league.services.config import schedule_config
from rink_league.services.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


@dataclass
class Fixture:
    """一场待写入的对阵"""
    home_team_id: int
    away_team_id: int
    scheduled_date: datetime


class ScheduleService:
    """
    赛程生成服务

    算法并非真正的轮次编排（无轮空处理），只是顺序枚举所有配对：
    第 k 场比赛（从 0 开始）的时间 = 基准时间 + 7*k 天
    """

    def __init__(self):
        self._config = schedule_config

    def schedule_anchor(self, now: Optional[datetime] = None) -> datetime:
        """基准时间：生成时刻归一到当天开球时间"""
        now = now or datetime.now(timezone.utc)
        return now.replace(
            hour=self._config.KICKOFF_HOUR, minute=0, second=0, microsecond=0
        )

    def build_fixtures(
        self,
        team_ids: Sequence[int],
        anchor: datetime
    ) -> List[Fixture]:
        """
        枚举单循环配对

        Args:
            team_ids: 球队 ID 列表（顺序决定主客场与日期）
            anchor: 第一场比赛时间

        Returns:
            n*(n-1)/2 场对阵，i < j 时 i 为主队
        """
        fixtures = []
        interval = timedelta(days=self._config.MATCH_INTERVAL_DAYS)

        for i in range(len(team_ids)):
            for j in range(i + 1, len(team_ids)):
                fixtures.append(Fixture(
                    home_team_id=team_ids[i],
                    away_team_id=team_ids[j],
                    scheduled_date=anchor + interval * len(fixtures),
                ))

        return fixtures

    async def generate_league_schedule(
        self,
        session: AsyncSession,
        league_id: int,
        now: Optional[datetime] = None
    ) -> List[Match]:
        """
        生成并保存联赛赛程

        Args:
            session: 数据库会话
            league_id: 联赛 ID
            now: 生成时刻（测试时可固定）

        Returns:
            新建的比赛列表（按生成顺序）

        Raises:
            NotFoundError: 联赛不存在
            ValidationError: 报名球队少于 2 支
        """
        league = await session.get(League, league_id)
        if league is None:
            raise NotFoundError(f"League with id {league_id} not found")

        result = await session.execute(
            select(Team.id)
            .where(Team.league_id == league_id)
            .order_by(Team.id)
        )
        team_ids = list(result.scalars().all())

        if len(team_ids) < self._config.MIN_TEAMS:
            logger.warning(
                f"League {league_id} has {len(team_ids)} teams, schedule not generated"
            )
            raise ValidationError(
                f"League must have at least {self._config.MIN_TEAMS} teams to generate schedule"
            )

        fixtures = self.build_fixtures(team_ids, self.schedule_anchor(now))
        matches = [
            Match(
                league_id=league_id,
                home_team_id=fixture.home_team_id,
                away_team_id=fixture.away_team_id,
                scheduled_date=fixture.scheduled_date,
                home_score=None,
                away_score=None,
                status="scheduled",
            )
            for fixture in fixtures
        ]

        # 整批写入：任何一条失败则整体回滚
        await commit_or_rollback(session, "League schedule generation", *matches)

        logger.info(
            f"Generated {len(matches)} matches for league {league_id} "
            f"({len(team_ids)} teams)"
        )
        return matches


# 全局单例
schedule_service = ScheduleService()
