"""
StandingsService - 联赛积分榜

职责：
1. 基于已完赛比赛（status=completed）计算每支球队的胜平负、进失球、积分
2. 整表替换：删除联赛旧积分榜后批量写入新结果（同一事务）
3. 读取时按 积分 desc、净胜球 desc 排序

注意：
- 积分榜是可随时重算的派生数据，不做增量更新
- 录入比分后不会自动重算，由调用方显式调用 update_league_standings
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, asdict
from typing import Iterable, List, Sequence

from sqlalchemy import delete, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from rink_league.infra.db.models import League, LeagueStanding, Match, Team
from rink_league.infra.db.session import commit_or_rollback
from rink_league.services.config import standings_config
from rink_league.services.errors import NotFoundError

logger = logging.getLogger(__name__)


# ==================== 数据类定义 ====================

@dataclass
class TeamStandingStats:
    """单支球队的积分榜统计"""
    league_id: int
    team_id: int
    games_played: int = 0
    wins: int = 0
    losses: int = 0
    draws: int = 0
    goals_for: int = 0
    goals_against: int = 0
    points: int = 0

    @property
    def goal_difference(self) -> int:
        return self.goals_for - self.goals_against

    def to_dict(self) -> dict:
        return asdict(self)


# ==================== StandingsService ====================

class StandingsService:
    """
    积分榜服务

    - compute_standings: 纯计算，不访问数据库
    - update_league_standings: 重算并整表替换
    - get_league_standings: 排序读取
    """

    def __init__(self):
        self._config = standings_config

    def compute_standings(
        self,
        league_id: int,
        team_ids: Sequence[int],
        matches: Iterable[Match]
    ) -> List[TeamStandingStats]:
        """
        计算积分榜

        Args:
            league_id: 联赛 ID
            team_ids: 联赛内球队 ID（每支球队都会有一行，即使没有比赛）
            matches: 联赛比赛，非 completed 状态的比赛忽略；completed 比赛的比分必须非空

        Returns:
            与 team_ids 顺序一致的统计列表
        """
        completed = [m for m in matches if m.status == "completed"]
        standings = []

        for team_id in team_ids:
            stats = TeamStandingStats(league_id=league_id, team_id=team_id)

            for match in completed:
                if match.home_team_id == team_id:
                    gf = match.home_score
                    ga = match.away_score
                elif match.away_team_id == team_id:
                    gf = match.away_score
                    ga = match.home_score
                else:
                    continue

                stats.games_played += 1
                stats.goals_for += gf
                stats.goals_against += ga

                # 判断胜负
                if gf > ga:
                    stats.wins += 1
                elif gf < ga:
                    stats.losses += 1
                else:
                    stats.draws += 1

            stats.points = (
                stats.wins * self._config.POINTS_PER_WIN
                + stats.draws * self._config.POINTS_PER_DRAW
                + stats.losses * self._config.POINTS_PER_LOSS
            )
            standings.append(stats)

        return standings

    async def update_league_standings(
        self,
        session: AsyncSession,
        league_id: int
    ) -> List[LeagueStanding]:
        """
        重算并保存联赛积分榜

        Args:
            session: 数据库会话
            league_id: 联赛 ID

        Returns:
            新写入的积分榜记录（不保证顺序）

        Raises:
            NotFoundError: 联赛不存在
        """
        league = await session.get(League, league_id)
        if league is None:
            raise NotFoundError(f"League with id {league_id} not found")

        result = await session.execute(
            select(Match).where(
                Match.league_id == league_id,
                Match.status == "completed"
            )
        )
        completed_matches = list(result.scalars().all())

        result = await session.execute(
            select(Team.id)
            .where(Team.league_id == league_id)
            .order_by(Team.id)
        )
        team_ids = list(result.scalars().all())

        standings = self.compute_standings(league_id, team_ids, completed_matches)

        # 删除与写入在同一事务内提交
        await session.execute(
            delete(LeagueStanding).where(LeagueStanding.league_id == league_id)
        )
        await commit_or_rollback(
            session,
            "Update league standings",
            *[LeagueStanding(**stats.to_dict()) for stats in standings],
        )

        logger.info(
            f"Standings recomputed for league {league_id}: "
            f"{len(standings)} teams, {len(completed_matches)} completed matches"
        )

        result = await session.execute(
            select(LeagueStanding).where(LeagueStanding.league_id == league_id)
        )
        return list(result.scalars().all())

    async def get_league_standings(
        self,
        session: AsyncSession,
        league_id: int
    ) -> List[LeagueStanding]:
        """
        读取联赛积分榜

        排序：积分 desc，净胜球 desc；再相同时按记录 ID，不做相互战绩等附加比较
        """
        result = await session.execute(
            select(LeagueStanding)
            .where(LeagueStanding.league_id == league_id)
            .order_by(
                desc(LeagueStanding.points),
                desc(LeagueStanding.goals_for - LeagueStanding.goals_against),
                LeagueStanding.id,
            )
        )
        return list(result.scalars().all())


# 全局单例
standings_service = StandingsService()
