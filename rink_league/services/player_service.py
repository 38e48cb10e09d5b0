"""
PlayerService - 球员与球员单场数据
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from rink_league.infra.db.models import Player, PlayerStat, utcnow
from rink_league.infra.db.session import commit_or_rollback
from rink_league.services.errors import NotFoundError

logger = logging.getLogger(__name__)


class PlayerService:

    # ==================== 球员 ====================

    async def create_player(self, session: AsyncSession, data: Dict[str, Any]) -> Player:
        """同队球衣号重复时由数据库唯一约束拒绝（IntegrityError）"""
        player = Player(**data)
        session.add(player)
        await commit_or_rollback(session, "Player creation")
        return player

    async def get_players_by_team(self, session: AsyncSession, team_id: int) -> List[Player]:
        result = await session.execute(
            select(Player).where(Player.team_id == team_id).order_by(Player.id)
        )
        return list(result.scalars().all())

    async def update_player(
        self,
        session: AsyncSession,
        player_id: int,
        changes: Dict[str, Any]
    ) -> Player:
        player = await session.get(Player, player_id)
        if player is None:
            raise NotFoundError(f"Player with id {player_id} not found")

        for field, value in changes.items():
            setattr(player, field, value)
        player.updated_at = utcnow()

        await commit_or_rollback(session, "Player update")
        return player

    async def delete_player(self, session: AsyncSession, player_id: int) -> None:
        """删除不存在的球员不报错"""
        await session.execute(delete(Player).where(Player.id == player_id))
        await commit_or_rollback(session, "Player deletion")
        logger.info(f"Player {player_id} deleted")

    # ==================== 单场数据 ====================

    async def create_player_stat(self, session: AsyncSession, data: Dict[str, Any]) -> PlayerStat:
        stat = PlayerStat(**data)
        session.add(stat)
        await commit_or_rollback(session, "Player stat creation")
        return stat

    async def get_player_stats_by_match(self, session: AsyncSession, match_id: int) -> List[PlayerStat]:
        result = await session.execute(
            select(PlayerStat).where(PlayerStat.match_id == match_id).order_by(PlayerStat.id)
        )
        return list(result.scalars().all())


# 全局单例
player_service = PlayerService()
