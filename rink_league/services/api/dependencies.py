"""FastAPI 依赖注入：管理服务实例与数据库会话的生命周期。"""
from __future__ import annotations

from rink_league.infra.db.session import get_db
from rink_league.services.club_service import ClubService, club_service
from rink_league.services.competition_service import CompetitionService, competition_service
from rink_league.services.match_service import MatchService, match_service
from rink_league.services.player_service import PlayerService, player_service
from rink_league.services.schedule_service import ScheduleService, schedule_service
from rink_league.services.standings_service import StandingsService, standings_service

__all__ = [
    "get_db",
    "get_competition_service",
    "get_club_service",
    "get_player_service",
    "get_match_service",
    "get_schedule_service",
    "get_standings_service",
]


# 服务依赖（全局单例，无状态）
def get_competition_service() -> CompetitionService:
    return competition_service


def get_club_service() -> ClubService:
    return club_service


def get_player_service() -> PlayerService:
    return player_service


def get_match_service() -> MatchService:
    return match_service


def get_schedule_service() -> ScheduleService:
    return schedule_service


def get_standings_service() -> StandingsService:
    return standings_service
