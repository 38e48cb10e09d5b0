"""数据库实体定义：联赛管理 (用户 + 赛事 + 俱乐部 + 比赛 + 积分榜)。"""
from datetime import datetime, timezone

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()

USER_ROLES = ("admin", "competition_organizer", "club_manager")
MATCH_STATUSES = ("scheduled", "in_progress", "completed", "cancelled")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ===========================
# 1. 用户域 (User Domain)
# ===========================
class User(Base):
    """用户表：角色由客户端选择，服务端不做鉴权"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String, nullable=False, unique=True)
    password_hash = Column(String, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    role = Column(Enum(*USER_ROLES, name="user_role"), nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)


# ===========================
# 2. 赛事域 (Competition Domain)
# ===========================
class Competition(Base):
    __tablename__ = "competitions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True), nullable=False)
    organizer_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)

    organizer = relationship("User")
    leagues = relationship("League", back_populates="competition")

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)


class League(Base):
    __tablename__ = "leagues"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    competition_id = Column(Integer, ForeignKey("competitions.id"), nullable=False, index=True)
    max_teams = Column(Integer, nullable=False)

    competition = relationship("Competition", back_populates="leagues")
    teams = relationship("Team", back_populates="league")

    __table_args__ = (
        CheckConstraint('max_teams > 0', name='check_max_teams_positive'),
    )

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)


# ===========================
# 3. 俱乐部域 (Club Domain)
# ===========================
class Club(Base):
    __tablename__ = "clubs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    contact_email = Column(String, nullable=False)
    contact_phone = Column(String, nullable=True)
    manager_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    manager = relationship("User")
    teams = relationship("Team", back_populates="club")

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)


class Team(Base):
    """球队表：league_id 为空表示尚未报名任何联赛"""
    __tablename__ = "teams"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    club_id = Column(Integer, ForeignKey("clubs.id"), nullable=False, index=True)
    league_id = Column(Integer, ForeignKey("leagues.id"), nullable=True, index=True)

    club = relationship("Club", back_populates="teams")
    league = relationship("League", back_populates="teams")

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)


class Player(Base):
    __tablename__ = "players"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    jersey_number = Column(Integer, nullable=False)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)
    date_of_birth = Column(DateTime(timezone=True), nullable=False)
    position = Column(String, nullable=True)

    team = relationship("Team")

    # 同一球队内球衣号唯一
    __table_args__ = (
        UniqueConstraint('team_id', 'jersey_number', name='uq_player_team_jersey'),
        CheckConstraint('jersey_number > 0', name='check_jersey_positive'),
    )

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)


# ===========================
# 4. 比赛域 (Match Domain)
# ===========================
class Match(Base):
    __tablename__ = "matches"

    id = Column(Integer, primary_key=True, autoincrement=True)
    league_id = Column(Integer, ForeignKey("leagues.id"), nullable=False, index=True)
    home_team_id = Column(Integer, ForeignKey("teams.id"), nullable=False)
    away_team_id = Column(Integer, ForeignKey("teams.id"), nullable=False)
    scheduled_date = Column(DateTime(timezone=True), nullable=False)

    # 比分：仅在录入比分后（status=completed）非空
    home_score = Column(Integer, nullable=True)
    away_score = Column(Integer, nullable=True)
    status = Column(
        Enum(*MATCH_STATUSES, name="match_status"),
        nullable=False,
        default="scheduled",
        server_default="scheduled",
    )

    home_team = relationship("Team", foreign_keys=[home_team_id])
    away_team = relationship("Team", foreign_keys=[away_team_id])
    league = relationship("League")

    __table_args__ = (
        CheckConstraint('home_score >= 0', name='check_home_pos'),
        CheckConstraint('away_score >= 0', name='check_away_pos'),
        CheckConstraint('home_team_id != away_team_id', name='check_diff_teams'),
        {"sqlite_autoincrement": True},
    )

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)


class PlayerStat(Base):
    """球员单场数据"""
    __tablename__ = "player_stats"

    id = Column(Integer, primary_key=True, autoincrement=True)
    match_id = Column(Integer, ForeignKey("matches.id"), nullable=False, index=True)
    player_id = Column(Integer, ForeignKey("players.id"), nullable=False, index=True)
    goals = Column(Integer, nullable=False, default=0)
    assists = Column(Integer, nullable=False, default=0)

    match = relationship("Match")
    player = relationship("Player")

    __table_args__ = (
        UniqueConstraint('match_id', 'player_id', name='uq_player_stat_match_player'),
        CheckConstraint('goals >= 0', name='check_goals_positive'),
        CheckConstraint('assists >= 0', name='check_assists_positive'),
    )

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)


class LeagueStanding(Base):
    """积分榜表：完全由已完赛比赛推导，每次重算整体替换"""
    __tablename__ = "league_standings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    league_id = Column(Integer, ForeignKey("leagues.id"), nullable=False, index=True)
    team_id = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)

    games_played = Column(Integer, nullable=False, default=0)
    wins = Column(Integer, nullable=False, default=0)
    losses = Column(Integer, nullable=False, default=0)
    draws = Column(Integer, nullable=False, default=0)

    # 进球数据
    goals_for = Column(Integer, nullable=False, default=0)
    goals_against = Column(Integer, nullable=False, default=0)

    # 积分
    points = Column(Integer, nullable=False, default=0)

    team = relationship("Team")
    league = relationship("League")

    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        UniqueConstraint('league_id', 'team_id', name='uq_standing_league_team'),
        CheckConstraint('points >= 0', name='check_points_positive'),
        CheckConstraint('games_played >= 0', name='check_games_positive'),
        CheckConstraint('wins >= 0', name='check_wins_positive'),
        CheckConstraint('losses >= 0', name='check_losses_positive'),
        CheckConstraint('draws >= 0', name='check_draws_positive'),
        CheckConstraint('goals_for >= 0', name='check_goals_for_positive'),
        CheckConstraint('goals_against >= 0', name='check_goals_against_positive'),
        # 整表删除后重建，ID 不复用
        {"sqlite_autoincrement": True},
    )
