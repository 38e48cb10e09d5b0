"""
Pytest 配置文件

提供测试固件和通用配置：
1. 内存 SQLite 数据库（每个测试独立建表）
2. 数据库会话
3. HTTP 客户端固件（覆盖 get_db）
4. 联赛测试数据构造
"""
import itertools
import os
from datetime import datetime, timezone
from typing import AsyncGenerator, List, Sequence, Tuple

# 设置测试环境（须在导入 rink_league 之前）
os.environ.setdefault("RINK_LEAGUE_ENVIRONMENT", "test")
os.environ.setdefault("RINK_LEAGUE_DATABASE_URL", "sqlite:///:memory:")

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import sessionmaker

from rink_league.infra.db.models import Club, Competition, League, Team, User
from rink_league.infra.db.session import build_engine, get_db, init_db

_seq = itertools.count(1)


# ============ 数据库相关 ============

@pytest_asyncio.fixture
async def db_engine():
    """每个测试一个全新的内存数据库（与运行时相同的引擎配置，含外键校验）"""
    engine = build_engine("sqlite+aiosqlite:///:memory:")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine):
    return sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


# ============ HTTP 客户端 ============

@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator:
    """
    FastAPI 测试客户端

    使用 httpx.AsyncClient + ASGITransport，数据库会话指向测试库
    """
    from httpx import AsyncClient, ASGITransport
    from rink_league.services.api.main import app

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


# ============ 测试数据 ============

@pytest.fixture
def make_league(db_session):
    """
    构造 用户 → 赛事 → 联赛 + 俱乐部 → 球队

    返回协程函数：await make_league(team_names) -> (league, teams)
    """
    async def _make(
        team_names: Sequence[str] = ("A", "B", "C", "D"),
        register: bool = True,
        max_teams: int = 8,
    ) -> Tuple[League, List[Team]]:
        organizer = User(
            email=f"organizer{next(_seq)}@rink.example",
            password_hash="x",
            first_name="Org",
            last_name="Anizer",
            role="competition_organizer",
        )
        db_session.add(organizer)
        await db_session.flush()

        competition = Competition(
            name="Spring Cup",
            start_date=datetime(2026, 3, 1, tzinfo=timezone.utc),
            end_date=datetime(2026, 6, 30, tzinfo=timezone.utc),
            organizer_id=organizer.id,
        )
        db_session.add(competition)
        await db_session.flush()

        league = League(name="Division 1", competition_id=competition.id, max_teams=max_teams)
        club = Club(name="Rink City", contact_email="club@rink.example", manager_id=organizer.id)
        db_session.add_all([league, club])
        await db_session.flush()

        teams = [
            Team(name=name, club_id=club.id, league_id=league.id if register else None)
            for name in team_names
        ]
        db_session.add_all(teams)
        await db_session.commit()
        return league, teams

    return _make


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 10, 18, 9, 30, 12, 345000, tzinfo=timezone.utc)
