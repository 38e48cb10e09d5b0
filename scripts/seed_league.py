"""
演示数据播种脚本

作用：在独立的数据库中创建一个轮滑球联赛（4 支球队），生成单循环赛程，
录入前两场比分并重算积分榜，最后打印积分榜。

用法：
    RINK_LEAGUE_DATABASE_URL=sqlite:///./rink_league_demo.db python scripts/seed_league.py
"""
import asyncio
import os
import sys
from datetime import datetime, timezone

# 将项目根目录加入 Python 路径
sys.path.append(os.getcwd())

from loguru import logger
from sqlalchemy import select

from rink_league.infra.db.models import Club, Competition, League, Team, User
from rink_league.infra.db.session import dispose_engine, get_async_session, init_db
from rink_league.services.match_service import match_service
from rink_league.services.schedule_service import schedule_service
from rink_league.services.standings_service import standings_service

DEMO_LEAGUE = "Rink Premier Division"
DEMO_TEAMS = ["Falcons", "Wolves", "Sharks", "Vipers"]
DEMO_SCORES = [(3, 1), (2, 2)]


async def seed_data():
    await init_db()

    async with get_async_session() as db:
        # --- 1. 检查是否已存在数据 (防止重复生成赛程) ---
        result = await db.execute(select(League).where(League.name == DEMO_LEAGUE))
        if result.scalars().first():
            logger.warning(f"League '{DEMO_LEAGUE}' already exists, seeding skipped")
            return

        # --- 2. 基础数据：用户 / 赛事 / 联赛 / 俱乐部 ---
        logger.info("Creating organizer, competition, league and club...")
        organizer = User(
            email="organizer@rink.example",
            password_hash="demo",
            first_name="Olga",
            last_name="Organizer",
            role="competition_organizer",
        )
        db.add(organizer)
        await db.flush()

        competition = Competition(
            name="Spring Cup",
            description="Demo roller hockey season",
            start_date=datetime(2026, 3, 1, tzinfo=timezone.utc),
            end_date=datetime(2026, 6, 30, tzinfo=timezone.utc),
            organizer_id=organizer.id,
        )
        db.add(competition)
        await db.flush()

        league = League(name=DEMO_LEAGUE, competition_id=competition.id, max_teams=8)
        club = Club(
            name="Rink City Club",
            contact_email="club@rink.example",
            manager_id=organizer.id,
        )
        db.add_all([league, club])
        await db.flush()

        # --- 3. 球队：全部报名该联赛 ---
        logger.info(f"Creating {len(DEMO_TEAMS)} teams...")
        db.add_all([
            Team(name=name, club_id=club.id, league_id=league.id)
            for name in DEMO_TEAMS
        ])
        await db.commit()

        # --- 4. 赛程 / 比分 / 积分榜 ---
        matches = await schedule_service.generate_league_schedule(db, league.id)
        for match in matches:
            logger.info(
                f"  match {match.id}: {match.home_team_id} vs {match.away_team_id} "
                f"@ {match.scheduled_date:%Y-%m-%d %H:%M}"
            )

        for match, (home, away) in zip(matches, DEMO_SCORES):
            await match_service.update_match_score(db, match.id, home, away)

        await standings_service.update_league_standings(db, league.id)
        table = await standings_service.get_league_standings(db, league.id)

        logger.info("Standings:")
        for position, row in enumerate(table, start=1):
            logger.info(
                f"  {position}. team {row.team_id}  GP {row.games_played}  "
                f"W {row.wins} D {row.draws} L {row.losses}  "
                f"GF {row.goals_for} GA {row.goals_against}  PTS {row.points}"
            )


async def main():
    try:
        await seed_data()
    finally:
        await dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
