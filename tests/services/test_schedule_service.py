"""
ScheduleService 单元测试

测试覆盖：
1. 单循环配对（n*(n-1)/2，每对一次，i < j 时 i 为主队）
2. 日期间隔：第 k 场 = 基准时间 + 7k 天
3. 球队不足 / 联赛不存在
4. 非幂等：重复生成追加赛程
5. 写入失败整体回滚
"""
from datetime import datetime, timedelta, timezone
from itertools import combinations
from unittest.mock import patch

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from rink_league.infra.db.models import Match, Team
from rink_league.services.errors import NotFoundError, ValidationError
from rink_league.services.schedule_service import Fixture, ScheduleService

pytestmark = pytest.mark.asyncio


class TestBuildFixtures:
    """测试纯配对逻辑"""

    async def test_pairings_follow_nested_loop_order(self):
        service = ScheduleService()
        anchor = datetime(2026, 1, 1, 15, tzinfo=timezone.utc)

        fixtures = service.build_fixtures([10, 20, 30, 40], anchor)

        assert [(f.home_team_id, f.away_team_id) for f in fixtures] == [
            (10, 20), (10, 30), (10, 40), (20, 30), (20, 40), (30, 40),
        ]
        for k, fixture in enumerate(fixtures):
            assert fixture.scheduled_date == anchor + timedelta(days=7 * k)

    async def test_fixture_count_for_various_sizes(self):
        service = ScheduleService()
        anchor = datetime(2026, 1, 1, 15, tzinfo=timezone.utc)

        for n in range(2, 11):
            team_ids = list(range(1, n + 1))
            fixtures = service.build_fixtures(team_ids, anchor)

            assert len(fixtures) == n * (n - 1) // 2
            pairs = sorted(
                tuple(sorted((f.home_team_id, f.away_team_id))) for f in fixtures
            )
            assert pairs == sorted(combinations(team_ids, 2))

    async def test_anchor_normalized_to_kickoff(self, fixed_now):
        anchor = ScheduleService().schedule_anchor(fixed_now)

        assert anchor == datetime(2026, 10, 18, 15, 0, 0, 0, tzinfo=timezone.utc)


class TestGenerateLeagueSchedule:
    """测试 generate_league_schedule 方法"""

    async def test_four_teams_six_matches(self, db_session, make_league, fixed_now):
        """4 支球队 → 6 场比赛，每对一次，间隔 7 天"""
        league, teams = await make_league(["A", "B", "C", "D"])
        service = ScheduleService()

        matches = await service.generate_league_schedule(db_session, league.id, now=fixed_now)

        assert len(matches) == 6
        team_ids = [t.id for t in teams]
        pairs = sorted(tuple(sorted((m.home_team_id, m.away_team_id))) for m in matches)
        assert pairs == sorted(combinations(team_ids, 2))

        anchor = datetime(2026, 10, 18, 15, tzinfo=timezone.utc)
        for k, match in enumerate(matches):
            assert match.id is not None
            assert match.league_id == league.id
            assert match.status == "scheduled"
            assert match.home_score is None
            assert match.away_score is None
            assert match.scheduled_date == anchor + timedelta(days=7 * k)

    async def test_matches_are_persisted(self, db_session, make_league, fixed_now):
        league, _ = await make_league(["A", "B", "C"])

        await ScheduleService().generate_league_schedule(db_session, league.id, now=fixed_now)

        count = await db_session.scalar(
            select(func.count()).select_from(Match).where(Match.league_id == league.id)
        )
        assert count == 3

    async def test_pairing_uses_team_id_order(self, db_session, make_league, fixed_now):
        """报名顺序与 ID 顺序不同，配对仍按 ID 升序"""
        league, teams = await make_league(["A", "B", "C"], register=False)
        for team in reversed(teams):
            team.league_id = league.id
            await db_session.commit()

        matches = await ScheduleService().generate_league_schedule(db_session, league.id, now=fixed_now)

        a, b, c = (t.id for t in teams)
        assert [(m.home_team_id, m.away_team_id) for m in matches] == [(a, b), (a, c), (b, c)]

    async def test_only_registered_teams_are_scheduled(self, db_session, make_league, fixed_now):
        league, teams = await make_league(["A", "B", "C"])
        outsider = Team(name="Outsider", club_id=teams[0].club_id, league_id=None)
        db_session.add(outsider)
        await db_session.commit()

        matches = await ScheduleService().generate_league_schedule(db_session, league.id, now=fixed_now)

        involved = {m.home_team_id for m in matches} | {m.away_team_id for m in matches}
        assert outsider.id not in involved
        assert len(matches) == 3

    async def test_single_team_rejected(self, db_session, make_league):
        league, _ = await make_league(["Solo"])

        with pytest.raises(ValidationError, match="must have at least 2 teams"):
            await ScheduleService().generate_league_schedule(db_session, league.id)

        count = await db_session.scalar(select(func.count()).select_from(Match))
        assert count == 0

    async def test_empty_league_rejected(self, db_session, make_league):
        league, _ = await make_league([])

        with pytest.raises(ValidationError):
            await ScheduleService().generate_league_schedule(db_session, league.id)

    async def test_unknown_league(self, db_session):
        with pytest.raises(NotFoundError, match="League with id 999 not found"):
            await ScheduleService().generate_league_schedule(db_session, 999)

    async def test_generation_is_not_idempotent(self, db_session, make_league, fixed_now):
        """重复调用会追加第二套赛程"""
        league, _ = await make_league(["A", "B", "C", "D"])
        service = ScheduleService()

        first = await service.generate_league_schedule(db_session, league.id, now=fixed_now)
        second = await service.generate_league_schedule(db_session, league.id, now=fixed_now)

        count = await db_session.scalar(
            select(func.count()).select_from(Match).where(Match.league_id == league.id)
        )
        assert len(first) == len(second) == 6
        assert count == 12
        assert {m.id for m in first}.isdisjoint({m.id for m in second})

    async def test_failed_insert_leaves_no_matches(self, db_session, session_factory, make_league, fixed_now):
        """批量写入中途失败（最后一场主客队相同，违反检查约束）时整体回滚"""
        league, _ = await make_league(["A", "B", "C", "D"])
        league_id = league.id
        service = ScheduleService()
        real_build = service.build_fixtures

        def build_with_broken_tail(team_ids, anchor):
            fixtures = real_build(team_ids, anchor)
            fixtures.append(Fixture(team_ids[0], team_ids[0], anchor))
            return fixtures

        with patch.object(service, "build_fixtures", side_effect=build_with_broken_tail):
            with pytest.raises(IntegrityError):
                await service.generate_league_schedule(db_session, league_id, now=fixed_now)

        async with session_factory() as fresh:
            count = await fresh.scalar(
                select(func.count()).select_from(Match).where(Match.league_id == league_id)
            )
        assert count == 0

        # 会话回滚后仍可正常生成
        matches = await service.generate_league_schedule(db_session, league_id, now=fixed_now)
        assert len(matches) == 6
