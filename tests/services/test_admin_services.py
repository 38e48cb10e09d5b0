"""
管理类服务单元测试：赛事 / 俱乐部 / 球队报名 / 球员
"""
from datetime import datetime, timezone

import pytest
from sqlalchemy.exc import IntegrityError

from rink_league.services.club_service import ClubService
from rink_league.services.competition_service import CompetitionService
from rink_league.services.errors import NotFoundError
from rink_league.services.match_service import MatchService
from rink_league.services.player_service import PlayerService

pytestmark = pytest.mark.asyncio


class TestCompetitionService:

    async def test_update_only_given_fields(self, db_session, make_league):
        league, _ = await make_league([])
        service = CompetitionService()
        updated = await service.update_competition(
            db_session, league.competition_id, {"is_active": False}
        )

        assert updated.is_active is False
        assert updated.name == "Spring Cup"
        assert updated.updated_at is not None

    async def test_update_unknown_competition(self, db_session):
        with pytest.raises(NotFoundError):
            await CompetitionService().update_competition(db_session, 9, {"name": "x"})

    async def test_get_unknown_competition_returns_none(self, db_session):
        assert await CompetitionService().get_competition(db_session, 9) is None

    async def test_leagues_by_competition(self, db_session, make_league):
        league, _ = await make_league([])
        service = CompetitionService()
        extra = await service.create_league(
            db_session, {"name": "Division 2", "competition_id": league.competition_id, "max_teams": 6}
        )

        leagues = await service.get_leagues_by_competition(db_session, league.competition_id)

        assert [l.id for l in leagues] == [league.id, extra.id]

    async def test_duplicate_email_rejected(self, db_session):
        service = CompetitionService()
        data = {
            "email": "dup@rink.example", "password_hash": "x",
            "first_name": "A", "last_name": "B", "role": "admin",
        }
        await service.create_user(db_session, data)

        with pytest.raises(IntegrityError):
            await service.create_user(db_session, dict(data))


class TestClubService:

    async def test_register_team_moves_team_into_league(self, db_session, make_league):
        league, (team,) = await make_league(["Loose"], register=False)
        service = ClubService()

        registered = await service.register_team(db_session, team_id=team.id, league_id=league.id)

        assert registered.league_id == league.id
        assert [t.id for t in await service.get_teams_by_league(db_session, league.id)] == [team.id]

    async def test_register_unknown_league(self, db_session, make_league):
        _, (team,) = await make_league(["A"])

        with pytest.raises(NotFoundError, match="League not found"):
            await ClubService().register_team(db_session, team_id=team.id, league_id=999)

    async def test_register_unknown_team(self, db_session, make_league):
        league, _ = await make_league([])

        with pytest.raises(NotFoundError, match="Team not found"):
            await ClubService().register_team(db_session, team_id=999, league_id=league.id)

    async def test_clubs_filtered_by_manager(self, db_session, make_league):
        league, (team,) = await make_league(["A"])
        service = ClubService()
        clubs = await service.get_clubs(db_session)
        manager_id = clubs[0].manager_id

        assert [c.id for c in await service.get_clubs(db_session, manager_id=manager_id)] == [team.club_id]
        assert await service.get_clubs(db_session, manager_id=manager_id + 100) == []

    async def test_update_club(self, db_session, make_league):
        _, (team,) = await make_league(["A"])

        club = await ClubService().update_club(db_session, team.club_id, {"contact_phone": "555-0100"})

        assert club.contact_phone == "555-0100"
        assert club.name == "Rink City"


class TestPlayerService:

    def _player(self, team_id, number=9, **overrides):
        data = {
            "first_name": "Jo", "last_name": "Skater", "jersey_number": number,
            "team_id": team_id, "date_of_birth": datetime(2004, 5, 1, tzinfo=timezone.utc),
            "position": "forward",
        }
        data.update(overrides)
        return data

    async def test_duplicate_jersey_in_team_rejected(self, db_session, make_league):
        _, (team, other) = await make_league(["A", "B"])
        service = PlayerService()
        await service.create_player(db_session, self._player(team.id))
        # 不同球队可以使用同一号码
        await service.create_player(db_session, self._player(other.id))

        with pytest.raises(IntegrityError):
            await service.create_player(db_session, self._player(team.id, first_name="Al"))

    async def test_update_and_delete_player(self, db_session, make_league):
        _, (team,) = await make_league(["A"])
        service = PlayerService()
        player = await service.create_player(db_session, self._player(team.id))

        updated = await service.update_player(db_session, player.id, {"jersey_number": 12})
        assert updated.jersey_number == 12

        await service.delete_player(db_session, player.id)
        assert await service.get_players_by_team(db_session, team.id) == []

        # 删除不存在的球员不报错
        await service.delete_player(db_session, player.id)

    async def test_update_unknown_player(self, db_session):
        with pytest.raises(NotFoundError):
            await PlayerService().update_player(db_session, 5, {"position": "goalie"})

    async def test_player_stats_by_match(self, db_session, make_league):
        league, (team, other) = await make_league(["A", "B"])
        service = PlayerService()
        scorer = await service.create_player(db_session, self._player(team.id))
        match = await MatchService().create_match(
            db_session, league.id, team.id, other.id, datetime(2026, 10, 18, 15, tzinfo=timezone.utc)
        )

        stat = await service.create_player_stat(
            db_session, {"match_id": match.id, "player_id": scorer.id, "goals": 2, "assists": 1}
        )

        stats = await service.get_player_stats_by_match(db_session, match.id)
        assert [(s.id, s.goals, s.assists) for s in stats] == [(stat.id, 2, 1)]

        with pytest.raises(IntegrityError):
            await service.create_player_stat(
                db_session, {"match_id": match.id, "player_id": scorer.id, "goals": 0, "assists": 0}
            )
