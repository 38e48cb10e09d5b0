"""initial_league_schema

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-18 10:12:41.208731

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f0a9d2b7e'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

user_role = sa.Enum('admin', 'competition_organizer', 'club_manager', name='user_role')
match_status = sa.Enum('scheduled', 'in_progress', 'completed', 'cancelled', name='match_status')


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    """Upgrade schema: 创建联赛管理全部数据表。"""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('email', sa.String(), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=False),
        sa.Column('role', user_role, nullable=False),
        *_timestamps(),
    )

    op.create_table(
        'competitions',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('start_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('organizer_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )

    op.create_table(
        'leagues',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('competition_id', sa.Integer(), sa.ForeignKey('competitions.id'), nullable=False, index=True),
        sa.Column('max_teams', sa.Integer(), nullable=False),
        sa.CheckConstraint('max_teams > 0', name='check_max_teams_positive'),
        *_timestamps(),
    )

    op.create_table(
        'clubs',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('contact_email', sa.String(), nullable=False),
        sa.Column('contact_phone', sa.String(), nullable=True),
        sa.Column('manager_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False, index=True),
        *_timestamps(),
    )

    op.create_table(
        'teams',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('club_id', sa.Integer(), sa.ForeignKey('clubs.id'), nullable=False, index=True),
        sa.Column('league_id', sa.Integer(), sa.ForeignKey('leagues.id'), nullable=True, index=True),
        *_timestamps(),
    )

    op.create_table(
        'players',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=False),
        sa.Column('jersey_number', sa.Integer(), nullable=False),
        sa.Column('team_id', sa.Integer(), sa.ForeignKey('teams.id'), nullable=False, index=True),
        sa.Column('date_of_birth', sa.DateTime(timezone=True), nullable=False),
        sa.Column('position', sa.String(), nullable=True),
        sa.UniqueConstraint('team_id', 'jersey_number', name='uq_player_team_jersey'),
        sa.CheckConstraint('jersey_number > 0', name='check_jersey_positive'),
        *_timestamps(),
    )

    op.create_table(
        'matches',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('league_id', sa.Integer(), sa.ForeignKey('leagues.id'), nullable=False, index=True),
        sa.Column('home_team_id', sa.Integer(), sa.ForeignKey('teams.id'), nullable=False),
        sa.Column('away_team_id', sa.Integer(), sa.ForeignKey('teams.id'), nullable=False),
        sa.Column('scheduled_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('home_score', sa.Integer(), nullable=True),
        sa.Column('away_score', sa.Integer(), nullable=True),
        sa.Column('status', match_status, nullable=False, server_default='scheduled'),
        sa.CheckConstraint('home_score >= 0', name='check_home_pos'),
        sa.CheckConstraint('away_score >= 0', name='check_away_pos'),
        sa.CheckConstraint('home_team_id != away_team_id', name='check_diff_teams'),
        *_timestamps(),
    )

    op.create_table(
        'player_stats',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('match_id', sa.Integer(), sa.ForeignKey('matches.id'), nullable=False, index=True),
        sa.Column('player_id', sa.Integer(), sa.ForeignKey('players.id'), nullable=False, index=True),
        sa.Column('goals', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('assists', sa.Integer(), nullable=False, server_default='0'),
        sa.UniqueConstraint('match_id', 'player_id', name='uq_player_stat_match_player'),
        sa.CheckConstraint('goals >= 0', name='check_goals_positive'),
        sa.CheckConstraint('assists >= 0', name='check_assists_positive'),
        *_timestamps(),
    )

    op.create_table(
        'league_standings',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('league_id', sa.Integer(), sa.ForeignKey('leagues.id'), nullable=False, index=True),
        sa.Column('team_id', sa.Integer(), sa.ForeignKey('teams.id'), nullable=False, index=True),
        sa.Column('games_played', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('wins', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('losses', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('draws', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('goals_for', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('goals_against', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('points', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint('league_id', 'team_id', name='uq_standing_league_team'),
        sa.CheckConstraint('points >= 0', name='check_points_positive'),
        sa.CheckConstraint('games_played >= 0', name='check_games_positive'),
        sa.CheckConstraint('wins >= 0', name='check_wins_positive'),
        sa.CheckConstraint('losses >= 0', name='check_losses_positive'),
        sa.CheckConstraint('draws >= 0', name='check_draws_positive'),
        sa.CheckConstraint('goals_for >= 0', name='check_goals_for_positive'),
        sa.CheckConstraint('goals_against >= 0', name='check_goals_against_positive'),
    )


def downgrade() -> None:
    """Downgrade schema: 按依赖逆序删除数据表与枚举类型。"""
    for table in (
        'league_standings',
        'player_stats',
        'matches',
        'players',
        'teams',
        'clubs',
        'leagues',
        'competitions',
        'users',
    ):
        op.drop_table(table)

    match_status.drop(op.get_bind(), checkfirst=True)
    user_role.drop(op.get_bind(), checkfirst=True)
