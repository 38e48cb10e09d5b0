"""
服务层配置

统一管理所有服务层的配置参数，避免硬编码
"""
from dataclasses import dataclass


@dataclass
class ScheduleConfig:
    """赛程生成配置"""

    # 相邻两场比赛的间隔（天）
    MATCH_INTERVAL_DAYS: int = 7

    # 开球时间（UTC 小时），基准时间统一归一到该时刻
    KICKOFF_HOUR: int = 15

    # 生成赛程所需的最少球队数
    MIN_TEAMS: int = 2


@dataclass
class StandingsConfig:
    """积分榜配置"""

    # 积分计算
    POINTS_PER_WIN: int = 3
    POINTS_PER_DRAW: int = 1
    POINTS_PER_LOSS: int = 0


# 全局配置实例
schedule_config = ScheduleConfig()
standings_config = StandingsConfig()
