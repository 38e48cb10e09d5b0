"""全局配置加载与强类型定义。
该模块负责读取 config/ 目录下的 YAML 文件，并映射为 Pydantic 模型。
"""
from __future__ import annotations

import functools
import pathlib
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# 定位到项目根目录
BASE_DIR = pathlib.Path(__file__).resolve().parents[2]
CONFIG_DIR = BASE_DIR / "config"

def _load_yaml(filename: str) -> Dict[str, Any]:
    """辅助函数：安全加载 YAML 文件"""
    path = CONFIG_DIR / filename
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

# --- 1. DB Config Model ---
class DbConnection(BaseModel):
    host: str = "localhost"
    port: int = 5432
    user: str = "postgres"
    password: str = "postgres"
    database: str = "rink_league"
    pool_size: int = 20
    max_overflow: int = 10
    pool_timeout: int = 30
    pool_recycle: int = 1800

class DbConfig(BaseModel):
    default: DbConnection = Field(default_factory=DbConnection)

# --- 2. Service Config Model ---
class ApiConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 2022
    log_level: str = "INFO"
    enable_docs: bool = True

class ServiceConfig(BaseModel):
    api: ApiConfig = Field(default_factory=ApiConfig)

# --- 全局 Settings 聚合 ---
class Settings(BaseSettings):
    app_name: str = "Rink League"
    app_version: str = "0.1.0"
    environment: str = "dev"

    # 直接给出连接串时优先于 db.yaml（测试、本地 SQLite）
    database_url: Optional[str] = None

    db: DbConfig = Field(default_factory=lambda: DbConfig(**_load_yaml("db.yaml")))
    service: ServiceConfig = Field(default_factory=lambda: ServiceConfig(**_load_yaml("service.yaml")))

    model_config = SettingsConfigDict(env_prefix="RINK_LEAGUE_")

@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """获取全局单例配置。"""
    return Settings()
