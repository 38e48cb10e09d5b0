"""
FastAPI 应用入口

功能：
1. 路由注册
2. 中间件配置（CORS、Trace ID、请求耗时）
3. 业务异常到 HTTP 状态码的映射
4. 健康检查
"""
import time
import uuid
import logging
from contextvars import ContextVar

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from rink_league.infra.db.session import check_db, dispose_engine, engine, init_db
from rink_league.services.api.routers import clubs, competitions, leagues, matches
from rink_league.services.errors import NotFoundError, ValidationError
from rink_league.shared.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.service.api.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# 上下文变量：存储 request_id，可在整个请求链路中访问
request_id_ctx: ContextVar[str] = ContextVar("request_id", default="")


def get_request_id() -> str:
    """获取当前请求的 Trace ID"""
    return request_id_ctx.get()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Roller hockey league administration API",
    docs_url="/docs" if settings.service.api.enable_docs else None,
    redoc_url="/redoc" if settings.service.api.enable_docs else None,
)


# ============ 中间件 ============

@app.middleware("http")
async def trace_id_middleware(request: Request, call_next) -> Response:
    """
    Trace ID 中间件

    功能：
    1. 为每个请求生成唯一的 request_id（或沿用客户端的 X-Request-ID）
    2. 将 request_id 存入上下文变量，供日志使用
    3. 在响应头中返回 X-Request-ID 与 X-Process-Time-Ms
    """
    request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
    token = request_id_ctx.set(request_id)
    start_time = time.time()

    try:
        logger.info(
            f"[{request_id}] Request started: {request.method} {request.url.path}",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "client_ip": request.client.host if request.client else "unknown",
            }
        )

        response = await call_next(request)

        duration_ms = int((time.time() - start_time) * 1000)
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time-Ms"] = str(duration_ms)

        logger.info(
            f"[{request_id}] Request completed: {response.status_code} in {duration_ms}ms",
            extra={
                "request_id": request_id,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            }
        )

        return response

    except Exception as e:
        duration_ms = int((time.time() - start_time) * 1000)
        logger.error(
            f"[{request_id}] Request failed: {str(e)} in {duration_ms}ms",
            extra={
                "request_id": request_id,
                "error": str(e),
                "duration_ms": duration_ms,
            },
            exc_info=True
        )
        raise

    finally:
        request_id_ctx.reset(token)


# 跨域配置
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============ 异常映射 ============

@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """存储层约束冲突（唯一键、外键、检查约束）"""
    logger.warning(f"[{get_request_id()}] Constraint violation: {exc.orig}")
    return JSONResponse(status_code=409, content={"detail": str(exc.orig)})


# ============ 路由 ============

app.include_router(competitions.router)
app.include_router(leagues.router)
app.include_router(clubs.router)
app.include_router(matches.router)


# ============ 健康检查 ============

@app.get("/health")
async def health_check():
    """健康检查端点"""
    return {
        "status": "ok",
        "version": settings.app_version,
        "service": "rink-league-api"
    }


@app.get("/ready")
async def readiness_check():
    """就绪检查端点：确认数据库可用"""
    try:
        await check_db()
        database = "ok"
    except Exception as e:
        logger.error(f"Database readiness check failed: {e}")
        database = "unavailable"

    return JSONResponse(
        status_code=200 if database == "ok" else 503,
        content={
            "status": "ready" if database == "ok" else "not_ready",
            "version": settings.app_version,
            "checks": {
                "api": "ok",
                "database": database,
            }
        },
    )


# ============ 启动事件 ============

@app.on_event("startup")
async def startup_event():
    """应用启动时的初始化（SQLite 自动建表，PostgreSQL 走 Alembic 迁移）"""
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    if engine.dialect.name == "sqlite":
        await init_db()


@app.on_event("shutdown")
async def shutdown_event():
    """应用关闭时的清理"""
    await dispose_engine()
    logger.info(f"Shutting down {settings.app_name}")


# ============ 直接运行 ============

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=settings.service.api.host,
        port=settings.service.api.port
    )
