"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어 및 라우터 등록.

FastAPI application entry point — Middleware and router registration.
Configures logging, CORS, health check, and the movie router.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.database import create_schema, engine
from app.middleware.axiom_logging import AxiomLoggingMiddleware
from app.models import *  # noqa: F401,F403 — register all models with metadata

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """시작 시 스키마 생성, 종료 시 커넥션 풀 정리.

    Create missing tables on startup and dispose of the pool on shutdown.
    """
    if settings.CREATE_SCHEMA:
        await create_schema()
        logger.info("Database schema ready")
    yield
    await engine.dispose()


app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Axiom API 로깅 미들웨어 — Axiom API request/response logging
# CORS보다 먼저 등록하여 모든 요청을 캡처 (Registered before CORS to capture all requests)
app.add_middleware(AxiomLoggingMiddleware)

# CORS 미들웨어 — 알림 헤더를 브라우저에 노출 (Expose alert headers to browsers)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[
        "Location",
        f"X-{settings.APP_CLIENT_NAME}-alert",
        f"X-{settings.APP_CLIENT_NAME}-error",
        f"X-{settings.APP_CLIENT_NAME}-params",
    ],
)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


from app.api.movies import router as movies_router  # noqa: E402

app.include_router(movies_router, prefix=settings.API_PREFIX, tags=["Movies"])


def run() -> None:
    """개발 서버 실행 — Serve the app with uvicorn (`movie-catalog-api` script)."""
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)


if __name__ == "__main__":
    run()
