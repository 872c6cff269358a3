"""테스트 인프라 — 임시 SQLite 파일 DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — Temporary SQLite file DB, session, and httpx client fixtures.
Each test gets a fresh database; the schema is created from the ORM metadata.
The app opens its own session per request, and stored state is read back
through new sessions, so only committed writes are observed.
"""

import os

# app 임포트 전에 설정 — Must be set before the app modules read settings
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("CREATE_SCHEMA", "false")

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.database import Base, get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.models import *  # noqa: F401,F403,E402 — register all models with metadata
from app.models.movie import Movies  # noqa: E402
from app.repositories.movie_repository import movie_repository  # noqa: E402

URL = "/api/movies"

DEFAULT_TITLE = "AAAAAAAAAA"
UPDATED_TITLE = "BBBBBBBBBB"
DEFAULT_DESCRIPTION = "AAAAAAAAAA"
UPDATED_DESCRIPTION = "BBBBBBBBBB"
DEFAULT_DIRECTED_BY = "AAAAAAAAAA"
UPDATED_DIRECTED_BY = "BBBBBBBBBB"

# 64비트 최대값 — Largest id a client can send
MAX_ID = 9223372036854775807


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 테스트마다 새 파일 DB와 스키마를 생성합니다.

    A file database gives every session its own connection, so writes that
    were never committed stay invisible to other sessions.
    """
    eng = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'movies.db'}")
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """테스트 데이터 준비용 DB 세션을 제공합니다."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — 요청마다 새 세션을 엽니다 (커밋하지 않은 쓰기는 롤백)."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def movie(db: AsyncSession) -> Movies:
    """기본 값으로 영화를 저장합니다."""
    m = Movies(
        title=DEFAULT_TITLE,
        description=DEFAULT_DESCRIPTION,
        directed_by=DEFAULT_DIRECTED_BY,
    )
    db.add(m)
    await db.commit()
    await db.refresh(m)
    # 읽기 트랜잭션 종료 — Release the connection before the app writes
    await db.commit()
    return m


async def count_movies(factory: async_sessionmaker[AsyncSession]) -> int:
    """새 세션으로 저장된 영화 수를 셉니다."""
    async with factory() as session:
        return await movie_repository.count(session)


async def load_movie(
    factory: async_sessionmaker[AsyncSession], movie_id: int
) -> Movies | None:
    """새 세션으로 저장된 영화를 읽습니다."""
    async with factory() as session:
        return await movie_repository.find_by_id(session, movie_id)
