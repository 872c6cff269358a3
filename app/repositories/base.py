"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all domain repositories.
Provides generic find, existence, save (insert-or-update) and delete
operations keyed by an integer primary key.

Usage:
    class MovieRepository(BaseRepository[Movies]):
        def __init__(self) -> None:
            super().__init__(Movies)
"""

from typing import Generic, Sequence, TypeVar

from sqlalchemy import Select, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations.
    Every method works inside the caller's session; committing is left to
    the request that owns the session.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    async def find_all(self, db: AsyncSession) -> Sequence[ModelType]:
        """모든 레코드를 조회합니다 (정렬/필터 없음).

        Retrieve every record, unordered and unfiltered.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)

        Returns:
            Sequence[ModelType]: 전체 레코드 목록 (All records)
        """
        result = await db.execute(select(self.model))
        return result.scalars().all()

    async def find_by_id(
        self,
        db: AsyncSession,
        record_id: int,
    ) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its primary key.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드의 ID (ID of the record to retrieve)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        query: Select = select(self.model).where(self.model.id == record_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def exists_by_id(self, db: AsyncSession, record_id: int) -> bool:
        """주어진 ID의 레코드가 존재하는지 확인합니다.

        Check whether a record with the given primary key exists.
        """
        query: Select = (
            select(func.count()).select_from(self.model).where(self.model.id == record_id)
        )
        count: int = (await db.execute(query)).scalar() or 0
        return count > 0

    async def count(self, db: AsyncSession) -> int:
        """전체 레코드 수를 반환합니다 — Return the total number of records."""
        query: Select = select(func.count()).select_from(self.model)
        return (await db.execute(query)).scalar() or 0

    async def save(self, db: AsyncSession, entity: ModelType) -> ModelType:
        """레코드를 저장합니다 (ID가 없으면 삽입, 있으면 갱신).

        Insert the entity when its id is None, otherwise copy its state onto
        the stored row with the same id. The returned instance is the one
        attached to the session, with its id populated.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            entity: 저장할 엔티티 (Entity to persist)

        Returns:
            ModelType: 저장된 엔티티 (The persisted entity)
        """
        if entity.id is None:
            db.add(entity)
            persisted: ModelType = entity
        else:
            # merge()는 명시적으로 설정된 속성만 복사 — merge copies only attributes set on the entity
            persisted = await db.merge(entity)

        await db.flush()
        await db.refresh(persisted)
        return persisted

    async def delete_by_id(self, db: AsyncSession, record_id: int) -> None:
        """ID로 레코드를 삭제합니다. 존재하지 않아도 오류 없음.

        Delete a record by its primary key. A missing id is not signaled.
        """
        await db.execute(
            delete(self.model)
            .where(self.model.id == record_id)
            .execution_options(synchronize_session="fetch")
        )
        await db.flush()
