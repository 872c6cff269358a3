"""영화 서비스 — 영화 CRUD 비즈니스 로직.

Movie Service — Business logic for movie CRUD operations.
Identifier checks return Alert values instead of raising; the router maps
them to HTTP responses. All checks run before anything is written.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.movie import Movies
from app.repositories.movie_repository import movie_repository
from app.schemas.movie import MovieRequest
from app.utils.exceptions import Alert

ENTITY_NAME: str = "movies"

# 부분 수정 시 병합 대상 필드 — Fields merged by a partial update
_MERGE_FIELDS: tuple[str, ...] = ("title", "description", "directed_by")


class MovieService:
    """영화 관련 비즈니스 로직을 처리하는 서비스.

    Service handling movie business logic.
    """

    def check_create(self, data: MovieRequest) -> Alert | None:
        """생성 요청의 ID 부재를 확인합니다.

        A new movie must not carry an id.
        """
        if data.id is not None:
            return Alert("A new movies cannot already have an ID", ENTITY_NAME, "idexists")
        return None

    async def check_update(
        self,
        db: AsyncSession,
        path_id: int,
        data: MovieRequest,
    ) -> Alert | None:
        """수정 요청의 ID를 검증합니다.

        Validate the identifiers of a (partial) update, in order: body id
        present, body id equal to the path id, path id stored.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            path_id: URL 경로의 영화 ID (Movie id from the URL path)
            data: 요청 본문 (Request body)

        Returns:
            Alert | None: 실패 사유 또는 None (Failure reason, or None when valid)
        """
        if data.id is None:
            return Alert("Invalid id", ENTITY_NAME, "idnull")
        if data.id != path_id:
            return Alert("Invalid ID", ENTITY_NAME, "idinvalid")
        if not await movie_repository.exists_by_id(db, path_id):
            return Alert("Entity not found", ENTITY_NAME, "idnotfound")
        return None

    async def list_movies(self, db: AsyncSession) -> list[Movies]:
        """모든 영화를 조회합니다 — List every movie."""
        return list(await movie_repository.find_all(db))

    async def get_movie(self, db: AsyncSession, movie_id: int) -> Movies | None:
        """영화를 조회합니다 — Retrieve a movie by id."""
        return await movie_repository.find_by_id(db, movie_id)

    async def create_movie(
        self,
        db: AsyncSession,
        data: MovieRequest,
    ) -> Movies | Alert:
        """새 영화를 생성합니다.

        Create a new movie.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 영화 생성 데이터 (Movie creation data)

        Returns:
            Movies | Alert: 저장된 영화 또는 실패 사유 (Persisted movie, or the idexists alert)
        """
        alert: Alert | None = self.check_create(data)
        if alert is not None:
            return alert

        movie = Movies(
            title=data.title,
            description=data.description,
            directed_by=data.directed_by,
        )
        return await movie_repository.save(db, movie)

    async def update_movie(
        self,
        db: AsyncSession,
        path_id: int,
        data: MovieRequest,
    ) -> Movies | Alert:
        """영화 전체를 교체합니다.

        Replace every field of a stored movie. Null fields in the body
        overwrite stored values.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            path_id: URL 경로의 영화 ID (Movie id from the URL path)
            data: 교체 데이터 (Replacement data)

        Returns:
            Movies | Alert: 저장된 영화 또는 실패 사유 (Persisted movie, or an alert)
        """
        alert: Alert | None = await self.check_update(db, path_id, data)
        if alert is not None:
            return alert

        movie = Movies(
            id=data.id,
            title=data.title,
            description=data.description,
            directed_by=data.directed_by,
        )
        return await movie_repository.save(db, movie)

    async def partial_update_movie(
        self,
        db: AsyncSession,
        path_id: int,
        data: MovieRequest,
    ) -> Movies | Alert | None:
        """영화의 일부 필드를 수정합니다 (null 필드는 무시).

        Merge the non-null fields of the body into the stored movie. A null
        field leaves the stored value unchanged; a field cannot be cleared
        this way.

        The row is fetched again after the existence check; if it vanished
        in between, None is returned.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            path_id: URL 경로의 영화 ID (Movie id from the URL path)
            data: 부분 수정 데이터 (Sparse update data)

        Returns:
            Movies | Alert | None: 병합된 영화, 실패 사유, 또는 None (사라진 경우)
                                   (Merged movie, an alert, or None if the row vanished)
        """
        alert: Alert | None = await self.check_update(db, path_id, data)
        if alert is not None:
            return alert

        existing: Movies | None = await movie_repository.find_by_id(db, path_id)
        if existing is None:
            return None

        for field in _MERGE_FIELDS:
            value: str | None = getattr(data, field)
            if value is not None:
                setattr(existing, field, value)

        return await movie_repository.save(db, existing)

    async def delete_movie(self, db: AsyncSession, movie_id: int) -> None:
        """영화를 삭제합니다 (존재 확인 없음).

        Delete a movie by id. Deleting an absent id is not an error.
        """
        await movie_repository.delete_by_id(db, movie_id)


# 싱글턴 인스턴스 — Singleton instance
movie_service: MovieService = MovieService()
