"""영화 레포지토리 — movies 테이블 CRUD.

Movie Repository — CRUD for the movies table.
All operations come from BaseRepository; nothing movie-specific is needed.
"""

from app.models.movie import Movies
from app.repositories.base import BaseRepository


class MovieRepository(BaseRepository[Movies]):
    """movies 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the movies table.
    """

    def __init__(self) -> None:
        super().__init__(Movies)


# 싱글턴 인스턴스 — Singleton instance
movie_repository: MovieRepository = MovieRepository()
