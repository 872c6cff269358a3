"""영화 라우터 — 영화 CRUD 엔드포인트.

Movie Router — CRUD endpoints for movies.
Service results are translated to responses here: Alert values become 400s,
missing movies become 404s. Each write commits the request session once.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import require_merge_patch_content
from app.config import settings
from app.database import get_db
from app.models.movie import Movies
from app.schemas.movie import MAX_MOVIE_ID, MIN_MOVIE_ID, MovieRequest, MovieResponse
from app.services.movie_service import ENTITY_NAME, movie_service
from app.utils.exceptions import Alert, BadRequestAlertError, NotFoundError
from app.utils.headers import (
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
)

logger = logging.getLogger(__name__)

router: APIRouter = APIRouter()

# 범위 밖 ID는 DB에 닿기 전에 422 — Out-of-range ids are rejected before reaching the driver
MoviePathId = Annotated[int, Path(ge=MIN_MOVIE_ID, le=MAX_MOVIE_ID)]


@router.post("/movies", response_model=MovieResponse, status_code=status.HTTP_201_CREATED)
async def create_movie(
    data: MovieRequest,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Movies:
    """새 영화를 생성합니다.

    Create a new movie. The body must not carry an id.
    """
    logger.debug("REST request to save Movies : %s", data)
    result: Movies | Alert = await movie_service.create_movie(db, data)
    if isinstance(result, Alert):
        raise BadRequestAlertError(result)
    await db.commit()

    response.headers["Location"] = f"{settings.API_PREFIX}/movies/{result.id}"
    response.headers.update(create_entity_creation_alert(ENTITY_NAME, str(result.id)))
    return result


@router.put("/movies/{movie_id}", response_model=MovieResponse)
async def update_movie(
    movie_id: MoviePathId,
    data: MovieRequest,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Movies:
    """영화 전체를 교체합니다.

    Replace an existing movie. The body id must match the path id.
    """
    logger.debug("REST request to update Movies : %s, %s", movie_id, data)
    result: Movies | Alert = await movie_service.update_movie(db, movie_id, data)
    if isinstance(result, Alert):
        raise BadRequestAlertError(result)
    await db.commit()

    response.headers.update(create_entity_update_alert(ENTITY_NAME, str(movie_id)))
    return result


@router.patch(
    "/movies/{movie_id}",
    response_model=MovieResponse,
    dependencies=[Depends(require_merge_patch_content)],
)
async def partial_update_movie(
    movie_id: MoviePathId,
    data: MovieRequest,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Movies:
    """영화의 일부 필드를 수정합니다.

    Partially update a movie; null fields in the body are ignored.
    """
    logger.debug("REST request to partial update Movies : %s, %s", movie_id, data)
    result: Movies | Alert | None = await movie_service.partial_update_movie(db, movie_id, data)
    if isinstance(result, Alert):
        raise BadRequestAlertError(result)
    if result is None:
        raise NotFoundError("Movies not found")
    await db.commit()

    response.headers.update(create_entity_update_alert(ENTITY_NAME, str(movie_id)))
    return result


@router.get("/movies", response_model=list[MovieResponse])
async def list_movies(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[Movies]:
    """영화 목록을 조회합니다 — List all movies."""
    logger.debug("REST request to get all Movies")
    return await movie_service.list_movies(db)


@router.get("/movies/{movie_id}", response_model=MovieResponse)
async def get_movie(
    movie_id: MoviePathId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Movies:
    """영화를 조회합니다 — Retrieve a movie by id."""
    logger.debug("REST request to get Movies : %s", movie_id)
    movie: Movies | None = await movie_service.get_movie(db, movie_id)
    if movie is None:
        raise NotFoundError("Movies not found")
    return movie


@router.delete("/movies/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_movie(
    movie_id: MoviePathId,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Response:
    """영화를 삭제합니다.

    Delete a movie by id. Repeating the request still returns 204.
    """
    logger.debug("REST request to delete Movies : %s", movie_id)
    await movie_service.delete_movie(db, movie_id)
    await db.commit()
    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers=create_entity_deletion_alert(ENTITY_NAME, str(movie_id)),
    )
