"""영화 Pydantic 요청/응답 스키마 정의.

Movie Pydantic request/response schema definitions.
Field names travel as camelCase on the wire (directedBy); the snake_case
names are accepted on input as well.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# 64비트 부호 있는 정수 범위 — Signed 64-bit range of the id column
MIN_MOVIE_ID: int = -(2**63)
MAX_MOVIE_ID: int = 2**63 - 1

MovieId = Annotated[int, Field(ge=MIN_MOVIE_ID, le=MAX_MOVIE_ID)]


class MovieBase(BaseModel):
    """영화 공통 필드.

    Shared movie fields. Every field is optional; a missing field and an
    explicit null are treated the same.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: MovieId | None = None  # 영화 ID — 생성 요청에서는 비어 있어야 함 (Must be absent on create)
    title: str | None = None
    description: str | None = None
    directed_by: str | None = None  # 감독 (Director, wire name "directedBy")


class MovieRequest(MovieBase):
    """영화 생성/수정 요청 스키마.

    Movie create/update request body. For PATCH only non-null fields are
    applied to the stored record.
    """


class MovieResponse(MovieBase):
    """영화 응답 스키마 — Movie response schema."""

    id: int
