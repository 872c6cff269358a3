"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata before the schema is created.

Modules:
    movie: 영화 (Movies)
"""

from app.models.movie import Movies

__all__ = ["Movies"]
