"""영화 SQLAlchemy ORM 모델 정의.

Movie SQLAlchemy ORM model definition.

Tables:
    - movies: 영화 레코드 (Movie records)
"""

from sqlalchemy import BigInteger, Integer, Sequence, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

# SQLite는 INTEGER PRIMARY KEY만 자동 증가 — SQLite only autoincrements INTEGER PKs
_ID_TYPE = BigInteger().with_variant(Integer(), "sqlite")


class Movies(Base):
    """영화 모델.

    Movie model. Equality is identity-based: two instances are equal only when
    both carry the same non-null id. The hash is constant per class so an
    instance keeps its hash when the store assigns its id.

    Attributes:
        id: 고유 식별자, 저장 시 시퀀스로 할당 (Identifier assigned from a sequence on first save)
        title: 제목 (Title)
        description: 설명 (Description)
        directed_by: 감독 (Director)
    """

    __tablename__ = "movies"

    id: Mapped[int | None] = mapped_column(
        _ID_TYPE, Sequence("sequence_generator"), primary_key=True
    )
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(String(255), nullable=True)
    directed_by: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Movies):
            return NotImplemented
        return self.id is not None and self.id == other.id

    def __hash__(self) -> int:
        return hash(Movies)

    def __repr__(self) -> str:
        return (
            f"Movies{{id={self.id}, title='{self.title}', "
            f"description='{self.description}', directedBy='{self.directed_by}'}}"
        )
