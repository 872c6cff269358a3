"""API 공통 의존성 — 요청 본문 Content-Type 검증.

Shared API dependencies — Request content type checks.
"""

from fastapi import Request

from app.utils.exceptions import UnsupportedMediaTypeError

# PATCH가 받는 미디어 타입 — Media types accepted by merge-patch endpoints
MERGE_PATCH_MEDIA_TYPES: frozenset[str] = frozenset(
    {"application/json", "application/merge-patch+json"}
)


async def require_merge_patch_content(request: Request) -> None:
    """요청 Content-Type이 JSON 또는 merge-patch JSON인지 확인합니다.

    Reject a request whose content type is neither application/json nor
    application/merge-patch+json. Parameters such as charset are ignored.

    Raises:
        UnsupportedMediaTypeError: 허용되지 않은 타입일 때 (Unsupported content type)
    """
    content_type: str = request.headers.get("content-type", "")
    media_type: str = content_type.split(";", 1)[0].strip().lower()
    if media_type not in MERGE_PATCH_MEDIA_TYPES:
        raise UnsupportedMediaTypeError(
            f"Content type '{content_type}' is not supported; "
            "use application/json or application/merge-patch+json"
        )
