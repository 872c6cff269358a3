"""커스텀 HTTP 예외 및 알림 값 모듈.

Custom HTTP exceptions and alert values.
Services report validation failures as plain Alert values; the router turns
them into the HTTPException subclasses below at the HTTP boundary.

Usage:
    from app.utils.exceptions import Alert, BadRequestAlertError, NotFoundError
    alert = Alert("Invalid id", "movies", "idnull")
    raise BadRequestAlertError(alert)
    raise NotFoundError("Movies not found")
"""

from dataclasses import dataclass

from fastapi import HTTPException, status

from app.utils.headers import create_failure_alert


@dataclass(frozen=True)
class Alert:
    """검증 실패 사유 값.

    Validation failure value carried from the service to the router.

    Attributes:
        message: 사람이 읽는 메시지 (Human-readable message)
        entity_name: 엔티티 이름 (Entity name, e.g. "movies")
        error_key: 기계 판독용 사유 코드 (Machine-readable reason: idexists, idnull, idinvalid, idnotfound)
    """

    message: str
    entity_name: str
    error_key: str


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class BadRequestAlertError(HTTPException):
    """400 Bad Request 예외 — 식별자 검증 실패 시 사용.

    400 Bad Request exception built from an Alert. The body carries the
    entity name and error key; failure alert headers are attached.

    Args:
        alert: 검증 실패 값 (Validation failure value)
    """

    def __init__(self, alert: Alert) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "title": alert.message,
                "entityName": alert.entity_name,
                "errorKey": alert.error_key,
                "message": f"error.{alert.error_key}",
            },
            headers=create_failure_alert(alert.entity_name, alert.error_key),
        )
        self.alert: Alert = alert


class UnsupportedMediaTypeError(HTTPException):
    """415 Unsupported Media Type 예외 — 허용되지 않은 Content-Type.

    415 exception raised when a request body has a content type the
    endpoint does not consume.
    """

    def __init__(self, detail: str = "Unsupported media type") -> None:
        super().__init__(status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, detail=detail)
