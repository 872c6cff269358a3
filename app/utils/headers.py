"""엔티티 알림 헤더 생성 유틸리티.

Entity alert header helpers.
Builds the X-<app>-alert / X-<app>-error / X-<app>-params headers that tell
clients what happened to an entity, keyed by the configured client name.
"""

from app.config import settings


def _alert_headers(message_header: str, message: str, param: str) -> dict[str, str]:
    app_name: str = settings.APP_CLIENT_NAME
    return {
        f"X-{app_name}-{message_header}": message,
        f"X-{app_name}-params": param,
    }


def create_entity_creation_alert(entity_name: str, param: str) -> dict[str, str]:
    """엔티티 생성 알림 헤더 — Headers announcing a created entity."""
    return _alert_headers("alert", f"{settings.APP_CLIENT_NAME}.{entity_name}.created", param)


def create_entity_update_alert(entity_name: str, param: str) -> dict[str, str]:
    """엔티티 수정 알림 헤더 — Headers announcing an updated entity."""
    return _alert_headers("alert", f"{settings.APP_CLIENT_NAME}.{entity_name}.updated", param)


def create_entity_deletion_alert(entity_name: str, param: str) -> dict[str, str]:
    """엔티티 삭제 알림 헤더 — Headers announcing a deleted entity."""
    return _alert_headers("alert", f"{settings.APP_CLIENT_NAME}.{entity_name}.deleted", param)


def create_failure_alert(entity_name: str, error_key: str) -> dict[str, str]:
    """실패 알림 헤더 — Headers describing a rejected request."""
    return _alert_headers("error", f"error.{error_key}", entity_name)
