"""Error Handler"""
from __future__ import annotations

from typing import Any, Callable

import structlog

from src.application.use_cases.user.errors import UserServiceError

logger = structlog.get_logger()

ErrorResult = tuple[int, dict[str, Any]]


def user_service_error_handler(exc: UserServiceError) -> ErrorResult:
    """ユーザー操作エラーハンドラ（すべて 400）"""
    logger.warning(
        "user_service_error",
        error_type=type(exc).__name__,
        error=exc.message,
    )
    return 400, {"error": exc.message}


def generic_error_handler(exc: Exception) -> ErrorResult:
    """汎用エラーハンドラ"""
    logger.error("unhandled_error", error=str(exc), exc_info=exc)
    return 500, {"error": "internal server error"}


# エラーハンドラのマッピング
error_handlers: dict[type[Exception], Callable[[Any], ErrorResult]] = {
    UserServiceError: user_service_error_handler,
    Exception: generic_error_handler,
}


def handle_error(exc: Exception) -> ErrorResult:
    """例外クラスの MRO を辿って最初に見つかったハンドラで処理"""
    for exception_class in type(exc).__mro__:
        handler = error_handlers.get(exception_class)
        if handler is not None:
            return handler(exc)
    return generic_error_handler(exc)
