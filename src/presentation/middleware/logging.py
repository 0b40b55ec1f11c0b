"""Invocation Logging"""
from __future__ import annotations

import time
from functools import wraps
from typing import Any, Callable
from uuid import uuid4

import structlog

logger = structlog.get_logger()

Dispatch = Callable[..., dict[str, Any]]


def get_http_method(event: dict[str, Any]) -> str:
    """
    REST API (payload 1.0) / HTTP API (payload 2.0) の両方から HTTP メソッドを取得

    大文字小文字は変換しない（"get" は未対応メソッドとして扱われる）。
    """
    method = event.get("httpMethod")
    if not method:
        method = ((event.get("requestContext") or {}).get("http") or {}).get("method")
    return method if isinstance(method, str) else ""


def get_request_id(event: dict[str, Any]) -> str:
    return (event.get("requestContext") or {}).get("requestId") or str(uuid4())


def log_invocation(func: Dispatch) -> Dispatch:
    """
    リクエスト/レスポンス ログ

    12-Factor App の Logs 原則に従い、
    構造化されたログをイベントストリームとして出力する。
    """

    @wraps(func)
    def wrapper(event: dict[str, Any], *args: Any, **kwargs: Any) -> dict[str, Any]:
        with structlog.contextvars.bound_contextvars(request_id=get_request_id(event)):
            start_time = time.perf_counter()
            logger.info(
                "request_started",
                method=get_http_method(event),
                path=event.get("path") or event.get("rawPath"),
            )

            response = func(event, *args, **kwargs)

            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.info(
                "request_completed",
                method=get_http_method(event),
                status_code=response.get("statusCode"),
                duration_ms=round(duration_ms, 2),
            )
            return response

    return wrapper
