"""User API Routes"""
from __future__ import annotations

from typing import Annotated
from uuid import uuid4

from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool

from src.application.ports.user_store import IUserStore
from src.handlers.user.handler import dispatch
from src.presentation.api.dependencies import get_user_store

router = APIRouter()

PROXY_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"]


async def to_proxy_event(request: Request) -> dict:
    """HTTP リクエストを API Gateway プロキシイベント（payload 1.0）に変換"""
    body = (await request.body()).decode("utf-8")
    return {
        "httpMethod": request.method,
        "path": request.url.path,
        "queryStringParameters": dict(request.query_params) or None,
        "headers": dict(request.headers),
        "body": body or None,
        "requestContext": {
            "requestId": request.headers.get("X-Request-ID", str(uuid4())),
        },
    }


@router.api_route("/users", methods=PROXY_METHODS)
async def users_proxy(
    request: Request,
    store: Annotated[IUserStore, Depends(get_user_store)],
) -> Response:
    """Lambda ハンドラと同じディスパッチャで処理（ストアへの同期呼び出しはスレッドプールで実行）"""
    event = await to_proxy_event(request)
    result = await run_in_threadpool(dispatch, event, store)
    return Response(
        content=result["body"],
        status_code=result["statusCode"],
        headers=result["headers"],
    )
