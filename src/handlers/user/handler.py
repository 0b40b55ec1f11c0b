"""
Users Lambda Handler

API Gateway プロキシイベントを HTTP メソッドで振り分ける:
- GET    /users            全ユーザー取得
- GET    /users?email=...  ユーザー取得
- POST   /users            ユーザー作成
- PUT    /users            ユーザー更新
- DELETE /users?email=...  ユーザー削除
"""
from __future__ import annotations

import json
from typing import Any, Callable

import structlog

from src.application.ports.user_store import IUserStore
from src.application.use_cases.user import (
    CreateUserInput,
    CreateUserUseCase,
    DeleteUserInput,
    DeleteUserUseCase,
    FetchUserInput,
    FetchUserUseCase,
    ListUsersUseCase,
    UpdateUserInput,
    UpdateUserUseCase,
)
from src.infrastructure.config import configure_logging, get_settings
from src.presentation.api.dependencies import get_user_store
from src.presentation.middleware.error_handler import handle_error
from src.presentation.middleware.logging import get_http_method, log_invocation

logger = structlog.get_logger()

ERROR_METHOD_NOT_ALLOWED = "method not allowed"

HandlerResult = tuple[int, Any]

configure_logging(get_settings().log_level)


def response(status_code: int, body: Any) -> dict:
    """API Gateway レスポンス形式"""
    return {
        'statusCode': status_code,
        'headers': {
            'Content-Type': 'application/json',
            'Access-Control-Allow-Origin': '*',
            'Access-Control-Allow-Headers': 'Content-Type',
            'Access-Control-Allow-Methods': 'GET,POST,PUT,DELETE',
        },
        'body': json.dumps(body, ensure_ascii=False),
    }


def _query_parameter(event: dict, name: str) -> str:
    return (event.get('queryStringParameters') or {}).get(name) or ''


def get_user(event: dict, store: IUserStore) -> HandlerResult:
    """email 指定があれば1件、なければ全件"""
    email = _query_parameter(event, 'email')
    if email:
        user = FetchUserUseCase(store).execute(FetchUserInput(email=email))
        return 200, user.to_dict() if user is not None else None

    users = ListUsersUseCase(store).execute()
    return 200, [user.to_dict() for user in users]


def create_user(event: dict, store: IUserStore) -> HandlerResult:
    user = CreateUserUseCase(store).execute(CreateUserInput(body=event.get('body')))
    return 201, user.to_dict()


def update_user(event: dict, store: IUserStore) -> HandlerResult:
    user = UpdateUserUseCase(store).execute(UpdateUserInput(body=event.get('body')))
    return 200, user.to_dict()


def delete_user(event: dict, store: IUserStore) -> HandlerResult:
    email = DeleteUserUseCase(store).execute(
        DeleteUserInput(email=_query_parameter(event, 'email'))
    )
    return 200, email


ROUTES: dict[str, Callable[[dict, IUserStore], HandlerResult]] = {
    'GET': get_user,
    'POST': create_user,
    'PUT': update_user,
    'DELETE': delete_user,
}


@log_invocation
def dispatch(event: dict, store: IUserStore) -> dict:
    """
    HTTP メソッドでユースケースを選択し、結果をレスポンスに変換

    ペイロードの中身は検証しない（ユースケース側の責務）。
    """
    handler = ROUTES.get(get_http_method(event))
    if handler is None:
        return response(405, ERROR_METHOD_NOT_ALLOWED)

    try:
        status_code, body = handler(event, store)
    except Exception as e:
        status_code, body = handle_error(e)
    return response(status_code, body)


def lambda_handler(event: dict, context: Any) -> dict:
    """Lambda エントリポイント"""
    aws_request_id = getattr(context, 'aws_request_id', None)
    with structlog.contextvars.bound_contextvars(aws_request_id=aws_request_id):
        return dispatch(event, get_user_store())
