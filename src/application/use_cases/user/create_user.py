"""Create User Use Case"""
from __future__ import annotations

from dataclasses import dataclass

import structlog

from src.application.ports.user_store import (
    ConditionFailedError,
    IUserStore,
    StoreOperationError,
    WriteCondition,
)
from src.domain.user import User

from .errors import (
    ERROR_COULD_NOT_PUT_ITEM,
    ERROR_INVALID_EMAIL,
    ConflictError,
    InvalidInputError,
    StoreError,
)
from .fetch_user import find_user
from .serialization import encode_user, parse_user_payload

logger = structlog.get_logger()


@dataclass
class CreateUserInput:
    """作成入力DTO"""

    body: str | None


class CreateUserUseCase:
    """
    ユーザー作成 ユースケース

    1. リクエストボディを User に変換
    2. メールアドレスの書式を検証
    3. 既存ユーザーの有無を確認
    4. 存在しない場合のみ書き込む（条件付き put）
    """

    def __init__(self, user_store: IUserStore):
        self._store = user_store

    def execute(self, input_data: CreateUserInput) -> User:
        """ユースケースを実行"""
        user = parse_user_payload(input_data.body)

        log = logger.bind(email=user.email, table=self._store.table_name)
        log.info("create_user_started")

        try:
            email = user.email_address
        except ValueError as e:
            log.warning("invalid_email")
            raise InvalidInputError(ERROR_INVALID_EMAIL) from e

        if find_user(self._store, email.value) is not None:
            log.warning("user_already_exists")
            raise ConflictError()

        item = encode_user(user)

        try:
            self._store.put(item, condition=WriteCondition.MUST_NOT_EXIST)
        except ConditionFailedError as e:
            # 確認と書き込みの間に作成された
            log.warning("user_already_exists", concurrent=True)
            raise ConflictError() from e
        except StoreOperationError as e:
            log.error("user_put_failed", error=str(e))
            raise StoreError(ERROR_COULD_NOT_PUT_ITEM) from e

        log.info("create_user_completed")
        return user
