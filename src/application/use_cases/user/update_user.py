"""Update User Use Case"""
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

from .errors import ERROR_COULD_NOT_PUT_ITEM, NotFoundError, StoreError
from .fetch_user import find_user
from .serialization import encode_user, parse_user_payload

logger = structlog.get_logger()


@dataclass
class UpdateUserInput:
    """更新入力DTO"""

    body: str | None


class UpdateUserUseCase:
    """
    ユーザー更新 ユースケース

    既存ユーザーの全属性を上書きする。存在しなければ NotFoundError。
    メールアドレスの書式検証は行わない（存在確認で代替される）。
    """

    def __init__(self, user_store: IUserStore):
        self._store = user_store

    def execute(self, input_data: UpdateUserInput) -> User:
        """ユースケースを実行"""
        user = parse_user_payload(input_data.body)

        log = logger.bind(email=user.email, table=self._store.table_name)
        log.info("update_user_started")

        if find_user(self._store, user.email) is None:
            log.warning("user_does_not_exist")
            raise NotFoundError()

        item = encode_user(user)

        try:
            self._store.put(item, condition=WriteCondition.MUST_EXIST)
        except ConditionFailedError as e:
            # 確認と書き込みの間に削除された
            log.warning("user_does_not_exist", concurrent=True)
            raise NotFoundError() from e
        except StoreOperationError as e:
            log.error("user_put_failed", error=str(e))
            raise StoreError(ERROR_COULD_NOT_PUT_ITEM) from e

        log.info("update_user_completed")
        return user
