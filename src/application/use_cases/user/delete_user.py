"""Delete User Use Case"""
from __future__ import annotations

from dataclasses import dataclass

import structlog

from src.application.ports.user_store import IUserStore, StoreOperationError

from .errors import ERROR_COULD_NOT_DELETE_ITEM, StoreError

logger = structlog.get_logger()


@dataclass
class DeleteUserInput:
    """削除入力DTO"""

    email: str


class DeleteUserUseCase:
    """
    ユーザー削除 ユースケース

    存在確認も書式検証も行わずに削除し、email をそのまま返す。
    """

    def __init__(self, user_store: IUserStore):
        self._store = user_store

    def execute(self, input_data: DeleteUserInput) -> str:
        """ユースケースを実行"""
        log = logger.bind(email=input_data.email, table=self._store.table_name)
        log.info("delete_user_started")

        try:
            self._store.delete(input_data.email)
        except StoreOperationError as e:
            log.error("user_delete_failed", error=str(e))
            raise StoreError(ERROR_COULD_NOT_DELETE_ITEM) from e

        log.info("delete_user_completed")
        return input_data.email
