"""Fetch User Use Cases"""
from __future__ import annotations

from dataclasses import dataclass

import structlog

from src.application.ports.user_store import IUserStore, StoreOperationError
from src.domain.user import EmailAddress, User

from .errors import ERROR_FAILED_TO_FETCH_RECORD, ERROR_INVALID_EMAIL, InvalidInputError, StoreError
from .serialization import decode_user

logger = structlog.get_logger()


def find_user(store: IUserStore, email: str) -> User | None:
    """
    email で User を取得

    ストアに存在しなければ None を返す。書式の検証は行わない。
    """
    try:
        item = store.get(email)
    except StoreOperationError as e:
        logger.error("user_fetch_failed", email=email, error=str(e))
        raise StoreError(ERROR_FAILED_TO_FETCH_RECORD) from e

    if item is None:
        return None
    return decode_user(item)


@dataclass
class FetchUserInput:
    """取得入力DTO"""

    email: str


class FetchUserUseCase:
    """
    ユーザー取得 ユースケース

    1. メールアドレスの書式を検証
    2. ストアから取得
    3. User（存在しなければ None）を返す
    """

    def __init__(self, user_store: IUserStore):
        self._store = user_store

    def execute(self, input_data: FetchUserInput) -> User | None:
        """ユースケースを実行"""
        log = logger.bind(email=input_data.email, table=self._store.table_name)
        log.info("fetch_user_started")

        try:
            email = EmailAddress(input_data.email)
        except ValueError as e:
            log.warning("invalid_email")
            raise InvalidInputError(ERROR_INVALID_EMAIL) from e

        user = find_user(self._store, email.value)
        log.info("fetch_user_completed", found=user is not None)
        return user


class ListUsersUseCase:
    """
    ユーザー一覧取得 ユースケース

    テーブル全体をスキャンする（ページネーションなし）。
    変換できないアイテムがあれば DecodeError を送出する。
    """

    def __init__(self, user_store: IUserStore):
        self._store = user_store

    def execute(self) -> list[User]:
        """ユースケースを実行"""
        log = logger.bind(table=self._store.table_name)
        log.info("list_users_started")

        try:
            items = self._store.scan()
        except StoreOperationError as e:
            log.error("user_scan_failed", error=str(e))
            raise StoreError(ERROR_FAILED_TO_FETCH_RECORD) from e

        users = [decode_user(item) for item in items]
        log.info("list_users_completed", count=len(users))
        return users
