"""Shared pytest fixtures"""
import json
import os

import pytest

# boto3 が実際の AWS に接続しないように (moto がインターセプトする)
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("USERS_STORE_BACKEND", "memory")
os.environ.setdefault("USERS_TABLE_NAME", "users-test")

from src.application.ports.user_store import StoreOperationError  # noqa: E402
from src.infrastructure.persistence import InMemoryUserStore  # noqa: E402


class FailingUserStore(InMemoryUserStore):
    """指定した操作で StoreOperationError を送出するストア"""

    def __init__(self, failing: set[str], **kwargs):
        super().__init__(**kwargs)
        self.failing = failing

    def _maybe_fail(self, operation: str) -> None:
        if operation in self.failing:
            raise StoreOperationError(f"{operation} failed")

    def get(self, email):
        self._maybe_fail("get")
        return super().get(email)

    def scan(self):
        self._maybe_fail("scan")
        return super().scan()

    def put(self, item, condition=None):
        self._maybe_fail("put")
        if condition is None:
            return super().put(item)
        return super().put(item, condition=condition)

    def delete(self, email):
        self._maybe_fail("delete")
        return super().delete(email)


class StaleReadUserStore(InMemoryUserStore):
    """get が常に古い結果（存在しない）を返すストア。確認と書き込みの競合を再現する"""

    def get(self, email):
        return None


@pytest.fixture
def user_store() -> InMemoryUserStore:
    """空のインメモリストア"""
    return InMemoryUserStore(table_name="users-test")


@pytest.fixture
def seeded_store() -> InMemoryUserStore:
    """ユーザーが2件登録済みのストア"""
    return InMemoryUserStore(
        table_name="users-test",
        items=[
            {"email": "alice@example.com", "firstname": "Alice", "lastname": "Smith"},
            {"email": "bob@example.com", "firstname": "Bob", "lastname": "Jones"},
        ],
    )


@pytest.fixture
def failing_store():
    """失敗させる操作を指定してストアを生成するファクトリ"""

    def _factory(*operations: str, items=None) -> FailingUserStore:
        return FailingUserStore(set(operations), table_name="users-test", items=items)

    return _factory


@pytest.fixture
def stale_read_store() -> StaleReadUserStore:
    return StaleReadUserStore(
        table_name="users-test",
        items=[{"email": "alice@example.com", "firstname": "Alice", "lastname": "Smith"}],
    )


@pytest.fixture
def make_event():
    """API Gateway プロキシイベント（payload 1.0）を生成"""

    def _make_event(method: str, body=None, query=None, request_id: str = "req-1") -> dict:
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)
        return {
            "httpMethod": method,
            "path": "/users",
            "queryStringParameters": query,
            "body": body,
            "requestContext": {"requestId": request_id},
        }

    return _make_event
