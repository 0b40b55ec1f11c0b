"""In-Memory User Store Implementation"""
from __future__ import annotations

import copy
import threading

from src.application.ports.user_store import (
    ConditionFailedError,
    IUserStore,
    Item,
    StoreOperationError,
    WriteCondition,
)

KEY_ATTRIBUTE = "email"


class InMemoryUserStore(IUserStore):
    """
    インメモリ User Store（開発・テスト用）

    DynamoDB 実装と同じ条件付き書き込みの意味を持つ。
    """

    def __init__(self, table_name: str = "users", items: list[Item] | None = None):
        self.table_name = table_name
        self._items: dict[str, Item] = {}
        self._lock = threading.Lock()
        for item in items or []:
            self._items[item[KEY_ATTRIBUTE]] = copy.deepcopy(item)

    def get(self, email: str) -> Item | None:
        with self._lock:
            item = self._items.get(email)
            return copy.deepcopy(item) if item is not None else None

    def scan(self) -> list[Item]:
        with self._lock:
            return [copy.deepcopy(item) for item in self._items.values()]

    def put(self, item: Item, condition: WriteCondition = WriteCondition.NONE) -> None:
        key = item.get(KEY_ATTRIBUTE)
        if not isinstance(key, str) or not key:
            raise StoreOperationError("Item must have a non-empty string email key")

        with self._lock:
            exists = key in self._items
            if condition == WriteCondition.MUST_NOT_EXIST and exists:
                raise ConditionFailedError(f"Condition {condition.value} failed for {key}")
            if condition == WriteCondition.MUST_EXIST and not exists:
                raise ConditionFailedError(f"Condition {condition.value} failed for {key}")
            self._items[key] = copy.deepcopy(item)

    def delete(self, email: str) -> None:
        with self._lock:
            self._items.pop(email, None)

    def __len__(self) -> int:
        return len(self._items)
