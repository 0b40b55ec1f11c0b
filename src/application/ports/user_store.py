"""User Store Interface (Port)"""
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

Item = dict[str, Any]


class StoreOperationError(Exception):
    """ストアへのアクセス失敗"""

    pass


class ConditionFailedError(StoreOperationError):
    """条件付き書き込みの条件を満たさなかった"""

    pass


class WriteCondition(str, Enum):
    """put 時の存在条件"""

    NONE = "none"
    MUST_NOT_EXIST = "must_not_exist"
    MUST_EXIST = "must_exist"


class IUserStore(ABC):
    """
    User Store Interface

    email をキーとするキーバリューストアの抽象インターフェース。
    インスタンスは1つのテーブルに束縛され、呼び出し時に注入される。
    具体的な実装（DynamoDB等）はインフラ層で提供する。
    """

    table_name: str

    @abstractmethod
    def get(self, email: str) -> Item | None:
        """キーでアイテムを取得（存在しなければ None）"""
        pass

    @abstractmethod
    def scan(self) -> list[Item]:
        """全アイテムを取得"""
        pass

    @abstractmethod
    def put(self, item: Item, condition: WriteCondition = WriteCondition.NONE) -> None:
        """
        アイテムを書き込み（upsert）

        condition を満たさない場合は ConditionFailedError を送出する。
        """
        pass

    @abstractmethod
    def delete(self, email: str) -> None:
        """キーでアイテムを削除（存在しなくても成功）"""
        pass
