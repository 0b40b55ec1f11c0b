"""API Dependencies"""
from __future__ import annotations

from functools import lru_cache

import structlog

from src.application.ports.user_store import IUserStore
from src.infrastructure.config import Settings, get_settings
from src.infrastructure.persistence import DynamoDBUserStore, InMemoryUserStore

logger = structlog.get_logger()


def build_user_store(settings: Settings) -> IUserStore:
    """設定に応じた User Store を生成"""
    if settings.store_backend == "memory":
        logger.info("user_store_created", backend="memory", table=settings.table_name)
        return InMemoryUserStore(table_name=settings.table_name)
    if settings.store_backend == "dynamodb":
        logger.info("user_store_created", backend="dynamodb", table=settings.table_name)
        return DynamoDBUserStore.from_settings(settings)
    raise ValueError(f"Unknown store backend: {settings.store_backend}")


@lru_cache()
def get_user_store() -> IUserStore:
    """
    User Store の依存性注入

    コールドスタート時に一度だけ生成し、以降の呼び出しで再利用する。
    """
    return build_user_store(get_settings())
