"""Application Ports (Interfaces)"""
from .user_store import (
    ConditionFailedError,
    IUserStore,
    Item,
    StoreOperationError,
    WriteCondition,
)

__all__ = [
    "IUserStore",
    "Item",
    "WriteCondition",
    "StoreOperationError",
    "ConditionFailedError",
]
