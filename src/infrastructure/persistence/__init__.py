"""User Store Implementations"""
from .dynamodb_user_store import DynamoDBUserStore
from .in_memory_user_store import InMemoryUserStore

__all__ = ["DynamoDBUserStore", "InMemoryUserStore"]
