"""In-Memory User Store Tests"""
import pytest

from src.application.ports.user_store import (
    ConditionFailedError,
    StoreOperationError,
    WriteCondition,
)


class TestInMemoryUserStore:
    def test_returns_copies(self, user_store):
        user_store.put({"email": "a@b.com", "firstname": "A", "lastname": "B"})

        item = user_store.get("a@b.com")
        item["firstname"] = "changed"

        assert user_store.get("a@b.com")["firstname"] == "A"

    def test_conditional_writes(self, user_store):
        item = {"email": "a@b.com", "firstname": "A", "lastname": "B"}

        with pytest.raises(ConditionFailedError):
            user_store.put(item, condition=WriteCondition.MUST_EXIST)

        user_store.put(item, condition=WriteCondition.MUST_NOT_EXIST)

        with pytest.raises(ConditionFailedError):
            user_store.put(item, condition=WriteCondition.MUST_NOT_EXIST)

        user_store.put({**item, "lastname": "C"}, condition=WriteCondition.MUST_EXIST)
        assert user_store.get("a@b.com")["lastname"] == "C"

    def test_rejects_empty_key(self, user_store):
        with pytest.raises(StoreOperationError):
            user_store.put({"email": "", "firstname": "A"})

    def test_delete_missing_key(self, user_store):
        user_store.delete("ghost@example.com")

        assert len(user_store) == 0
