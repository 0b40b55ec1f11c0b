"""DynamoDB User Store Integration Tests (moto)"""
import json

import boto3
import pytest
from moto import mock_aws

from src.application.ports.user_store import (
    ConditionFailedError,
    StoreOperationError,
    WriteCondition,
)
from src.handlers.user.handler import dispatch
from src.infrastructure.persistence import DynamoDBUserStore

pytestmark = pytest.mark.integration

TABLE_NAME = "users-integration"


@pytest.fixture
def dynamodb_store():
    """moto 上に users テーブルを作成し、DynamoDBUserStore を返す"""
    with mock_aws():
        client = boto3.client("dynamodb", region_name="us-east-1")
        client.create_table(
            TableName=TABLE_NAME,
            KeySchema=[{"AttributeName": "email", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "email", "AttributeType": "S"}],
            BillingMode="PAY_PER_REQUEST",
        )
        yield DynamoDBUserStore(table_name=TABLE_NAME, region="us-east-1")


class TestDynamoDBUserStore:
    """DynamoDB 実装のテスト"""

    def test_put_and_get(self, dynamodb_store):
        item = {"email": "a@b.com", "firstname": "A", "lastname": "B"}

        dynamodb_store.put(item)

        assert dynamodb_store.get("a@b.com") == item

    def test_get_missing_returns_none(self, dynamodb_store):
        assert dynamodb_store.get("ghost@example.com") is None

    def test_scan(self, dynamodb_store):
        dynamodb_store.put({"email": "a@b.com", "firstname": "A", "lastname": "B"})
        dynamodb_store.put({"email": "c@d.com", "firstname": "C", "lastname": "D"})

        emails = sorted(item["email"] for item in dynamodb_store.scan())

        assert emails == ["a@b.com", "c@d.com"]

    def test_put_must_not_exist(self, dynamodb_store):
        """異常: 既存キーへの作成は条件違反"""
        dynamodb_store.put({"email": "a@b.com", "firstname": "A", "lastname": "B"})

        with pytest.raises(ConditionFailedError):
            dynamodb_store.put(
                {"email": "a@b.com", "firstname": "X", "lastname": "Y"},
                condition=WriteCondition.MUST_NOT_EXIST,
            )

        assert dynamodb_store.get("a@b.com")["firstname"] == "A"

    def test_put_must_exist(self, dynamodb_store):
        """異常: 存在しないキーへの更新は条件違反"""
        with pytest.raises(ConditionFailedError):
            dynamodb_store.put(
                {"email": "a@b.com", "firstname": "A", "lastname": "B"},
                condition=WriteCondition.MUST_EXIST,
            )

        assert dynamodb_store.get("a@b.com") is None

    def test_delete_is_idempotent(self, dynamodb_store):
        dynamodb_store.put({"email": "a@b.com", "firstname": "A", "lastname": "B"})

        dynamodb_store.delete("a@b.com")
        dynamodb_store.delete("a@b.com")

        assert dynamodb_store.get("a@b.com") is None

    def test_missing_table_raises_store_error(self):
        with mock_aws():
            store = DynamoDBUserStore(table_name="does-not-exist", region="us-east-1")

            with pytest.raises(StoreOperationError):
                store.scan()


class TestDispatchWithDynamoDB:
    """ディスパッチャ + DynamoDB の通しテスト"""

    def _event(self, method, body=None, query=None):
        return {
            "httpMethod": method,
            "queryStringParameters": query,
            "body": json.dumps(body) if body is not None else None,
            "requestContext": {"requestId": "it-1"},
        }

    def test_crud_flow(self, dynamodb_store):
        user = {"email": "a@b.com", "firstname": "A", "lastname": "B"}

        assert dispatch(self._event("POST", body=user), dynamodb_store)["statusCode"] == 201

        conflict = dispatch(self._event("POST", body=user), dynamodb_store)
        assert conflict["statusCode"] == 400
        assert json.loads(conflict["body"]) == {"error": "user.User already exists"}

        updated = dispatch(self._event("PUT", body={**user, "firstname": "Z"}), dynamodb_store)
        assert updated["statusCode"] == 200

        fetched = dispatch(self._event("GET", query={"email": "a@b.com"}), dynamodb_store)
        assert json.loads(fetched["body"]) == {**user, "firstname": "Z"}

        deleted = dispatch(self._event("DELETE", query={"email": "a@b.com"}), dynamodb_store)
        assert json.loads(deleted["body"]) == "a@b.com"

        listed = dispatch(self._event("GET"), dynamodb_store)
        assert json.loads(listed["body"]) == []

    def test_update_missing_user(self, dynamodb_store):
        result = dispatch(
            self._event("PUT", body={"email": "nouser@b.com", "firstname": "N", "lastname": "U"}),
            dynamodb_store,
        )

        assert result["statusCode"] == 400
        assert json.loads(result["body"]) == {"error": "user.User does not exist"}
