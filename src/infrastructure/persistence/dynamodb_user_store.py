"""DynamoDB User Store Implementation"""
from __future__ import annotations

from typing import Any

import boto3
import structlog
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import BotoCoreError, ClientError

from src.application.ports.user_store import (
    ConditionFailedError,
    IUserStore,
    Item,
    StoreOperationError,
    WriteCondition,
)
from src.infrastructure.config import Settings

logger = structlog.get_logger()

KEY_ATTRIBUTE = "email"


class DynamoDBUserStore(IUserStore):
    """
    DynamoDB ベースの User Store

    テーブルのパーティションキーは email（文字列）。
    boto3 の Table リソースはプロセス内で再利用される。
    """

    def __init__(
        self,
        table_name: str = "go-serverless-aws-lambda-dynamodb",
        region: str = "us-east-1",
        endpoint_url: str | None = None,
    ):
        self.table_name = table_name
        self._dynamodb = boto3.resource(
            "dynamodb",
            region_name=region,
            endpoint_url=endpoint_url or None,
        )
        self._table = self._dynamodb.Table(table_name)

    @classmethod
    def from_settings(cls, settings: Settings) -> DynamoDBUserStore:
        """設定から生成"""
        return cls(
            table_name=settings.table_name,
            region=settings.aws_region,
            endpoint_url=settings.dynamodb_endpoint_url,
        )

    def get(self, email: str) -> Item | None:
        try:
            response = self._table.get_item(Key={KEY_ATTRIBUTE: email})
        except (ClientError, BotoCoreError) as e:
            raise StoreOperationError(f"GetItem failed: {e}") from e
        return response.get("Item")

    def scan(self) -> list[Item]:
        try:
            response = self._table.scan()
        except (ClientError, BotoCoreError) as e:
            raise StoreOperationError(f"Scan failed: {e}") from e
        items = response.get("Items", [])
        logger.debug("dynamodb_scan", table=self.table_name, count=len(items))
        return items

    def put(self, item: Item, condition: WriteCondition = WriteCondition.NONE) -> None:
        kwargs: dict[str, Any] = {"Item": item}
        if condition == WriteCondition.MUST_NOT_EXIST:
            kwargs["ConditionExpression"] = Attr(KEY_ATTRIBUTE).not_exists()
        elif condition == WriteCondition.MUST_EXIST:
            kwargs["ConditionExpression"] = Attr(KEY_ATTRIBUTE).exists()

        try:
            self._table.put_item(**kwargs)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException":
                raise ConditionFailedError(
                    f"Condition {condition.value} failed for {item.get(KEY_ATTRIBUTE)}"
                ) from e
            raise StoreOperationError(f"PutItem failed: {e}") from e
        except BotoCoreError as e:
            raise StoreOperationError(f"PutItem failed: {e}") from e

    def delete(self, email: str) -> None:
        try:
            self._table.delete_item(Key={KEY_ATTRIBUTE: email})
        except (ClientError, BotoCoreError) as e:
            raise StoreOperationError(f"DeleteItem failed: {e}") from e
