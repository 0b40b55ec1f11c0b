"""User Entity"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..value_objects.email_address import EmailAddress

# JSON / DynamoDB の属性名
EMAIL_ATTRIBUTE = "email"
FIRST_NAME_ATTRIBUTE = "firstname"
LAST_NAME_ATTRIBUTE = "lastname"


@dataclass(frozen=True)
class User:
    """
    ユーザー（エンティティ）

    email が主キーであり、ストアでの検索にも email のみを使用する。
    """

    email: str
    first_name: str = ""
    last_name: str = ""

    @property
    def email_address(self) -> EmailAddress:
        """検証済みのメールアドレス（不正な場合は ValueError）"""
        return EmailAddress(self.email)

    def to_dict(self) -> dict[str, str]:
        """辞書に変換"""
        data = {
            EMAIL_ATTRIBUTE: self.email,
            FIRST_NAME_ATTRIBUTE: self.first_name,
            LAST_NAME_ATTRIBUTE: self.last_name,
        }
        for key, value in data.items():
            if not isinstance(value, str):
                raise TypeError(f"Attribute {key} must be a string, got {type(value).__name__}")
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> User:
        """
        辞書から生成

        email は必須。名前の属性が欠けている場合は空文字として扱う。
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"Expected a mapping, got {type(data).__name__}")
        if EMAIL_ATTRIBUTE not in data:
            raise ValueError("Missing email attribute")

        values = {
            EMAIL_ATTRIBUTE: data[EMAIL_ATTRIBUTE],
            FIRST_NAME_ATTRIBUTE: data.get(FIRST_NAME_ATTRIBUTE, ""),
            LAST_NAME_ATTRIBUTE: data.get(LAST_NAME_ATTRIBUTE, ""),
        }
        for key, value in values.items():
            if not isinstance(value, str):
                raise TypeError(f"Attribute {key} must be a string, got {type(value).__name__}")

        return cls(
            email=values[EMAIL_ATTRIBUTE],
            first_name=values[FIRST_NAME_ATTRIBUTE],
            last_name=values[LAST_NAME_ATTRIBUTE],
        )
