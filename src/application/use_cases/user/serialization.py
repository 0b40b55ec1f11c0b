"""User Serialization Helpers"""
from __future__ import annotations

from pydantic import BaseModel, StrictStr, ValidationError

from src.application.ports.user_store import Item
from src.domain.user import User

from .errors import DecodeError, EncodeError, InvalidInputError


class UserPayload(BaseModel):
    """リクエストボディ（JSON）"""

    email: StrictStr = ""
    firstname: StrictStr = ""
    lastname: StrictStr = ""

    def to_user(self) -> User:
        return User(
            email=self.email,
            first_name=self.firstname,
            last_name=self.lastname,
        )


def parse_user_payload(body: str | None) -> User:
    """リクエストボディを User に変換（不正な JSON は InvalidInputError）"""
    try:
        payload = UserPayload.model_validate_json(body or "")
    except ValidationError as e:
        raise InvalidInputError() from e
    return payload.to_user()


def decode_user(item: Item) -> User:
    """ストアのアイテムを User に変換"""
    try:
        return User.from_dict(item)
    except (TypeError, ValueError) as e:
        raise DecodeError() from e


def encode_user(user: User) -> Item:
    """User をストアのアイテムに変換"""
    try:
        return user.to_dict()
    except TypeError as e:
        raise EncodeError() from e
