"""User Use Case Errors"""
from __future__ import annotations

ERROR_FAILED_TO_FETCH_RECORD = "failed to fetch record(s)"
ERROR_FAILED_TO_UNMARSHAL_RECORD = "failed to unmarshal"
ERROR_INVALID_USER_DATA = "invalid user data"
ERROR_INVALID_EMAIL = "invalid email"
ERROR_COULD_NOT_MARSHAL_ITEM = "could not marshal item"
ERROR_COULD_NOT_DELETE_ITEM = "could not delete item"
ERROR_COULD_NOT_PUT_ITEM = "could not dynamo put item"
ERROR_USER_ALREADY_EXISTS = "user.User already exists"
ERROR_USER_DOES_NOT_EXIST = "user.User does not exist"


class UserServiceError(Exception):
    """
    ユーザー操作エラーの基底クラス

    message はクライアントにそのまま返される固定文言。
    """

    default_message = "user service error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(UserServiceError):
    """不正なリクエストボディまたはメールアドレス"""

    default_message = ERROR_INVALID_USER_DATA


class ConflictError(UserServiceError):
    """既に存在するユーザーの作成"""

    default_message = ERROR_USER_ALREADY_EXISTS


class NotFoundError(UserServiceError):
    """存在しないユーザーの更新"""

    default_message = ERROR_USER_DOES_NOT_EXIST


class StoreError(UserServiceError):
    """ストアの get/put/delete/scan 失敗"""

    default_message = ERROR_FAILED_TO_FETCH_RECORD


class DecodeError(UserServiceError):
    """保存形式から User への変換失敗"""

    default_message = ERROR_FAILED_TO_UNMARSHAL_RECORD


class EncodeError(UserServiceError):
    """User から保存形式への変換失敗"""

    default_message = ERROR_COULD_NOT_MARSHAL_ITEM
