"""Email Address Value Object"""
from __future__ import annotations

import re
from dataclasses import dataclass

MIN_EMAIL_LENGTH = 3
MAX_EMAIL_LENGTH = 254

# local@domain.tld (ドメインは少なくとも1つのドットを含む)
EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)+"
)


def is_valid_email(value: object) -> bool:
    """メールアドレスの書式を検証"""
    if not isinstance(value, str):
        return False
    if len(value) < MIN_EMAIL_LENGTH or len(value) > MAX_EMAIL_LENGTH:
        return False
    return EMAIL_PATTERN.fullmatch(value) is not None


@dataclass(frozen=True)
class EmailAddress:
    """
    メールアドレス（値オブジェクト）

    User の主キーとして使用される。生成時に書式を検証する。
    """

    value: str

    def __post_init__(self) -> None:
        if not is_valid_email(self.value):
            raise ValueError(f"Invalid email address: {self.value!r}")

    @property
    def domain(self) -> str:
        return self.value.rsplit("@", 1)[1]

    def __str__(self) -> str:
        return self.value
