"""User Domain Module"""
from .entities.user import User
from .value_objects.email_address import EmailAddress, is_valid_email

__all__ = [
    "User",
    "EmailAddress",
    "is_valid_email",
]
