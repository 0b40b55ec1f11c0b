"""User Value Objects"""
from .email_address import EmailAddress, is_valid_email

__all__ = ["EmailAddress", "is_valid_email"]
