"""Account name and value normalisation utilities."""

from .normalizer import (
    DEFAULT_DIVIDER,
    DEFAULT_SEPARATOR,
    AccountProps,
    GroupLower,
    UserLower,
    split_account_name,
    split_account_value,
)


__all__ = [
    "DEFAULT_DIVIDER",
    "DEFAULT_SEPARATOR",
    "AccountProps",
    "GroupLower",
    "UserLower",
    "split_account_name",
    "split_account_value",
]
