"""Split account variable names and values into their logical parts."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, NewType

from env_accounts.errors import MalformedAccountError


logger = logging.getLogger(__name__)

GroupLower = NewType("GroupLower", str)
UserLower = NewType("UserLower", str)

DEFAULT_SEPARATOR = "_"
DEFAULT_DIVIDER = ":"


@dataclass(frozen=True)
class AccountProps:
    """Account data parsed from a single variable value.

    ``balance`` is ``None`` when the value carries no balance component; a
    default balance policy may fill it later through :meth:`with_balance`.
    """

    address: str
    private_key: str
    balance: str | None = None

    def with_balance(self, default: str) -> AccountProps:
        """Return a copy whose absent balance is replaced by ``default``."""
        if self.balance is not None:
            return self
        return replace(self, balance=default)

    def to_dict(self) -> dict[str, Any]:
        return {"address": self.address, "private_key": self.private_key, "balance": self.balance}


def split_account_name(name: str, separator: str = DEFAULT_SEPARATOR) -> tuple[GroupLower, UserLower]:
    """Split a prefix-less variable name into lowercase ``(group, user)``.

    Only the first two components are used. ``GROUP_SUB_USER`` yields
    ``("group", "sub")`` and drops ``user``; the truncation is logged.
    """
    if not separator:
        msg = "separator must not be empty"
        raise ValueError(msg)

    parts = name.lower().split(separator)
    if len(parts) < 2:
        msg = f"account name has no {separator!r} between group and user: {name}"
        raise MalformedAccountError(msg)
    if len(parts) > 2:
        logger.warning("Account name %s has extra components %s; they are ignored", name, parts[2:])
    group, user = parts[0], parts[1]
    return GroupLower(group), UserLower(user)


def split_account_value(value: str, divider: str = DEFAULT_DIVIDER) -> AccountProps:
    """Split ``address:private_key[:balance]`` positionally."""
    if not divider:
        msg = "divider must not be empty"
        raise ValueError(msg)

    parts = value.split(divider)
    if len(parts) < 2 or not parts[0] or not parts[1]:
        msg = f"account value must hold an address and a private key separated by {divider!r}"
        raise MalformedAccountError(msg)
    if len(parts) > 3:
        logger.warning("Account value has %d extra components; they are ignored", len(parts) - 3)

    balance = parts[2] if len(parts) > 2 and parts[2] else None
    return AccountProps(address=parts[0], private_key=parts[1], balance=balance)
