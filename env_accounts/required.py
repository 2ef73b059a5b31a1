"""Checklist of accounts that must be present after parsing."""

from __future__ import annotations

from typing import TYPE_CHECKING

from env_accounts.errors import MissingRequiredError


if TYPE_CHECKING:
    from collections.abc import Iterable


class RequiredAccounts:
    """Store prefix-less account names such as ``local_deployer``.

    Names are case-insensitive: ``set("local_deployer")`` is satisfied by the
    variable ``ACC_LOCAL_DEPLOYER`` as well as ``ACC_Local_Deployer``.
    """

    def __init__(self, *names: str) -> None:
        super().__init__()
        self._required: list[str] = []
        self.set(*names)

    def get(self) -> list[str]:
        return list(self._required)

    def set(self, *names: str) -> None:
        """Replace the required names; they are stored uppercase."""
        self._required = [name.upper() for name in names]

    def check(self, present: Iterable[str], prefix: str = "") -> None:
        """Raise :class:`MissingRequiredError` for the first required name not in ``present``."""
        present_upper = {name.upper() for name in present}
        for required in self._required:
            if required not in present_upper:
                msg = f"{prefix}{required} is required in the environment"
                raise MissingRequiredError(msg)
