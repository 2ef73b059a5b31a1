"""Holder for the environment variable prefix."""

from __future__ import annotations

from typing import TYPE_CHECKING

from env_accounts.errors import EmptyPrefixError, PrefixNotSetError


if TYPE_CHECKING:
    from typing import Self


class EnvPrefix:
    """Hold the prefix that marks a source key as account data."""

    def __init__(self) -> None:
        super().__init__()
        self._prefix: str | None = None

    def set(self, prefix: str) -> Self:
        if not prefix:
            msg = "prefix must not be an empty string"
            raise EmptyPrefixError(msg)
        self._prefix = prefix
        return self

    def get(self) -> str:
        """Return the prefix; raise :class:`PrefixNotSetError` before :meth:`set`."""
        if self._prefix is None:
            msg = "prefix is read before being set"
            raise PrefixNotSetError(msg)
        return self._prefix
