"""Exceptions raised by env-accounts."""

from __future__ import annotations

from typing import override


class EnvAccountsError(Exception):
    """Base class for every env-accounts error."""


class SourceInvalidError(EnvAccountsError, TypeError):
    """The parse source is not a key-value mapping."""


class NotParsedError(EnvAccountsError, RuntimeError):
    """A query was issued before a successful parse."""


class DuplicateKeyError(EnvAccountsError, ValueError):
    """A two-level map already holds data at the given coordinate."""


class NotFoundError(EnvAccountsError, KeyError):
    """An outer or inner key is absent from a two-level map."""

    @override
    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message instead.
        return str(self.args[0]) if self.args else ""


class EmptyPrefixError(EnvAccountsError, ValueError):
    """The environment prefix was set to an empty string."""


class PrefixNotSetError(EnvAccountsError, RuntimeError):
    """The environment prefix was read before being set."""


class MissingRequiredError(EnvAccountsError, ValueError):
    """A required account is absent from the parsed source."""


class MalformedAccountError(EnvAccountsError, ValueError):
    """An account variable name or value cannot be split into its parts."""
