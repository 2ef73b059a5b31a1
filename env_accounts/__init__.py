"""env-accounts - blockchain test accounts parsed from prefixed environment variables"""

from ._version import version as __version__
from .accounts import DEFAULT_BALANCE, AccountsConfig, EnvAccounts
from .errors import (
    DuplicateKeyError,
    EmptyPrefixError,
    EnvAccountsError,
    MalformedAccountError,
    MissingRequiredError,
    NotFoundError,
    NotParsedError,
    PrefixNotSetError,
    SourceInvalidError,
)
from .key_mapping import AccountProps
from .mappings import TwoLevelMap
from .parser import EnvParser


__all__ = [
    "DEFAULT_BALANCE",
    "AccountProps",
    "AccountsConfig",
    "DuplicateKeyError",
    "EmptyPrefixError",
    "EnvAccounts",
    "EnvAccountsError",
    "EnvParser",
    "MalformedAccountError",
    "MissingRequiredError",
    "NotFoundError",
    "NotParsedError",
    "PrefixNotSetError",
    "SourceInvalidError",
    "TwoLevelMap",
    "__version__",
]
