"""Parse prefixed account variables into mirrored two-level maps."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from env_accounts.errors import NotParsedError, SourceInvalidError
from env_accounts.key_mapping import (
    DEFAULT_DIVIDER,
    DEFAULT_SEPARATOR,
    AccountProps,
    GroupLower,
    UserLower,
    split_account_name,
    split_account_value,
)
from env_accounts.mappings import TwoLevelMap


if TYPE_CHECKING:
    from typing import Self


logger = logging.getLogger(__name__)

Source = Mapping[str, str | None]


class EnvParser:
    """Parse account information as two-tiered data.

    A variable such as::

        ACCOUNT_LOCAL_DEPLOYER=address:privateKey:balance

    parsed with the prefix ``ACCOUNT_`` ends up in the group map as::

        {"local": {"deployer": AccountProps(address, private_key, balance)}}

    ``local`` and ``deployer`` are lowercased, and the value components are
    read positionally. The same payload is also stored in a user map with
    the nesting reversed, ``deployer`` outside and ``local`` inside.

    The source is any string-keyed mapping, typically ``os.environ``. It is
    read once per :meth:`parse` call and never modified.
    """

    def __init__(self, source: Source, *, separator: str = DEFAULT_SEPARATOR, divider: str = DEFAULT_DIVIDER) -> None:
        super().__init__()
        if not isinstance(source, Mapping):
            msg = f"source shall be a key-value mapping, got {type(source).__name__}"
            raise SourceInvalidError(msg)
        if not separator:
            msg = "separator must not be empty"
            raise ValueError(msg)
        if not divider:
            msg = "divider must not be empty"
            raise ValueError(msg)

        self._source = source
        self._separator = separator
        self._divider = divider
        self._raw: dict[str, str] = {}
        self._parsed = False
        self._group_user_props: TwoLevelMap[GroupLower, UserLower, AccountProps] = TwoLevelMap()
        self._user_group_props: TwoLevelMap[UserLower, GroupLower, AccountProps] = TwoLevelMap()

    def get_source(self) -> Source:
        """Return the unaltered source mapping."""
        return self._source

    def get_raw(self) -> Mapping[str, str]:
        """Return prefix-less names and their unparsed values, in source order.

        Empty until :meth:`parse` runs.
        """
        return MappingProxyType(self._raw)

    def get_raw_account_keys(self) -> list[str]:
        """Return the matching source keys with the prefix removed."""
        self.check_if_parsed()
        return list(self._raw)

    def get_groups(self) -> list[GroupLower]:
        """Return the lowercase group names found in the source."""
        return self.get_group_map().get_l1_keys()

    def get_group_users(self, group: str) -> list[UserLower]:
        """Return the users of ``group``; the name is matched case-insensitively."""
        return self.get_group_map().get_l2_keys(GroupLower(group.lower()))

    def get_user_groups(self, user: str) -> list[GroupLower]:
        """Return the groups of ``user``; the name is matched case-insensitively."""
        return self.get_user_map().get_l2_keys(UserLower(user.lower()))

    def get_group_map(self) -> TwoLevelMap[GroupLower, UserLower, AccountProps]:
        """Return the ``group => user => props`` map."""
        self.check_if_parsed()
        return self._group_user_props

    def get_user_map(self) -> TwoLevelMap[UserLower, GroupLower, AccountProps]:
        """Return the ``user => group => props`` map."""
        self.check_if_parsed()
        return self._user_group_props

    def parse(self, prefix: str) -> Self:
        """Parse the source, keeping keys that start with ``prefix``.

        A parser is meant to be parsed once. A second call re-runs the whole
        pipeline and fails with :class:`DuplicateKeyError` as soon as it
        meets an account indexed by the first call. After any failure the
        instance is in an undefined state and should be discarded.
        """
        self._parse_raw(prefix)
        self._parse_maps()
        self._parsed = True
        logger.debug(
            "Parsed %d accounts in %d groups with prefix %s",
            len(self._raw),
            len(self._group_user_props),
            prefix,
        )
        return self

    def is_parsed(self) -> bool:
        return self._parsed

    def check_if_parsed(self) -> None:
        """Raise :class:`NotParsedError` unless :meth:`parse` has completed."""
        if not self._parsed:
            msg = "accounts are queried before being parsed; call parse() first"
            raise NotParsedError(msg)

    def _parse_raw(self, prefix: str) -> None:
        for raw_key, raw_value in self._source.items():
            if not raw_value:
                continue
            if not raw_key.startswith(prefix):
                continue
            self._raw[raw_key.removeprefix(prefix)] = raw_value
        logger.debug("Kept %d source entries with prefix %s", len(self._raw), prefix)

    def _parse_maps(self) -> None:
        for name, value in self._raw.items():
            group, user = split_account_name(name, self._separator)
            props = split_account_value(value, self._divider)
            self._user_group_props.add_one(user, group, props)
            self._group_user_props.add_one(group, user, props)
