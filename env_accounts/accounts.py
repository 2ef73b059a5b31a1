"""Public facade for querying account variables."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal, TypeVar, get_args

from env_accounts.errors import NotFoundError
from env_accounts.key_mapping import DEFAULT_DIVIDER, DEFAULT_SEPARATOR, AccountProps, GroupLower, UserLower
from env_accounts.networks import NetworkAliases
from env_accounts.parser import EnvParser, Source
from env_accounts.prefix import EnvPrefix
from env_accounts.required import RequiredAccounts


if TYPE_CHECKING:
    from typing import Self


logger = logging.getLogger(__name__)

_T = TypeVar("_T")

# 1 ether in wei
DEFAULT_BALANCE = "1" + "0" * 18

AccountProp = Literal["address", "private_key", "balance"]


def _identity(data: AccountProps) -> Any:
    return data


@dataclass(frozen=True)
class AccountsConfig:
    """Settings applied when :meth:`EnvAccounts.parse` runs.

    Attributes
    ----------
    prefix
        Source keys starting with this string are parsed as accounts.
    required_accounts
        Prefix-less names, e.g. ``"local_deployer"``, that must be present.
        Case-insensitive.
    network_aliases
        Group name to network names, e.g. ``{"local": ["hardhat", "localhost"]}``.
        Groups without an alias are their own network.
    default_balance
        Balance in wei used for accounts whose value has no balance component.
    separator
        Splits group from user in variable names.
    divider
        Splits address, private key and balance in variable values.
    """

    prefix: str
    required_accounts: tuple[str, ...] = ()
    network_aliases: Mapping[str, tuple[str, ...] | list[str]] = field(default_factory=dict)
    default_balance: str = DEFAULT_BALANCE
    separator: str = DEFAULT_SEPARATOR
    divider: str = DEFAULT_DIVIDER


class EnvAccounts:
    """Query account related environment variables.

    Build it with an :class:`AccountsConfig` and an explicit source, then call
    :meth:`parse` once before any query::

        accounts = EnvAccounts(AccountsConfig(prefix="ACC_"), os.environ).parse()
        accounts.get_prop("local", "deployer", "address")
    """

    def __init__(self, config: AccountsConfig, source: Source) -> None:
        super().__init__()
        self._config = config
        self._parser = EnvParser(source, separator=config.separator, divider=config.divider)
        self._prefix = EnvPrefix()
        self._required_accounts = RequiredAccounts(*config.required_accounts)
        self._network_aliases = NetworkAliases()

    @property
    def config(self) -> AccountsConfig:
        return self._config

    @property
    def parser(self) -> EnvParser:
        return self._parser

    @property
    def groups(self) -> list[GroupLower]:
        return self._parser.get_groups()

    def parse(self) -> Self:
        """Validate the configuration and parse the source.

        This is the final call of the initialisation; every query needs it.
        """
        prefix = self._prefix.set(self._config.prefix).get()
        self._network_aliases = NetworkAliases(self._config.network_aliases)
        self._parser.parse(prefix)
        self._do_after_parse_checks(prefix)
        logger.debug("Accounts ready for groups %s", self._parser.get_groups())
        return self

    def _do_after_parse_checks(self, prefix: str) -> None:
        self._parser.check_if_parsed()
        self._required_accounts.check(self._parser.get_raw_account_keys(), prefix)

    def has_group(self, group: str) -> bool:
        return self._parser.get_group_map().has_l1(GroupLower(group.lower()))

    def has_group_user(self, group: str, user: str) -> bool:
        return self._parser.get_group_map().has_l2(GroupLower(group.lower()), UserLower(user.lower()))

    def get_network_aliases(self) -> dict[str, list[str]]:
        return self._network_aliases.as_dict()

    def get_default_balance(self) -> str:
        return self._config.default_balance

    def get_account(self, group: str, user: str) -> AccountProps:
        """Return the props of ``user`` in ``group`` with the default balance applied."""
        self._parser.check_if_parsed()
        data = self._parser.get_group_map().get_data(GroupLower(group.lower()), UserLower(user.lower()))
        return data.with_balance(self.get_default_balance())

    def get_prop(self, group: str, user: str, prop: AccountProp, *, strict: bool = False) -> str | None:
        """Return a single prop of ``user`` in ``group``.

        A missing balance falls back to the default balance. When the group or
        user does not exist the method returns ``None``, or raises
        :class:`NotFoundError` if ``strict`` is set.
        """
        self._parser.check_if_parsed()
        if prop not in get_args(AccountProp):
            msg = f"unknown account prop: {prop}"
            raise ValueError(msg)
        try:
            account = self.get_account(group, user)
        except NotFoundError:
            if strict:
                raise
            return None
        return getattr(account, prop)

    def get_user_network_props(
        self, data_cb: Callable[[AccountProps], _T] = _identity
    ) -> dict[UserLower, dict[str, _T]]:
        """Return ``user => network => data`` with group names turned into networks.

        With groups ``local`` and ``goerli`` and the alias
        ``{"local": ["hardhat", "localhost"]}`` the result looks like::

            {"deployer": {"hardhat": <local>, "localhost": <local>, "goerli": <goerli>}}

        ``data_cb`` picks what to store per account, e.g.
        ``lambda props: props.address`` for hardhat named accounts.
        """
        self._parser.check_if_parsed()
        record: dict[UserLower, dict[str, _T]] = {}
        for user, group_map in self._parser.get_user_map().get_map().items():
            networks_data = record.setdefault(user, {})
            for group, data in group_map.items():
                for network in self._network_aliases.get(group):
                    networks_data[network] = data_cb(data)
        return record

    def get_network_user_props(
        self, data_cb: Callable[[AccountProps], _T] = _identity
    ) -> dict[str, dict[UserLower, _T]]:
        """Return ``network => user => data``, the transpose of :meth:`get_user_network_props`.

        Groups aliased to the same network are merged into it.
        """
        self._parser.check_if_parsed()
        record: dict[str, dict[UserLower, _T]] = {}
        for group, user_map in self._parser.get_group_map().get_map().items():
            for network in self._network_aliases.get(group):
                users_data = record.setdefault(network, {})
                for user, data in user_map.items():
                    users_data[user] = data_cb(data)
        return record

    def group_array(self, group: str) -> list[AccountProps]:
        """Return the accounts of ``group`` in the order they appear in the source."""
        self._parser.check_if_parsed()
        return self._parser.get_group_map().l2_array(GroupLower(group.lower()))
