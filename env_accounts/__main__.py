"""Interface for ``python -m env_accounts``."""

from __future__ import annotations

import json
import logging
import os
import sys
from argparse import ArgumentParser, ArgumentTypeError
from typing import TYPE_CHECKING, Any

from ._version import version
from .accounts import DEFAULT_BALANCE, AccountsConfig, EnvAccounts
from .errors import EnvAccountsError


if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from .key_mapping import AccountProps


__all__ = ["main"]

_VIEWS = ("group", "user", "network")
_FIELDS = ("address", "private_key", "balance")


def _alias(value: str) -> tuple[str, list[str]]:
    group, sep, networks = value.partition("=")
    if not sep or not group or not networks:
        msg = f"expected GROUP=NET1,NET2 but got {value!r}"
        raise ArgumentTypeError(msg)
    return group, [network for network in networks.split(",") if network]


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="env_accounts", description="Print accounts parsed from environment variables.")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument("-p", "--prefix", required=True, help="prefix of the account variables, e.g. ACC_")
    _ = parser.add_argument("--view", choices=_VIEWS, default="group", help="nesting of the printed accounts")
    _ = parser.add_argument(
        "--alias",
        type=_alias,
        action="append",
        default=[],
        metavar="GROUP=NET1,NET2",
        help="networks that receive the accounts of a group",
    )
    _ = parser.add_argument("--require", action="append", default=[], metavar="NAME", help="required account name")
    _ = parser.add_argument("--default-balance", default=DEFAULT_BALANCE, help="balance in wei for accounts without one")
    _ = parser.add_argument("--field", choices=_FIELDS, help="print only this account field")
    _ = parser.add_argument("--log-level", default="WARNING", help="logging level")
    return parser


def main(args: Sequence[str] | None = None, environ: Mapping[str, str | None] | None = None) -> None:
    """Argument parser for the CLI."""
    parser = _build_parser()
    options = parser.parse_args(args)
    logging.basicConfig(level=options.log_level.upper(), stream=sys.stderr)

    config = AccountsConfig(
        prefix=options.prefix,
        required_accounts=tuple(options.require),
        network_aliases=dict(options.alias),
        default_balance=options.default_balance,
    )

    def pick(props: AccountProps) -> Any:
        props = props.with_balance(config.default_balance)
        if options.field:
            return getattr(props, options.field)
        return props.to_dict()

    output: dict[str, dict[str, Any]]
    try:
        accounts = EnvAccounts(config, os.environ if environ is None else environ).parse()
        if options.view == "network":
            output = accounts.get_network_user_props(pick)
        else:
            nested = accounts.parser.get_group_map() if options.view == "group" else accounts.parser.get_user_map()
            output = {outer: {inner: pick(data) for inner, data in inner_map.items()} for outer, inner_map in nested.items()}
    except EnvAccountsError as err:
        parser.error(str(err))

    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
