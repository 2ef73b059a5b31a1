"""Group to network name aliases."""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from typing import Self


class NetworkAliases:
    """Map a group to the network names that should receive its accounts.

    A group with no alias is its own single network, so ``get("goerli")``
    returns ``["goerli"]`` unless an alias was set. Group and network names
    are lowercased.
    """

    def __init__(self, aliases: Mapping[str, Iterable[str]] | None = None) -> None:
        super().__init__()
        self._aliases: dict[str, list[str]] = {}
        for group, networks in (aliases or {}).items():
            _ = self.set(group, networks)

    def set(self, group: str, networks: Iterable[str]) -> Self:
        self._aliases[group.lower()] = [network.lower() for network in networks]
        return self

    def get(self, group: str) -> list[str]:
        group_lower = group.lower()
        return list(self._aliases.get(group_lower, [group_lower]))

    def as_dict(self) -> dict[str, list[str]]:
        return {group: list(networks) for group, networks in self._aliases.items()}
