"""Duplicate-rejecting two-level mapping."""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, TypeVar, override

from env_accounts.errors import DuplicateKeyError, NotFoundError


L1 = TypeVar("L1", bound=Hashable)
L2 = TypeVar("L2", bound=Hashable)
D = TypeVar("D")


class TwoLevelMap(Mapping[L1, Mapping[L2, D]]):
    """Outer key -> inner key -> payload, with strict write and read rules.

    Every ``(l1, l2)`` coordinate can be written once. Reads of absent keys
    raise :class:`NotFoundError` except for the ``has_*`` probes. Both levels
    keep insertion order.

    Views handed out by :meth:`get_l2`, ``__getitem__`` and :meth:`get_map`
    are read-only. Payloads themselves are returned as stored, without
    copies.
    """

    def __init__(self) -> None:
        super().__init__()
        self._map: dict[L1, dict[L2, D]] = {}

    def add_one(self, level1: L1, level2: L2, data: D) -> None:
        """Store ``data`` at ``(level1, level2)``."""
        inner = self._map.setdefault(level1, {})
        if level2 in inner:
            msg = f"Duplicate {level1}.{level2}"
            raise DuplicateKeyError(msg)
        inner[level2] = data

    def get_map(self) -> Mapping[L1, Mapping[L2, D]]:
        """Return a read-only nested view of the whole structure."""
        return MappingProxyType({level1: MappingProxyType(inner) for level1, inner in self._map.items()})

    def get_data(self, level1: L1, level2: L2) -> D:
        """Return the payload stored at ``(level1, level2)``."""
        inner = self._inner(level1)
        if level2 not in inner:
            msg = f"L2: {level2} requested under L1: {level1} before being defined"
            raise NotFoundError(msg)
        return inner[level2]

    def get_l2(self, level1: L1) -> Mapping[L2, D]:
        """Return the inner mapping stored at ``level1``."""
        return MappingProxyType(self._inner(level1))

    def get_l1_keys(self) -> list[L1]:
        return list(self._map)

    def get_l2_keys(self, level1: L1) -> list[L2]:
        return list(self._inner(level1))

    def has_l1(self, level1: L1) -> bool:
        return level1 in self._map

    def has_l2(self, level1: L1, level2: L2) -> bool:
        """Return True when ``level2`` exists under ``level1``; never raises."""
        try:
            inner = self._inner(level1)
        except NotFoundError:
            return False
        return level2 in inner

    def l2_array(self, level1: L1) -> list[D]:
        """Return the payloads under ``level1`` in insertion order.

        The result carries no inner keys. Its order follows the order the
        payloads were added in, not the order of the keys.
        """
        return list(self._inner(level1).values())

    def _inner(self, level1: L1) -> dict[L2, D]:
        try:
            return self._map[level1]
        except KeyError:
            msg = f"L1: {level1} requested before being defined"
            raise NotFoundError(msg) from None

    @override
    def __getitem__(self, key: L1) -> Mapping[L2, D]:
        return self.get_l2(key)

    @override
    def __iter__(self) -> Iterator[L1]:
        return iter(self._map)

    @override
    def __len__(self) -> int:
        return len(self._map)

    @override
    def __contains__(self, key: Any) -> bool:
        return self.has_l1(key)

    @override
    def __repr__(self) -> str:
        return repr({level1: dict(inner) for level1, inner in self._map.items()})
