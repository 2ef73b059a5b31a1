"""Nested mapping containers."""

from .two_level import TwoLevelMap


__all__ = ["TwoLevelMap"]
