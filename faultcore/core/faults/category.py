# faultcore/core/faults/category.py
"""
Fault categories

Three-tier classification of faults:
- FATAL: the process cannot recover locally and must terminate
- CHECKED: recoverable, but call paths must declare handling up front
- UNCHECKED: recoverable, caused by caller logic, declaration optional
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Union


class FaultCategory(str, Enum):
    """Fault category (process-wide constant set)"""
    FATAL = "fatal"          # Abort, never recovered
    CHECKED = "checked"      # Must be declared and handled
    UNCHECKED = "unchecked"  # May be handled

    @property
    def rank(self) -> int:
        """Severity rank, higher is more severe"""
        return _RANKS[self]

    @property
    def recoverable(self) -> bool:
        return is_recoverable(self)

    @property
    def requires_declaration(self) -> bool:
        return requires_static_declaration(self)

    @classmethod
    def parse(cls, value: Union["FaultCategory", str]) -> "FaultCategory":
        """
        Parse a category from its value, name or a familiar alias.

        Raises:
            ValueError: If value names no category
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key in _ALIASES:
            return _ALIASES[key]
        raise ValueError(
            f"Unknown fault category '{value}'. "
            f"Expected one of: {', '.join(c.value for c in cls)}"
        )


_RANKS = {
    FaultCategory.FATAL: 3,
    FaultCategory.CHECKED: 2,
    FaultCategory.UNCHECKED: 1,
}

_ALIASES = {
    "fatal": FaultCategory.FATAL,
    "error": FaultCategory.FATAL,
    "checked": FaultCategory.CHECKED,
    "exception": FaultCategory.CHECKED,
    "unchecked": FaultCategory.UNCHECKED,
    "runtime": FaultCategory.UNCHECKED,
}


def is_recoverable(category: Union[FaultCategory, str]) -> bool:
    """True for CHECKED and UNCHECKED, False for FATAL"""
    return FaultCategory.parse(category) is not FaultCategory.FATAL


def requires_static_declaration(category: Union[FaultCategory, str]) -> bool:
    """True only for CHECKED"""
    return FaultCategory.parse(category) is FaultCategory.CHECKED


def most_severe(categories: Iterable[Union[FaultCategory, str]]) -> FaultCategory:
    """
    Return the highest-ranked category.

    Raises:
        ValueError: If categories is empty
    """
    return max((FaultCategory.parse(c) for c in categories), key=lambda c: c.rank)


__all__ = [
    "FaultCategory",
    "is_recoverable",
    "requires_static_declaration",
    "most_severe",
]
