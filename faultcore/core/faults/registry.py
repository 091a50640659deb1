# faultcore/core/faults/registry.py
"""
Fault Registry: Central mapping from fault kind names to FaultKind.

The registry provides:
- Kind registration (register)
- Kind lookup (lookup, has, list_kinds, by_category)
- Exception mapping (match_exception)
- Sealing (seal) after initialization

Design principles:
- Populated once at startup, read-only after seal()
- No remove operation
- Registration is serialized with a lock, reads are lock free
"""

from __future__ import annotations

from typing import Dict, List, Optional, Type
import logging
import threading

from ..errors import DuplicateKindError, UnknownKindError, RegistrySealedError
from .category import FaultCategory
from .models import FaultKind

logger = logging.getLogger(__name__)


class FaultRegistry:
    """
    Central registry for fault kinds.

    Usage:
    ```python
    registry = FaultRegistry()
    registry.register(FaultKind("FileNotFound", FaultCategory.CHECKED))
    registry.seal()

    kind = registry.lookup("FileNotFound")
    ```
    """

    def __init__(self):
        self._kinds: Dict[str, FaultKind] = {}
        self._by_exception: Dict[Type[BaseException], FaultKind] = {}
        self._sealed = False
        self._lock = threading.Lock()

    def register(self, kind: FaultKind) -> None:
        """
        Register a fault kind.

        Args:
            kind: FaultKind to register

        Raises:
            RegistrySealedError: If the registry has been sealed
            DuplicateKindError: If kind.name (or one of its exception
                types) is already registered. Registry state is unchanged.
        """
        with self._lock:
            if self._sealed:
                raise RegistrySealedError(kind.name)
            if kind.name in self._kinds:
                raise DuplicateKindError(kind.name)
            for exc_type in kind.exceptions:
                owner = self._by_exception.get(exc_type)
                if owner is not None:
                    raise DuplicateKindError(
                        kind.name,
                        message=(
                            f"Exception type {exc_type.__name__} is already mapped "
                            f"to fault kind '{owner.name}'"
                        ),
                        exception=exc_type.__name__,
                        owner=owner.name,
                    )

            self._kinds[kind.name] = kind
            for exc_type in kind.exceptions:
                self._by_exception[exc_type] = kind

        logger.debug(f"Registered fault kind {kind.name} ({kind.category.value})")

    def register_multiple(self, kinds: List[FaultKind]) -> None:
        """Register several kinds, stopping at the first failure"""
        for kind in kinds:
            self.register(kind)

    def seal(self) -> None:
        """Make the registry read-only"""
        with self._lock:
            self._sealed = True
        logger.debug(f"Fault registry sealed with {len(self._kinds)} kinds")

    @property
    def sealed(self) -> bool:
        return self._sealed

    def lookup(self, name: str) -> FaultKind:
        """
        Get a fault kind by name.

        Raises:
            UnknownKindError: If no kind is registered under name
        """
        try:
            return self._kinds[name]
        except KeyError:
            raise UnknownKindError(name) from None

    def get(self, name: str) -> Optional[FaultKind]:
        """Get a fault kind by name, or None"""
        return self._kinds.get(name)

    def has(self, name: str) -> bool:
        """Check if a kind is registered"""
        return name in self._kinds

    def contains(self, kind: FaultKind) -> bool:
        """Check if this exact kind is the one registered under its name"""
        return self._kinds.get(kind.name) == kind

    def match_exception(self, exc: BaseException) -> FaultKind:
        """
        Find the kind mapped to an exception, walking its class MRO so
        subclasses resolve to the nearest mapped base.

        Raises:
            UnknownKindError: If no registered kind maps the exception
        """
        for klass in type(exc).__mro__:
            kind = self._by_exception.get(klass)
            if kind is not None:
                return kind
        raise UnknownKindError(
            type(exc).__name__,
            message=f"No fault kind is mapped to exception type {type(exc).__name__}",
        )

    def list_kinds(self) -> List[FaultKind]:
        """List all kinds in registration order"""
        return list(self._kinds.values())

    def by_category(self, category: FaultCategory) -> List[FaultKind]:
        """List all kinds of one category"""
        category = FaultCategory.parse(category)
        return [k for k in self._kinds.values() if k.category is category]

    def count(self) -> int:
        return len(self._kinds)

    def __len__(self) -> int:
        return len(self._kinds)

    def __contains__(self, name: object) -> bool:
        return name in self._kinds

    def __repr__(self) -> str:
        return f"FaultRegistry(kinds={len(self._kinds)}, sealed={self._sealed})"


# Process-wide registry
_default_registry: Optional[FaultRegistry] = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> FaultRegistry:
    """
    Get the process-wide fault registry.

    Lazily built on first access from the loaded configuration and sealed.
    """
    global _default_registry

    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                # Import here to avoid circular imports
                from .builtin import build_registry
                from ...config import load_config

                _default_registry = build_registry(load_config().registry)

    return _default_registry


def set_default_registry(registry: FaultRegistry) -> None:
    """
    Set the process-wide fault registry.

    Useful for testing or custom initialization.
    """
    global _default_registry
    with _default_registry_lock:
        _default_registry = registry


def reset_default_registry() -> None:
    """Drop the process-wide registry so the next access rebuilds it"""
    global _default_registry
    with _default_registry_lock:
        _default_registry = None


__all__ = [
    "FaultRegistry",
    "get_default_registry",
    "set_default_registry",
    "reset_default_registry",
]
