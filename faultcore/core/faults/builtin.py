# faultcore/core/faults/builtin.py
"""
Bootstrap: Register built-in fault kinds.

Built-in kinds mirror the three classic demonstrations:
- OutOfMemory: an unbounded loop exhausts the heap (fatal)
- FileNotFound: reading a file that does not exist (checked)
- IndexOutOfRange: an off-by-one array access (unchecked)
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Type, TYPE_CHECKING
import builtins
import importlib
import logging

from ..errors import ConfigError
from .category import FaultCategory
from .models import FaultKind
from .registry import FaultRegistry

if TYPE_CHECKING:
    from ...config.modules import RegistryConfig

logger = logging.getLogger(__name__)


OUT_OF_MEMORY = FaultKind(
    name="OutOfMemory",
    category=FaultCategory.FATAL,
    description="The process ran out of memory; no local recovery is possible.",
    exceptions=(MemoryError,),
)

FILE_NOT_FOUND = FaultKind(
    name="FileNotFound",
    category=FaultCategory.CHECKED,
    description="A required file does not exist; callers must declare and handle it.",
    exceptions=(FileNotFoundError,),
)

INDEX_OUT_OF_RANGE = FaultKind(
    name="IndexOutOfRange",
    category=FaultCategory.UNCHECKED,
    description="A sequence was indexed outside its bounds; usually a caller logic error.",
    exceptions=(IndexError,),
)

BUILTIN_KINDS: tuple[FaultKind, ...] = (
    OUT_OF_MEMORY,
    FILE_NOT_FOUND,
    INDEX_OUT_OF_RANGE,
)


def resolve_exception(path: str) -> Type[BaseException]:
    """
    Resolve a dotted path (or bare builtin name) to an exception type.

    Raises:
        ConfigError: If the path cannot be imported or is not an exception type
    """
    module_name, _, attr = path.rpartition(".")
    try:
        if module_name:
            target = getattr(importlib.import_module(module_name), attr)
        else:
            target = getattr(builtins, attr)
    except (ImportError, AttributeError) as e:
        raise ConfigError(
            f"Cannot resolve exception type '{path}'",
            details={"path": path},
            cause=e,
        ) from e

    if not (isinstance(target, type) and issubclass(target, BaseException)):
        raise ConfigError(f"'{path}' is not an exception type", details={"path": path})
    return target


def kind_from_mapping(data: Mapping[str, Any]) -> FaultKind:
    """
    Build a FaultKind from a config mapping:
    {name, category, description?, exceptions?: [dotted.path, ...]}

    Raises:
        ConfigError: If the mapping is malformed
    """
    if not isinstance(data, Mapping):
        raise ConfigError(f"Fault kind definition must be a mapping, got {type(data).__name__}")

    name = data.get("name")
    try:
        return FaultKind(
            name=name,
            category=FaultCategory.parse(data.get("category", "")),
            description=data.get("description", "") or "",
            exceptions=tuple(resolve_exception(p) for p in data.get("exceptions", ()) or ()),
        )
    except (TypeError, ValueError) as e:
        raise ConfigError(
            f"Invalid fault kind definition {name!r}: {e}",
            details={"kind": name},
            cause=e,
        ) from e


def register_builtin_kinds(registry: FaultRegistry) -> None:
    """Register the built-in kinds into registry"""
    registry.register_multiple(list(BUILTIN_KINDS))


def build_registry(config: Optional["RegistryConfig"] = None) -> FaultRegistry:
    """
    Build and seal a registry from configuration.

    Args:
        config: Registry configuration (code defaults if None)

    Returns:
        Sealed FaultRegistry
    """
    if config is None:
        from ...config.modules import RegistryConfig
        config = RegistryConfig.default()

    registry = FaultRegistry()
    if config.builtin_kinds:
        register_builtin_kinds(registry)

    extra: List[FaultKind] = [kind_from_mapping(k) for k in config.kinds]
    registry.register_multiple(extra)
    registry.seal()

    logger.debug(
        f"Built fault registry: {registry.count()} kinds "
        f"({len(extra)} from configuration)"
    )
    return registry


__all__ = [
    "OUT_OF_MEMORY",
    "FILE_NOT_FOUND",
    "INDEX_OUT_OF_RANGE",
    "BUILTIN_KINDS",
    "resolve_exception",
    "kind_from_mapping",
    "register_builtin_kinds",
    "build_registry",
]
