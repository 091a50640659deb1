"""
Registry Module Configuration

Which fault kinds the process-wide registry is built from.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Tuple
from .base import ModuleConfig


@dataclass(frozen=True)
class RegistryConfig(ModuleConfig):
    """
    Registry configuration.

    builtin_kinds: Register OutOfMemory / FileNotFound / IndexOutOfRange
    kinds: Extra kinds, each {name, category, description, exceptions}
    """

    builtin_kinds: bool = True
    kinds: Tuple[Mapping[str, Any], ...] = ()

    @classmethod
    def default(cls) -> "RegistryConfig":
        """Default registry configuration"""
        return cls(builtin_kinds=True, kinds=())
