"""
Module Configuration

Configuration for the two configurable modules: Registry and Policy.

YAML is input parameters, code has defaults (YAML can be deleted).
"""

from .base import ModuleConfig
from .registry import RegistryConfig
from .policy import PolicyConfig

__all__ = [
    "ModuleConfig",
    "RegistryConfig",
    "PolicyConfig",
]
