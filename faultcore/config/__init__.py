# faultcore/config/__init__.py
"""
FaultCore Configuration

Design principles:
1. Each module has its own semantic configuration
2. YAML is input parameters, code has defaults (YAML can be deleted)
"""

from .modules import (
    ModuleConfig,
    RegistryConfig,
    PolicyConfig,
)
from .loader import DEFAULT_CONFIG_PATH, FaultCoreConfig, load_config
from .validator import validate_config, ConfigIssue

__all__ = [
    "ModuleConfig",
    "RegistryConfig",
    "PolicyConfig",
    "DEFAULT_CONFIG_PATH",
    "FaultCoreConfig",
    "load_config",
    "validate_config",
    "ConfigIssue",
]
