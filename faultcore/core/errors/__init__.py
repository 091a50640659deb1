# faultcore/core/errors/__init__.py
"""
Core error types for FaultCore.

This package defines the components responsible for:
- Representing registry and policy errors
- Giving them stable error codes

No side effects on import.
"""

from . import codes
from .exceptions import (
    FaultCoreError,
    DuplicateKindError,
    UnknownKindError,
    RegistrySealedError,
    FaultAbort,
    ConfigError,
)

__all__ = [
    "codes",
    "FaultCoreError",
    "DuplicateKindError",
    "UnknownKindError",
    "RegistrySealedError",
    "FaultAbort",
    "ConfigError",
]
