# faultcore/__init__.py
"""
FaultCore - fault classification and handling policy

Faults fall into three categories:
- FATAL: no local recovery, the process terminates
- CHECKED: recoverable, handling must be declared on the call path
- UNCHECKED: recoverable, caused by caller logic, handling optional

Basic usage:
    >>> from faultcore import RaisedFault, classify, get_default_registry
    >>> registry = get_default_registry()
    >>> fault = RaisedFault(registry.lookup("FileNotFound"), context="settings.yml")
    >>> classify(fault).outcome
    <FaultState.ABORTED: 'aborted'>

With handlers declared on the call path:
    >>> from faultcore import handling
    >>> with handling(FileNotFound=lambda fault: "{}"):
    ...     classify(fault).value
    '{}'

Decorator style:
    >>> from faultcore import guard, throws
    >>> @guard(handlers={"FileNotFound": lambda fault: ""})
    ... @throws("FileNotFound")
    ... def read_settings(path):
    ...     with open(path) as f:
    ...         return f.read()
"""

__version__ = "0.1.0"

# Fault model
from .core.faults import (
    FaultCategory,
    is_recoverable,
    requires_static_declaration,
    most_severe,
    FaultKind,
    RaisedFault,
    FaultRegistry,
    get_default_registry,
    set_default_registry,
    reset_default_registry,
    build_registry,
)

# Handling policy
from .core.policy import (
    FaultState,
    Disposition,
    HandlingOutcome,
    HandlerChain,
    handling,
    PolicyEngine,
    classify,
)

# Errors
from .core.errors import (
    FaultCoreError,
    DuplicateKindError,
    UnknownKindError,
    RegistrySealedError,
    FaultAbort,
    ConfigError,
)

# User-facing API
from .api import enact, throws, guard

# Configuration
from .config import FaultCoreConfig, load_config

__all__ = [
    "__version__",

    # Fault model
    "FaultCategory",
    "is_recoverable",
    "requires_static_declaration",
    "most_severe",
    "FaultKind",
    "RaisedFault",
    "FaultRegistry",
    "get_default_registry",
    "set_default_registry",
    "reset_default_registry",
    "build_registry",

    # Handling policy
    "FaultState",
    "Disposition",
    "HandlingOutcome",
    "HandlerChain",
    "handling",
    "PolicyEngine",
    "classify",

    # Errors
    "FaultCoreError",
    "DuplicateKindError",
    "UnknownKindError",
    "RegistrySealedError",
    "FaultAbort",
    "ConfigError",

    # API
    "enact",
    "throws",
    "guard",

    # Configuration
    "FaultCoreConfig",
    "load_config",
]
