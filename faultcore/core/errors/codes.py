# faultcore/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- canonical error codes (stable public contract) ----
# generic
UNKNOWN: Final[str] = "UNKNOWN"
INTERNAL_ERROR: Final[str] = "INTERNAL_ERROR"
INVALID_ARGUMENT: Final[str] = "INVALID_ARGUMENT"
INVALID_CONFIG: Final[str] = "INVALID_CONFIG"

# registry
DUPLICATE_KIND: Final[str] = "DUPLICATE_KIND"
UNKNOWN_KIND: Final[str] = "UNKNOWN_KIND"
REGISTRY_SEALED: Final[str] = "REGISTRY_SEALED"

# policy
FAULT_ABORTED: Final[str] = "FAULT_ABORTED"
NOT_CHECKED: Final[str] = "NOT_CHECKED"
UNDECLARED_CHECKED: Final[str] = "UNDECLARED_CHECKED"


# ---- semantic groups (internal helpers) ----

REGISTRY_CODES: Final[set[str]] = {
    DUPLICATE_KIND,
    UNKNOWN_KIND,
    REGISTRY_SEALED,
}

POLICY_CODES: Final[set[str]] = {
    FAULT_ABORTED,
    NOT_CHECKED,
    UNDECLARED_CHECKED,
}

KNOWN_CODES: Final[set[str]] = {
    UNKNOWN,
    INTERNAL_ERROR,
    INVALID_ARGUMENT,
    INVALID_CONFIG,
} | REGISTRY_CODES | POLICY_CODES
