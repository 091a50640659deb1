# faultcore/api/guard.py
"""
throws / guard decorators - bridge Python exceptions to fault handling
"""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, Optional
import inspect
import logging

from ..config import PolicyConfig
from ..core.errors import FaultCoreError, UnknownKindError, codes
from ..core.faults.category import FaultCategory
from ..core.faults.models import RaisedFault
from ..core.faults.registry import FaultRegistry, get_default_registry
from ..core.policy.engine import Handlers, PolicyEngine
from .enact import enact

logger = logging.getLogger(__name__)

DECLARED_ATTR = "__faults_declared__"


def declared_faults(fn: Callable) -> frozenset:
    """Checked kinds fn declares via @throws"""
    return getattr(fn, DECLARED_ATTR, frozenset())


def throws(*kind_names: str, registry: Optional[FaultRegistry] = None) -> Callable:
    """
    Declare the checked fault kinds a function may raise.

    Kinds are validated when the function is decorated.

    Raises:
        UnknownKindError: If a kind is not registered
        FaultCoreError: NOT_CHECKED if a kind is not checked

    Example:
        >>> @throws("FileNotFound")
        ... def load_settings(path): ...
    """
    def decorate(fn: Callable) -> Callable:
        reg = registry or get_default_registry()
        for name in kind_names:
            kind = reg.lookup(name)
            if kind.category is not FaultCategory.CHECKED:
                raise FaultCoreError.not_checked(name, kind.category.value)

        setattr(fn, DECLARED_ATTR, declared_faults(fn) | frozenset(kind_names))
        return fn

    return decorate


def guard(
    fn: Optional[Callable] = None,
    *,
    context: Optional[str] = None,
    handlers: Handlers = None,
    registry: Optional[FaultRegistry] = None,
    policy: Optional[PolicyConfig] = None,
) -> Callable:
    """
    Guard decorator - classify exceptions raised by fn and act on them.

    Exceptions mapped to a registered kind become a RaisedFault, are
    classified and enacted: recovered values are returned in place of the
    call's result, aborts terminate the process. Unmapped exceptions
    propagate unchanged.

    Args:
        fn: Function to decorate (supports @guard and @guard())
        context: Call site description (default: function name and error)
        handlers: Explicit handlers (default: handlers on the call path)
        registry: Registry to classify against (default registry if None)
        policy: Policy used when enacting (loaded configuration if None)

    Usage:
        >>> @guard(handlers={"FileNotFound": lambda fault: ""})
        ... @throws("FileNotFound")
        ... def read_settings(path):
        ...     with open(path) as f:
        ...         return f.read()
    """
    def decorate(func: Callable) -> Callable:
        def _on_fault(exc: Exception) -> Any:
            reg = registry or get_default_registry()
            try:
                kind = reg.match_exception(exc)
            except UnknownKindError:
                kind = None
            if kind is None:
                raise exc

            if (
                kind.category is FaultCategory.CHECKED
                and kind.name not in declared_faults(func)
            ):
                logger.warning(
                    f"[{codes.UNDECLARED_CHECKED}] {func.__qualname__} raised checked "
                    f"fault {kind.name} without declaring it"
                )

            fault = RaisedFault(
                kind=kind,
                context=context or f"{func.__qualname__}: {exc}",
                cause=exc,
            )
            outcome = PolicyEngine(reg).classify(fault, handlers)
            return enact(outcome, policy)

        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                try:
                    return await func(*args, **kwargs)
                except Exception as exc:
                    return _on_fault(exc)
            return async_wrapper

        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as exc:
                return _on_fault(exc)
        return wrapper

    if fn is not None:
        return decorate(fn)
    return decorate


__all__ = [
    "DECLARED_ATTR",
    "declared_faults",
    "throws",
    "guard",
]
