# faultcore/core/policy/handlers.py
"""
Handler scopes

A handler declared "along the call path" is modelled as a frame in an
immutable chain. The active chain lives in a ContextVar, so nested
`handling(...)` blocks stack like try/except blocks and each thread or
asyncio task sees only its own chain.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Union, TYPE_CHECKING

from ..faults.models import RaisedFault

if TYPE_CHECKING:
    from ..faults.registry import FaultRegistry


Handler = Callable[[RaisedFault], Any]


class HandlerChain:
    """
    Immutable chain of handler frames, innermost first.

    Example:
        >>> chain = HandlerChain.empty().push({"FileNotFound": lambda f: ""})
        >>> chain.find("FileNotFound") is not None
        True
    """

    __slots__ = ("_frame", "_parent")

    def __init__(
        self,
        frame: Optional[Mapping[str, Handler]] = None,
        parent: Optional["HandlerChain"] = None,
    ):
        self._frame: Mapping[str, Handler] = MappingProxyType(dict(frame or {}))
        self._parent = parent

    @classmethod
    def empty(cls) -> "HandlerChain":
        return _EMPTY

    def push(self, frame: Mapping[str, Handler]) -> "HandlerChain":
        """Return a new chain with frame innermost"""
        for name, handler in frame.items():
            if not callable(handler):
                raise TypeError(f"Handler for '{name}' is not callable: {handler!r}")
        return HandlerChain(frame, parent=self)

    def find(self, kind_name: str) -> Optional[Handler]:
        """Innermost handler declared for kind_name, or None"""
        chain: Optional[HandlerChain] = self
        while chain is not None:
            handler = chain._frame.get(kind_name)
            if handler is not None:
                return handler
            chain = chain._parent
        return None

    def declared(self) -> frozenset:
        """Names of every kind with a handler somewhere in the chain"""
        names = set()
        chain: Optional[HandlerChain] = self
        while chain is not None:
            names.update(chain._frame)
            chain = chain._parent
        return frozenset(names)

    @property
    def depth(self) -> int:
        depth = 0
        chain = self._parent
        while chain is not None:
            depth += 1
            chain = chain._parent
        return depth

    def __repr__(self) -> str:
        return f"HandlerChain(depth={self.depth}, kinds={sorted(self.declared())})"


_EMPTY = HandlerChain()

CURRENT_HANDLERS: ContextVar[HandlerChain] = ContextVar(
    "CURRENT_HANDLERS",
    default=_EMPTY,
)


def current_chain() -> HandlerChain:
    """Handler chain active on the current call path"""
    return CURRENT_HANDLERS.get()


def as_chain(handlers: Union[HandlerChain, Mapping[str, Handler], None]) -> HandlerChain:
    """Normalize an explicit handlers argument (None means the ambient chain)"""
    if handlers is None:
        return current_chain()
    if isinstance(handlers, HandlerChain):
        return handlers
    return HandlerChain.empty().push(handlers)


@contextmanager
def handling(
    handlers: Optional[Mapping[str, Handler]] = None,
    *,
    registry: Optional["FaultRegistry"] = None,
    **named: Handler,
) -> Iterator[HandlerChain]:
    """
    Declare handlers for the duration of a block.

    Args:
        handlers: Mapping of kind name -> handler
        registry: Registry used to validate kind names (default registry if None)
        **named: Handlers given as keyword arguments

    Raises:
        UnknownKindError: If a kind name is not registered

    Example:
        >>> with handling(FileNotFound=lambda fault: "default"):
        ...     outcome = classify(fault)
    """
    frame: Dict[str, Handler] = {**(handlers or {}), **named}

    if registry is None:
        from ..faults.registry import get_default_registry
        registry = get_default_registry()
    for name in frame:
        registry.lookup(name)

    chain = current_chain().push(frame)
    token = CURRENT_HANDLERS.set(chain)
    try:
        yield chain
    finally:
        CURRENT_HANDLERS.reset(token)


__all__ = [
    "Handler",
    "HandlerChain",
    "CURRENT_HANDLERS",
    "current_chain",
    "as_chain",
    "handling",
]
