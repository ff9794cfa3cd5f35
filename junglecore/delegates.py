"""Single-cast and multicast delegates."""

from __future__ import annotations

import functools
import threading
from typing import Any, Callable, Optional

_HANDLE_LIMIT = 1 << 64


class UnboundDelegateError(RuntimeError):
    """Raised when an unbound delegate is executed."""


class _HandleCounter:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._next = 1

    def take(self) -> int:
        with self._lock:
            value = self._next
            self._next = (self._next + 1) % _HANDLE_LIMIT
            if value == 0:
                value = self._next
                self._next = (self._next + 1) % _HANDLE_LIMIT
            return value


_counter = _HandleCounter()


class DelegateHandle:
    """Identifies one function registered with a multicast delegate."""

    __slots__ = ("_handle_id",)

    def __init__(self, handle_id: int = 0) -> None:
        self._handle_id = handle_id

    @classmethod
    def create(cls) -> DelegateHandle:
        """A new, valid handle distinct from every other one issued."""
        return cls(_counter.take())

    @property
    def handle_id(self) -> int:
        return self._handle_id

    def is_valid(self) -> bool:
        """Whether the handle refers to anything."""
        return self._handle_id != 0

    def invalidate(self) -> None:
        """Make the handle refer to nothing."""
        self._handle_id = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DelegateHandle):
            return NotImplemented
        return self._handle_id == other._handle_id

    def __hash__(self) -> int:
        return hash(self._handle_id)

    def __repr__(self) -> str:
        return f"DelegateHandle({self._handle_id})"


class Delegate:
    """Holds at most one callable."""

    __slots__ = ("_func",)

    def __init__(self, func: Optional[Callable[..., Any]] = None) -> None:
        self._func = func

    def bind(self, func: Callable[..., Any]) -> None:
        """Bind ``func``, replacing anything bound before."""
        self._func = func

    def unbind(self) -> None:
        """Drop the bound callable."""
        self._func = None

    def is_bound(self) -> bool:
        """Whether a callable is bound."""
        return self._func is not None

    def execute(self, *args: Any) -> Any:
        """Call the bound callable and return its result."""
        if self._func is None:
            raise UnboundDelegateError("delegate is not bound")
        return self._func(*args)

    def execute_if_bound(self, *args: Any) -> bool:
        """Call the bound callable if there is one; report whether it ran."""
        if self._func is None:
            return False
        self._func(*args)
        return True


class MulticastDelegate:
    """Holds any number of callables, each under its own handle."""

    __slots__ = ("_handlers",)

    def __init__(self) -> None:
        self._handlers: dict[DelegateHandle, Callable[..., Any]] = {}

    def __len__(self) -> int:
        return len(self._handlers)

    def add(self, func: Callable[..., Any], *args: Any) -> DelegateHandle:
        """Register ``func``; ``args`` are passed before the broadcast arguments."""
        handle = DelegateHandle.create()
        self._handlers[handle] = functools.partial(func, *args) if args else func
        return handle

    def remove(self, handle: DelegateHandle) -> bool:
        """Unregister the callable under ``handle``; False for an invalid handle."""
        if not handle.is_valid():
            return False
        self._handlers.pop(handle, None)
        return True

    def broadcast(self, *args: Any) -> None:
        """Call every registered callable with ``args``.

        Callables added or removed during the broadcast do not change which
        callables this broadcast calls.
        """
        for func in list(self._handlers.values()):
            func(*args)