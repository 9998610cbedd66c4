"""Reference-counted integer identifiers handed out from a fixed pool."""

from __future__ import annotations

import threading
from contextlib import nullcontext
from typing import Any, Optional

from trackercore.rbtree import RedBlackNode, RedBlackTree


class IssuerExhausted(RuntimeError):
    """Raised when an issuer has no identifiers left to give out."""


class IDIssuer:
    """A pool of the identifiers ``0 .. amount-1``.

    An issued identifier carries a reference count; it goes back to the pool
    when the count reaches zero.
    """

    def __init__(self, amount: int, lock: Any = None) -> None:
        self.lock = lock if lock is not None else threading.RLock()
        self._available = RedBlackTree()
        self._issued = RedBlackTree()
        for index in range(amount):
            self._available.insert(RedBlackNode(value=index, data=0))

    @property
    def available(self) -> int:
        """Number of identifiers still in the pool."""
        return len(self._available)

    @property
    def issued(self) -> int:
        """Number of identifiers currently handed out."""
        return len(self._issued)

    def issue(self) -> int:
        """Take an identifier from the pool with a reference count of one."""
        with self.lock:
            root = self._available.root
            if root is None:
                raise IssuerExhausted("no identifiers left")
            node = self._available.remove(root)
            node.data = 1
            self._issued.insert(node)
            return node.value

    def return_id(self, value: int) -> None:
        """Drop one reference; the identifier returns to the pool at zero."""
        with self.lock:
            node = self._issued.find(value)
            if node is None:
                raise KeyError(value)
            node.data -= 1
            if node.data == 0:
                self._available.insert(self._issued.remove(node))

    def increase_count(self, value: int) -> None:
        """Add one reference to an issued identifier."""
        with self.lock:
            node = self._issued.find(value)
            if node is None:
                raise KeyError(value)
            node.data += 1

    def reference_count(self, value: int) -> int:
        """Current reference count of ``value``; zero when it is not issued."""
        with self.lock:
            node = self._issued.find(value)
            return node.data if node is not None else 0


class ID:
    """A handle on an identifier from an ``IDIssuer``.

    A handle starts empty; ``acquire`` takes a fresh identifier, ``copy`` and
    ``assign`` share one and ``release``/``close`` give it back. A handle with
    no issuer, or whose issuer ran dry, is invalid.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, issuer: Optional[IDIssuer]) -> None:
        self._issuer = issuer
        self._empty = True
        self._error = issuer is None
        self._value = 0

    def _locked(self):
        return self._issuer.lock if self._issuer is not None else nullcontext()

    @property
    def issuer(self) -> Optional[IDIssuer]:
        return self._issuer

    @property
    def value(self) -> int:
        return self._value

    def acquire(self) -> int:
        """Take a fresh identifier if the handle is empty and valid."""
        if self._empty and not self._error:
            with self._locked():
                try:
                    self._value = self._issuer.issue()
                except IssuerExhausted:
                    self._error = True
                    raise
                self._empty = False
        return self._value

    def release(self) -> None:
        """Give the identifier back and leave the handle empty."""
        if self._empty:
            return
        with self._locked():
            self._issuer.return_id(self._value)
            self._value = 0
            self._empty = True
            self._error = False

    def is_empty(self) -> bool:
        with self._locked():
            return self._empty

    def is_valid(self) -> bool:
        return not self._error

    def copy(self) -> "ID":
        """Return a new handle sharing this identifier."""
        twin = ID(self._issuer)
        twin._empty = self._empty
        twin._error = self._error
        twin._value = self._value
        if not twin._empty:
            with self._locked():
                self._issuer.increase_count(twin._value)
        return twin

    def assign(self, other: "ID") -> "ID":
        """Drop this handle's identifier and share ``other``'s instead."""
        if not other._error:
            self._issuer = other._issuer
            self._error = False
        elif self._error:
            return self

        with self._locked():
            if not other._empty and not other._error:
                other._issuer.increase_count(other._value)
            if not self._empty:
                self._issuer.return_id(self._value)
            self._empty = other._empty
            self._error = other._error
            self._value = other._value
        return self

    def close(self) -> None:
        """Give back the identifier, if any; safe to call repeatedly."""
        if self._error:
            return
        self.release()

    def __enter__(self) -> "ID":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ID):
            return NotImplemented
        with self._locked():
            if self._error or other._error:
                return False
            if self._empty or other._empty:
                return False
            return self._value == other._value

    def __repr__(self) -> str:
        if self._error:
            return "ID(invalid)"
        if self._empty:
            return "ID(empty)"
        return f"ID({self._value})"