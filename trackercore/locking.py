"""Ordered lock acquisition: locks are grouped into numbered levels.

A hierarchy only lets a caller take locks at a level strictly below the
level it currently holds. Every thread takes locks in the same order, so
deadlocks between them are impossible. Locks are any objects offering
``acquire(blocking=True)`` and ``release()``, such as ``threading.Lock``.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional


class HierarchyError(RuntimeError):
    """Raised when locks are requested out of order or are not registered."""


@dataclass
class _LockNode:
    lock: Any
    acquired: bool = False


@dataclass
class _LockLevel:
    last_level: int
    nodes: list[_LockNode] = field(default_factory=list)


class LockHierarchy:
    """Locks registered in levels, acquired from the highest level down.

    The level count itself means "nothing held". A hierarchy made with
    ``derived`` copies the registered locks of an original once the original
    is marked ready, which gives each thread its own bookkeeping over the
    same lock objects.
    """

    def __init__(self, level_amount: int) -> None:
        self._original: Optional[LockHierarchy] = None
        self._ready = False
        self._level_amount = level_amount
        self._current_level = level_amount
        self._levels = [_LockLevel(level_amount) for _ in range(level_amount)]

    @classmethod
    def derived(cls, original: "LockHierarchy") -> "LockHierarchy":
        """Return a hierarchy that copies ``original`` once it is ready."""
        hierarchy = cls(0)
        hierarchy._original = original
        hierarchy._sync()
        return hierarchy

    @property
    def original(self) -> Optional["LockHierarchy"]:
        return self._original

    @property
    def ready(self) -> bool:
        return self._ready

    @property
    def level_amount(self) -> int:
        return self._level_amount

    @property
    def current_level(self) -> int:
        return self._current_level

    # -- internal -----------------------------------------------------------

    def _sync(self) -> bool:
        original = self._original
        if original is None or not original._ready:
            self._ready = False
            return False
        self._level_amount = original._level_amount
        self._current_level = original._current_level
        self._levels = [
            _LockLevel(level.last_level, [_LockNode(n.lock, n.acquired) for n in level.nodes])
            for level in original._levels
        ]
        self._ready = True
        return True

    def _ensure_ready(self) -> bool:
        return self._ready or self._sync()

    def _check_request(self, wanted: list, level: int) -> None:
        if not self._ensure_ready():
            raise HierarchyError("lock hierarchy is not ready")
        if level < 0 or level >= self._current_level:
            raise HierarchyError(
                f"cannot take level {level} while holding level {self._current_level}"
            )
        if not wanted:
            raise HierarchyError("no locks requested")
        matches = sum(1 for node in self._levels[level].nodes for lock in wanted if node.lock is lock)
        if matches != len(wanted):
            raise HierarchyError(f"requested locks are not all registered at level {level}")

    def _enter_level(self, level: int) -> None:
        self._levels[level].last_level = self._current_level
        self._current_level = level

    # -- public -------------------------------------------------------------

    def add_lock(self, lock: Any, level: int) -> None:
        """Register ``lock`` at ``level``; order of registration is lock order."""
        if level < 0 or level >= self._level_amount:
            raise HierarchyError(f"level {level} is outside 0..{self._level_amount - 1}")
        self._levels[level].nodes.append(_LockNode(lock))

    def try_acquire(self, locks: Iterable[Any], level: int) -> bool:
        """Take all ``locks`` at ``level`` without blocking.

        Returns False, holding none of them, if any one is busy.
        """
        wanted = list(locks)
        self._check_request(wanted, level)
        taken: list[_LockNode] = []
        for node in self._levels[level].nodes:
            for lock in wanted:
                if node.lock is not lock:
                    continue
                if lock.acquire(blocking=False):
                    node.acquired = True
                    taken.append(node)
                else:
                    for held in reversed(taken):
                        held.lock.release()
                        held.acquired = False
                    return False
        self._enter_level(level)
        return True

    def acquire(self, locks: Iterable[Any], level: int) -> None:
        """Take all ``locks`` at ``level``, blocking, in registration order."""
        wanted = list(locks)
        self._check_request(wanted, level)
        for node in self._levels[level].nodes:
            for lock in wanted:
                if node.lock is lock:
                    lock.acquire()
                    node.acquired = True
        self._enter_level(level)

    def is_lock_acquired(self, lock: Any, level: int) -> bool:
        """Whether ``lock``, registered at ``level``, is held through this hierarchy."""
        for node in self._levels[level].nodes:
            if node.lock is lock:
                return node.acquired
        return False

    def release(self) -> None:
        """Release the locks of the current level and return to the previous one."""
        if not self._ensure_ready():
            return
        if self._current_level >= self._level_amount:
            return
        level = self._levels[self._current_level]
        for node in reversed(level.nodes):
            if node.acquired:
                node.lock.release()
                node.acquired = False
        self._current_level = level.last_level

    def set_ready(self) -> None:
        """Mark the registration complete; derived hierarchies may copy it."""
        self._ready = True

    def is_level_acquired(self, level: int) -> bool:
        """Whether ``level`` is among the levels currently held."""
        current = self._current_level
        while current != self._level_amount:
            if current == level:
                return True
            current = self._levels[current].last_level
        return False

    def format_locks(self) -> str:
        """Describe the registered locks, one level per block."""
        if not self._ensure_ready():
            return ""
        lines = []
        for index, level in enumerate(self._levels):
            lines.append(f"level {index}:")
            lines.append(" ".join(repr(node.lock) for node in level.nodes))
        return "\n".join(lines) + "\n"

    @contextmanager
    def guard(self, locks: Iterable[Any], level: int) -> Iterator["LockHierarchy"]:
        """Hold ``locks`` at ``level`` for the duration of a ``with`` block."""
        self.acquire(locks, level)
        try:
            yield self
        finally:
            self.release()