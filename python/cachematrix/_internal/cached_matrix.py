from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Iterator

import numpy as np

from .coercion import empty_matrix, owned_readonly


class CachedMatrix:
    """A matrix that remembers its inverse.

    The container owns its data: input is copied on the way in and both the
    value and the cached inverse are stored read-only. Replacing the value
    always drops the cached inverse in the same locked step, so a stale
    inverse is never observable after ``set``.

    The cached inverse is ``None`` until ``set_inverse`` (usually via
    :func:`cachematrix.cache_solve`) stores one. Nothing here checks that a
    stored inverse actually belongs to the current value.
    """

    def __init__(self, value: Any = None) -> None:
        self._lock = threading.RLock()
        self._value: np.ndarray = empty_matrix() if value is None else owned_readonly(value)
        self._inverse: np.ndarray | None = None

    def set(self, new_value: Any) -> np.ndarray:
        """Replace the matrix and clear the cached inverse. Returns the stored value."""
        stored = owned_readonly(new_value)
        with self._lock:
            self._value = stored
            self._inverse = None
        return stored

    def get(self) -> np.ndarray:
        return self._value

    def set_inverse(self, inverse: Any) -> np.ndarray | None:
        """Store ``inverse`` as the cached inverse (``None`` clears it)."""
        stored = None if inverse is None else owned_readonly(inverse)
        with self._lock:
            self._inverse = stored
        return stored

    def get_inverse(self) -> np.ndarray | None:
        return self._inverse

    @property
    def has_inverse(self) -> bool:
        return self._inverse is not None

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(self._value.shape)

    @contextmanager
    def locked(self) -> Iterator["CachedMatrix"]:
        """Hold the instance lock (reentrant) for a compound read-modify-write."""
        with self._lock:
            yield self

    def __repr__(self) -> str:
        return f"CachedMatrix(shape={self.shape}, cached={self.has_inverse})"
