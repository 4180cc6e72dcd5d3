from __future__ import annotations

from typing import Any

import numpy as np

_EMPTY_SHAPE = (0, 0)


def empty_matrix() -> np.ndarray:
    """Placeholder value for a CachedMatrix constructed without data."""
    out = np.empty(_EMPTY_SHAPE, dtype=np.float64)
    out.flags.writeable = False
    return out


def owned_readonly(candidate: Any) -> np.ndarray:
    """Return a private, read-only copy of ``candidate``.

    Shape is not validated here; only data that cannot be read as a numeric
    array is rejected.
    """

    try:
        array = np.array(candidate, copy=True)
    except (TypeError, ValueError) as exc:
        raise TypeError(f"Matrix data must be numeric array-like: {exc}") from exc

    if array.dtype.kind not in "biufc":
        raise TypeError(
            f"Matrix data must be numeric (got dtype {array.dtype})."
        )
    array.flags.writeable = False
    return array


def as_float_matrix(candidate: Any) -> np.ndarray:
    # Integer/bool input is promoted so the inverse is never truncated.
    array = np.asarray(candidate)
    if array.dtype.kind in "biu":
        array = array.astype(np.float64)
    return array
