from __future__ import annotations

from typing import Any

import numpy as np

from .cached_matrix import CachedMatrix
from .inversion import invert


def cache_solve(x: CachedMatrix, **options: Any) -> np.ndarray:
    """Return the inverse of ``x``, computing and caching it on a miss.

    ``options`` are forwarded verbatim to :func:`cachematrix.invert` and are
    only consulted on a miss. ``InversionError`` propagates unchanged and
    leaves the cache empty.
    """

    if not isinstance(x, CachedMatrix):
        raise TypeError(f"cache_solve expects a CachedMatrix, got {type(x).__name__}")

    with x.locked():
        inv = x.get_inverse()
        if inv is not None:
            return inv
        return x.set_inverse(invert(x.get(), **options))
