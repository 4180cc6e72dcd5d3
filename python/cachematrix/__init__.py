"""Matrices that cache their inverse.

``CachedMatrix`` holds a matrix and, once computed, its inverse;
``cache_solve`` returns that inverse, computing it only on a cache miss.
Replacing the matrix with ``CachedMatrix.set`` clears the cache.
"""
from __future__ import annotations

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "unknown"

from ._internal.cached_matrix import CachedMatrix
from ._internal.config import InversionConfig, get_config, reset_config, set_config
from ._internal.errors import InversionError
from ._internal.inversion import invert
from ._internal.solve import cache_solve
from ._internal.warnings import (
    CacheMatrixWarning,
    CacheMatrixConditioningWarning,
)

__all__ = [
    "CachedMatrix",
    "cache_solve",
    "invert",
    "InversionError",
    "InversionConfig",
    "get_config",
    "set_config",
    "reset_config",
    "CacheMatrixWarning",
    "CacheMatrixConditioningWarning",
    "__version__",
]
