from __future__ import annotations

import warnings
from typing import Any

import numpy as np

from .coercion import as_float_matrix
from .config import get_config
from .errors import InversionError
from .warnings import CacheMatrixConditioningWarning


def _reciprocal_condition(a: np.ndarray, inv: np.ndarray) -> float:
    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        product = float(np.linalg.norm(a, 1)) * float(np.linalg.norm(inv, 1))
    if not np.isfinite(product) or product == 0.0:
        return 0.0
    return 1.0 / product


def invert(
    matrix: Any,
    *,
    tol: float | None = None,
    warn_rcond: float | None = None,
) -> np.ndarray:
    """Compute the inverse of a square, invertible matrix.

    Integer and boolean input is promoted to float64. ``tol`` follows the
    convention of R's ``solve``: a matrix whose reciprocal 1-norm condition
    number falls below ``tol`` is reported as computationally singular, and
    ``tol=0`` disables the check. Matrices that pass ``tol`` but fall below
    ``warn_rcond`` still invert, with a ``CacheMatrixConditioningWarning``.

    Raises ``InversionError`` for non-2D, non-square, empty, non-finite or
    singular input.
    """

    a = as_float_matrix(matrix)
    if a.ndim != 2:
        raise InversionError(f"expected a 2D matrix, got a {a.ndim}D array")
    rows, cols = a.shape
    if rows != cols:
        raise InversionError(f"matrix must be square, got shape ({rows}, {cols})")
    if rows == 0:
        raise InversionError("cannot invert an empty matrix")
    if not np.all(np.isfinite(a)):
        raise InversionError("matrix contains non-finite entries")

    cfg = get_config()
    tol = cfg.tol if tol is None else float(tol)
    warn_rcond = cfg.warn_rcond if warn_rcond is None else float(warn_rcond)

    try:
        inv = np.linalg.inv(a)
    except np.linalg.LinAlgError as exc:
        raise InversionError(f"matrix is exactly singular: {exc}") from exc

    if not np.all(np.isfinite(inv)):
        raise InversionError("matrix is numerically singular: inverse has non-finite entries")

    rcond = _reciprocal_condition(a, inv)
    if rcond < tol:
        raise InversionError(
            f"system is computationally singular: reciprocal condition number = {rcond:g}"
        )
    if rcond < warn_rcond:
        warnings.warn(
            f"matrix is ill-conditioned (reciprocal condition number = {rcond:g}); "
            "the inverse may be inaccurate",
            CacheMatrixConditioningWarning,
            stacklevel=2,
        )
    return inv
