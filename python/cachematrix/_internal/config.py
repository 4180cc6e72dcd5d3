from __future__ import annotations

import os
import threading
from dataclasses import dataclass, fields, replace
from typing import Any

import numpy as np

TOL_ENV_VAR = "CACHEMATRIX_TOL"
WARN_RCOND_ENV_VAR = "CACHEMATRIX_WARN_RCOND"

_DEFAULT_TOL = float(np.finfo(np.float64).eps)
_DEFAULT_WARN_RCOND = 1e-12


@dataclass(frozen=True)
class InversionConfig:
    """Process-wide defaults for :func:`cachematrix.invert`.

    ``tol`` is the reciprocal condition number below which a matrix is treated
    as computationally singular. ``warn_rcond`` is the (larger) threshold below
    which the inverse is still returned but a conditioning warning is issued.
    """

    tol: float = _DEFAULT_TOL
    warn_rcond: float = _DEFAULT_WARN_RCOND

    def validate(self) -> "InversionConfig":
        for f in fields(self):
            value = getattr(self, f.name)
            if not np.isfinite(value) or value < 0:
                raise ValueError(f"{f.name} must be a finite non-negative number, got {value!r}")
        if self.warn_rcond < self.tol:
            raise ValueError("warn_rcond must be >= tol")
        return self


_lock = threading.Lock()
_config_cache: InversionConfig | None = None


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def _load_from_env() -> InversionConfig:
    tol = _env_float(TOL_ENV_VAR, _DEFAULT_TOL)
    warn_rcond = _env_float(WARN_RCOND_ENV_VAR, max(_DEFAULT_WARN_RCOND, tol))
    return InversionConfig(tol=tol, warn_rcond=warn_rcond).validate()


def get_config() -> InversionConfig:
    global _config_cache
    with _lock:
        if _config_cache is None:
            _config_cache = _load_from_env()
        return _config_cache


def set_config(**changes: Any) -> InversionConfig:
    """Replace fields of the active config; returns the new config."""
    global _config_cache
    current = get_config()
    updated = replace(current, **changes).validate()
    with _lock:
        _config_cache = updated
    return updated


def reset_config() -> None:
    """Forget the active config; the next lookup re-reads the environment."""
    global _config_cache
    with _lock:
        _config_cache = None
