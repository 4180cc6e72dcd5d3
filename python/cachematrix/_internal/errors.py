from __future__ import annotations

import numpy as np


class InversionError(np.linalg.LinAlgError):
    """Raised when a matrix cannot be inverted.

    Covers singular (or computationally singular), non-square, empty and
    non-finite inputs. Subclasses ``numpy.linalg.LinAlgError`` so existing
    NumPy-style handlers still catch it.
    """
