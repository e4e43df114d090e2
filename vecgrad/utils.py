# vecgrad/utils.py
from typing import Any, Optional

import numpy as np


def diag(dim: int, value, dtype: Optional[Any] = None) -> np.ndarray:
    """dim x dim matrix with `value` on the diagonal and zero elsewhere."""
    if dim < 0:
        raise ValueError(f"dimension must be non-negative, got {dim}")
    out = np.zeros((dim, dim), dtype=dtype if dtype is not None else np.result_type(value))
    np.fill_diagonal(out, value)
    return out
