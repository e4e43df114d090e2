# vecgrad/core/precision.py
"""
Default numeric precision for value buffers.

Buffers are created as float64 unless a dtype is passed explicitly or the
default is changed with `set_precision` / `precision_context`.
"""
from __future__ import annotations
from contextlib import contextmanager
from enum import Enum
from typing import Iterator, Type, Union

import numpy as np


class PrecisionMode(Enum):
    """Supported floating-point precisions."""
    FLOAT32 = np.float32
    FLOAT64 = np.float64

    @property
    def numpy_dtype(self) -> Type[np.floating]:
        return self.value

    @property
    def bits(self) -> int:
        return np.dtype(self.value).itemsize * 8


_MODE_NAMES = {
    "float32": PrecisionMode.FLOAT32,
    "float64": PrecisionMode.FLOAT64,
}


class PrecisionConfig:
    """Process-wide default precision (float64 unless changed)."""

    _default_mode: PrecisionMode = PrecisionMode.FLOAT64

    @classmethod
    def set_precision(cls, mode: Union[PrecisionMode, str]) -> None:
        """
        Set the default precision mode.

        Raises
        ------
        ValueError
            If `mode` is not a known precision.
        """
        cls._default_mode = _resolve(mode)

    @classmethod
    def get_precision(cls) -> PrecisionMode:
        return cls._default_mode

    @classmethod
    def get_dtype(cls) -> np.dtype:
        return np.dtype(cls._default_mode.numpy_dtype)


def _resolve(mode: Union[PrecisionMode, str]) -> PrecisionMode:
    if isinstance(mode, str):
        if mode not in _MODE_NAMES:
            raise ValueError(f"Unsupported precision mode: {mode}")
        return _MODE_NAMES[mode]
    if not isinstance(mode, PrecisionMode):
        raise ValueError(f"Invalid precision mode: {mode!r}")
    return mode


def set_precision(mode: Union[PrecisionMode, str]) -> None:
    PrecisionConfig.set_precision(mode)


def default_dtype() -> np.dtype:
    return PrecisionConfig.get_dtype()


@contextmanager
def precision_context(mode: Union[PrecisionMode, str]) -> Iterator[PrecisionMode]:
    """
    Temporarily switch the default precision:
        with precision_context("float32"):
            x = GradVec([1.0, 2.0])   # float32 buffer
    """
    prev = PrecisionConfig.get_precision()
    try:
        PrecisionConfig.set_precision(mode)
        yield PrecisionConfig.get_precision()
    finally:
        PrecisionConfig._default_mode = prev


def is_floating(values: np.ndarray) -> bool:
    """True when the buffer's dtype supports the elementary functions."""
    return np.issubdtype(values.dtype, np.floating)
