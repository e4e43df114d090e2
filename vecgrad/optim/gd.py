# vecgrad/optim/gd.py
from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Iterable, List

import numpy as np

from ..core.precision import is_floating
from ..core.var import GradVec

logger = logging.getLogger(__name__)


@dataclass
class GDConfig:
    """Settings for `GradientDescent.from_config`."""
    lr: float = 0.01
    verbose: bool = False


class GradientDescent:
    """
    Plain gradient descent with a fixed learning rate.

    The optimizer borrows its parameters: `step` writes the update straight
    into each parameter's buffer and leaves its node alone, so graphs built
    afterwards still recognise the parameter by identity. Nothing is kept
    between steps.
    """

    def __init__(self, lr: float, params: Iterable[GradVec], *, verbose: bool = False):
        if not math.isfinite(lr):
            raise ValueError(f"learning rate must be finite, got {lr}")
        self.lr = lr
        self.params: List[GradVec] = list(params)
        self.verbose = verbose
        for i, p in enumerate(self.params):
            if not isinstance(p, GradVec):
                raise TypeError(f"parameter {i} is a {type(p).__name__}, not a GradVec")
            if not is_floating(p.values):
                raise TypeError(f"parameter {i} has non-floating dtype {p.values.dtype}")

    @classmethod
    def from_config(cls, config: GDConfig, params: Iterable[GradVec]) -> "GradientDescent":
        return cls(config.lr, params, verbose=config.verbose)

    def step(self, loss: GradVec) -> None:
        """
        One update p <- p - lr * d(loss)/d(p) for every parameter, in order.

        All gradients are taken before any buffer is written, since the
        loss graph may hold references to the parameter buffers.
        """
        grads = [loss.evaluate_grad(p) for p in self.params]
        for i, (p, g) in enumerate(zip(self.params, grads)):
            p.values -= self.lr * g
            logger.debug("param %d: |grad| = %.6g", i, float(np.linalg.norm(g)))
        if self.verbose:
            logger.info("loss sum = %.6g", float(np.sum(loss.values)))


def gd(*params: GradVec, lr: float) -> GradientDescent:
    """Shorthand: gd(t1, t2, lr=0.005)."""
    return GradientDescent(lr, params)
