"""
Building a Large Language Model from Scratch
— A Step-by-Step Guide Using Python and PyTorch

(c) Dr. Yves J. Hilpisch (The Python Quants GmbH)
AI-Powered by GPT-5.

Mean-squared-error gradient for the one-variable model f(x) = w*x + b.

For n samples with residuals r_i = (w*x_i + b) - y_i:
    dw = sum(r_i * x_i) / n
    db = sum(r_i) / n
The factor 2 from differentiating the square is folded into the learning
rate, so it does not appear here.
"""

from __future__ import annotations


from dataclasses import dataclass
from typing import Sequence, Union

import torch

from linreg.series import Series


class DegenerateInputError(ValueError):
    """Raised when there are no samples to average over."""


@dataclass
class Parameters:
    """Current model state; the training loop updates it in place."""
    w: float = 0.0
    b: float = 0.0


@dataclass(frozen=True)
class Gradient:
    dw: float
    db: float


SeriesLike = Union[Series, torch.Tensor, Sequence[int]]


def as_tensor(values: SeriesLike) -> torch.Tensor:
    if isinstance(values, Series):
        return values.as_tensor()
    if isinstance(values, torch.Tensor):
        return values.to(torch.float64)
    return torch.tensor(list(values), dtype=torch.float64)


def gradient(x: SeriesLike, y: SeriesLike, params: Parameters) -> Gradient:
    """Average MSE gradient w.r.t. (w, b) over all samples.

    - x, y: paired samples of equal, non-zero length
    - params: the (w, b) to evaluate at; not modified
    """
    xt = as_tensor(x)
    yt = as_tensor(y)
    n = xt.numel()
    if n == 0:
        raise DegenerateInputError("gradient needs at least one sample")
    if yt.numel() != n:
        raise ValueError(f"x and y differ in length ({n} != {yt.numel()})")
    # Prediction and residual for every sample at once
    residual = (params.w * xt + params.b) - yt
    dw = float((residual * xt).sum().item()) / n
    db = float(residual.sum().item()) / n
    return Gradient(dw=dw, db=db)


__all__ = [
    "DegenerateInputError",
    "Parameters",
    "Gradient",
    "as_tensor",
    "gradient",
]
