"""
Building a Large Language Model from Scratch
— A Step-by-Step Guide Using Python and PyTorch

(c) Dr. Yves J. Hilpisch (The Python Quants GmbH)
AI-Powered by GPT-5.

Batch gradient descent for y ~ w*x + b.

Every step evaluates the gradient over the whole data set with the current
parameters, logs those parameters when the step index is a multiple of
``log_every``, and only then applies the update. The record for step i
therefore shows the state going into step i, and step 0 always shows the
configured starting point. Steps run from 0 to ``iterations`` inclusive.
"""

from __future__ import annotations


from dataclasses import dataclass, field
from typing import List, Optional, TextIO

from linreg.gradient import (
    DegenerateInputError,
    Parameters,
    SeriesLike,
    as_tensor,
    gradient,
)


@dataclass(frozen=True)
class TrainingConfig:
    w: float = 0.0
    b: float = 0.0
    alpha: float = 0.00001
    iterations: int = 100000  # inclusive: 0..iterations
    log_every: int = 100
    output: Optional[str] = None  # None -> stdout


@dataclass(frozen=True)
class ProgressRecord:
    iteration: int
    w: float
    b: float

    def format(self) -> str:
        return f"iteration: {self.iteration}, w: {self.w:.6f}, b: {self.b:.6f}"


@dataclass
class TrainResult:
    params: Parameters
    records: List[ProgressRecord] = field(default_factory=list)


def check_series(x: SeriesLike, y: SeriesLike) -> None:
    """Fail early on inputs the gradient cannot average over."""
    if len(x) == 0 or len(y) == 0:
        raise DegenerateInputError("no input-target pairs to train on")
    if len(x) != len(y):
        raise ValueError(f"x and y differ in length ({len(x)} != {len(y)})")


def train(
    x: SeriesLike,
    y: SeriesLike,
    cfg: TrainingConfig,
    out: TextIO | None = None,
    keep_records: bool = True,
) -> TrainResult:
    """Run batch gradient descent from cfg.w, cfg.b.

    Records are written to ``out`` as they are produced. With
    ``keep_records=False`` they are not also kept on the result, so a long
    streamed run uses constant memory.
    """
    check_series(x, y)
    assert cfg.log_every > 0 and cfg.iterations >= 0
    # Convert once; the loop only does tensor arithmetic
    xt, yt = as_tensor(x), as_tensor(y)

    params = Parameters(w=cfg.w, b=cfg.b)
    result = TrainResult(params=params)
    for i in range(cfg.iterations + 1):
        grad = gradient(xt, yt, params)
        if i % cfg.log_every == 0:
            rec = ProgressRecord(iteration=i, w=params.w, b=params.b)
            if keep_records:
                result.records.append(rec)
            if out is not None:
                out.write(rec.format() + "\n")
        params.w = params.w - cfg.alpha * grad.dw
        params.b = params.b - cfg.alpha * grad.db
    return result


__all__ = ["TrainingConfig", "ProgressRecord", "TrainResult", "check_series", "train"]
