"""
Building a Large Language Model from Scratch
— A Step-by-Step Guide Using Python and PyTorch

(c) Dr. Yves J. Hilpisch (The Python Quants GmbH)
AI-Powered by GPT-5.

Sample series for the linear regression trainer.

A Series is an append-only list of integer samples. It grows while the
input file is read, is frozen afterwards, and hands the gradient code a
float64 tensor view. Two of them exist per run: x (inputs) and y (targets).
"""

from __future__ import annotations


import re
from typing import Iterable, Iterator, List, TextIO

import torch

_INT_TOKEN = re.compile(r"[+-]?\d+")


class Series:
    """Append-only, insertion-ordered integer samples."""

    def __init__(self, values: Iterable[int] = ()):
        self._data: List[int] = []
        self._frozen = False
        self._tensor: torch.Tensor | None = None
        for v in values:
            self.append(v)

    def append(self, value: int) -> None:
        if self._frozen:
            raise RuntimeError("cannot append to a frozen series")
        self._data.append(int(value))

    def freeze(self) -> "Series":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def as_tensor(self) -> torch.Tensor:
        # int -> float64 is exact for the sample range we read
        if self._tensor is not None:
            return self._tensor
        t = torch.tensor(self._data, dtype=torch.float64)
        if self._frozen:
            self._tensor = t
        return t

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, idx: int) -> int:
        return self._data[idx]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"Series({self._data!r})"


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def read_pairs(stream: TextIO) -> tuple[Series, Series]:
    """Read whitespace-separated ``x y`` integer pairs from ``stream``.

    Tokens are consumed two at a time regardless of line breaks. Reading
    stops at the first token that is not an integer, or at a dangling
    ``x`` without its ``y``; pairs read before that point are kept.
    Both series come back frozen.
    """
    xs, ys = Series(), Series()
    it = _tokens(stream)
    for tx in it:
        ty = next(it, None)
        if ty is None:
            break
        if not (_INT_TOKEN.fullmatch(tx) and _INT_TOKEN.fullmatch(ty)):
            break
        xs.append(int(tx))
        ys.append(int(ty))
    return xs.freeze(), ys.freeze()


__all__ = ["Series", "read_pairs"]
