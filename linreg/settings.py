"""
Building a Large Language Model from Scratch
— A Step-by-Step Guide Using Python and PyTorch

(c) Dr. Yves J. Hilpisch (The Python Quants GmbH)
AI-Powered by GPT-5.

Settings file handling for the trainer.

A settings file holds one ``key value`` pair per line, in any order, and any
subset of the keys below. Whatever it sets overrides the defaults; the last
occurrence of a key wins. Example:

    w 0.0
    b 0.0
    alpha 0.00001
    iterations 100000
    output stdout
    log-every 100
"""

from __future__ import annotations


import sys
from dataclasses import replace
from typing import Callable, Iterable, List, Mapping, TextIO, Tuple

from linreg.train import TrainingConfig

DEFAULTS: Mapping[str, object] = {
    "w": 0.0,
    "b": 0.0,
    "alpha": 0.00001,
    "iterations": 100000,
    "log-every": 100,
    "output": None,
}
KNOWN_KEYS = frozenset(DEFAULTS)
STDOUT_NAMES = frozenset({"stdout", "-"})

# settings key -> TrainingConfig field
_FIELDS = {
    "w": "w",
    "b": "b",
    "alpha": "alpha",
    "iterations": "iterations",
    "log-every": "log_every",
    "output": "output",
}


class SettingsError(ValueError):
    """A recognized key carries a value the trainer cannot use."""


def _stderr(msg: str) -> None:
    print(msg, file=sys.stderr)


def parse_settings(
    stream: TextIO, warn: Callable[[str], None] = _stderr
) -> List[Tuple[str, str]]:
    """Return (key, value) pairs in file order; bad lines are skipped."""
    pairs: List[Tuple[str, str]] = []
    for lineno, line in enumerate(stream, start=1):
        parts = line.split()
        if not parts:
            continue
        if len(parts) != 2:
            warn(f"Skipping malformed settings line {lineno}: {line.strip()!r}")
            continue
        pairs.append((parts[0], parts[1]))
    return pairs


def _to_float(key: str, value: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise SettingsError(f"{key}: expected a number, got {value!r}") from None


def _to_int(key: str, value: str) -> int:
    # accepts "1000" as well as "1e3", truncating like atof-then-int
    try:
        return int(float(value))
    except (ValueError, OverflowError):
        raise SettingsError(f"{key}: expected an integer, got {value!r}") from None


def _convert(key: str, value: str) -> object:
    if key in ("w", "b", "alpha"):
        return _to_float(key, value)
    if key in ("iterations", "log-every"):
        return _to_int(key, value)
    # output
    return None if value in STDOUT_NAMES else value


def _validate(cfg: TrainingConfig) -> TrainingConfig:
    if cfg.iterations < 0:
        raise SettingsError(f"iterations must be >= 0, got {cfg.iterations}")
    if cfg.log_every < 1:
        raise SettingsError(f"log-every must be >= 1, got {cfg.log_every}")
    if not cfg.alpha > 0:
        raise SettingsError(f"alpha must be positive, got {cfg.alpha}")
    return cfg


def resolve_config(
    pairs: Iterable[Tuple[str, str]] | None = None,
    warn: Callable[[str], None] = _stderr,
) -> TrainingConfig:
    """Overlay settings pairs on the defaults.

    Unknown keys are reported through ``warn`` and ignored. Invalid values
    for known keys raise SettingsError.
    """
    cfg = TrainingConfig(
        **{_FIELDS[k]: v for k, v in DEFAULTS.items()}  # type: ignore[arg-type]
    )
    for key, value in pairs or ():
        if key not in KNOWN_KEYS:
            warn(f"Unknown key: {key}")
            continue
        cfg = replace(cfg, **{_FIELDS[key]: _convert(key, value)})
    return _validate(cfg)


__all__ = [
    "DEFAULTS",
    "KNOWN_KEYS",
    "SettingsError",
    "parse_settings",
    "resolve_config",
]
