"""
Building a Large Language Model from Scratch
— A Step-by-Step Guide Using Python and PyTorch

(c) Dr. Yves J. Hilpisch (The Python Quants GmbH)
AI-Powered by GPT-5.

Univariate linear regression trained with batch gradient descent.
"""

from __future__ import annotations

from linreg.gradient import DegenerateInputError, Gradient, Parameters, gradient
from linreg.series import Series, read_pairs
from linreg.settings import SettingsError, parse_settings, resolve_config
from linreg.train import ProgressRecord, TrainingConfig, TrainResult, train

__all__ = [
    "DegenerateInputError",
    "Gradient",
    "Parameters",
    "ProgressRecord",
    "Series",
    "SettingsError",
    "TrainResult",
    "TrainingConfig",
    "gradient",
    "parse_settings",
    "read_pairs",
    "resolve_config",
    "train",
]
