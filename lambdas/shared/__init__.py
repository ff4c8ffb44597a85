"""Shared dice library for the dice roller Lambda functions."""

from .config import Config
from .dice import parse_and_validate, roll, roll_with_seed
from .evaluator import evaluate, evaluate_seeded
from .exceptions import (
    ConfigurationError,
    DiceError,
    InvalidDieSizeError,
    InvalidFormatError,
    InvalidQuantityError,
    InvalidSeedError,
    NumberParseError,
    QuantityLimitExceededError,
)
from .models import DiceRequest, RollResult
from .parser import parse
from .random_source import AmbientRandomSource, RandomSource, SeededRandomSource
from .validation import MAX_QUANTITY, validate

__all__ = [
    # Config
    "Config",
    # Dice
    "parse",
    "validate",
    "parse_and_validate",
    "evaluate",
    "evaluate_seeded",
    "roll",
    "roll_with_seed",
    "MAX_QUANTITY",
    # Random sources
    "RandomSource",
    "AmbientRandomSource",
    "SeededRandomSource",
    # Exceptions
    "ConfigurationError",
    "DiceError",
    "InvalidDieSizeError",
    "InvalidFormatError",
    "InvalidQuantityError",
    "InvalidSeedError",
    "NumberParseError",
    "QuantityLimitExceededError",
    # Models
    "DiceRequest",
    "RollResult",
]
