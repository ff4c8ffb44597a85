"""Dice rolling with standard notation support.

Provides the one-call entry points that parse, validate and roll an
expression such as "2d6+3".

Examples:
    >>> str(roll_with_seed("2d6+3", bytes(32)))  # same output every time
    >>> roll("d20").total  # something between 1 and 20
"""

from aws_lambda_powertools import Logger

from .evaluator import evaluate, evaluate_seeded
from .exceptions import DiceError
from .models import DiceRequest, RollResult
from .parser import parse
from .validation import MAX_QUANTITY, validate

logger = Logger(child=True)


def parse_and_validate(expression: str, max_quantity: int = MAX_QUANTITY) -> DiceRequest:
    """Parse an expression and check its ranges.

    Args:
        expression: Dice notation string (e.g., "2d6+3")
        max_quantity: Most dice allowed in one roll

    Returns:
        A DiceRequest that is safe to evaluate

    Raises:
        DiceError: The first syntax or range problem found
    """
    try:
        return validate(parse(expression), max_quantity)
    except DiceError as e:
        logger.info("Rejected dice expression", extra={"expression": expression, "error": e.code})
        raise


def roll(expression: str, max_quantity: int = MAX_QUANTITY) -> RollResult:
    """Roll dice using standard notation and ambient randomness.

    Args:
        expression: Dice notation string (e.g., "2d6+3")
        max_quantity: Most dice allowed in one roll

    Returns:
        RollResult with individual dice, modifier and total

    Raises:
        DiceError: If the expression is malformed or out of range
    """
    return evaluate(parse_and_validate(expression, max_quantity))


def roll_with_seed(
    expression: str, seed: bytes, max_quantity: int = MAX_QUANTITY
) -> RollResult:
    """Roll dice reproducibly from a 32-byte seed.

    The same expression and seed always give the same dice in the same
    order.

    Args:
        expression: Dice notation string (e.g., "2d6+3")
        seed: Exactly 32 bytes
        max_quantity: Most dice allowed in one roll

    Returns:
        RollResult with individual dice, modifier and total

    Raises:
        DiceError: If the expression is malformed or out of range, or the
            seed is not 32 bytes
    """
    return evaluate_seeded(parse_and_validate(expression, max_quantity), seed)
