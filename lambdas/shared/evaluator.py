"""Roll evaluation for validated dice requests."""

from aws_lambda_powertools import Logger

from .models import DiceRequest, RollResult
from .random_source import AmbientRandomSource, RandomSource, SeededRandomSource

logger = Logger(child=True)


def evaluate(request: DiceRequest, source: RandomSource | None = None) -> RollResult:
    """Roll the dice described by a validated request.

    The request must already have passed ``validate``; zero or negative
    quantity or sides are not checked here.

    Args:
        request: Validated dice request
        source: Where die values come from (defaults to ambient randomness)

    Returns:
        RollResult with the dice in the order they were rolled
    """
    if source is None:
        source = AmbientRandomSource()

    rolls = tuple(source.roll_die(request.sides) for _ in range(request.quantity))
    result = RollResult(
        total=sum(rolls) + request.modifier,
        dice_rolls=rolls,
        modifier=request.modifier,
    )
    logger.debug("Dice rolled", extra={"notation": request.notation, "total": result.total})
    return result


def evaluate_seeded(request: DiceRequest, seed: bytes) -> RollResult:
    """Roll reproducibly from a 32-byte seed.

    A new generator is built for every call, so concurrent calls never
    share state and the same seed always yields the same result.

    Raises:
        InvalidSeedError: If the seed is not 32 bytes long
    """
    return evaluate(request, SeededRandomSource(seed))
