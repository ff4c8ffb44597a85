"""Roll service - business logic behind the roll endpoint."""

from aws_lambda_powertools import Logger

from roll.models import RollRequest, RollResponse
from shared.dice import parse_and_validate
from shared.evaluator import evaluate, evaluate_seeded
from shared.validation import MAX_QUANTITY

logger = Logger()


class RollService:
    """Service layer for rolling dice expressions."""

    def __init__(self, max_quantity: int = MAX_QUANTITY) -> None:
        """Initialize roll service.

        Args:
            max_quantity: Most dice allowed in one roll
        """
        self.max_quantity = max_quantity

    def roll(self, request: RollRequest) -> RollResponse:
        """Parse, validate and roll a request.

        Args:
            request: Roll request with expression and optional seed

        Returns:
            Roll response with the dice, total and display text

        Raises:
            DiceError: If the expression is malformed or out of range
        """
        dice = parse_and_validate(request.expression, self.max_quantity)

        seed = request.seed_bytes
        if seed is None:
            result = evaluate(dice)
        else:
            result = evaluate_seeded(dice, seed)

        logger.info(
            "Roll complete",
            extra={
                "notation": dice.notation,
                "total": result.total,
                "seeded": seed is not None,
            },
        )
        return RollResponse.from_result(dice, result, seeded=seed is not None)
