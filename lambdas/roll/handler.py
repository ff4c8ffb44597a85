"""Roll Lambda handler for evaluating dice notation."""
import json

from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig, Response
from aws_lambda_powertools.event_handler.exceptions import BadRequestError
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from roll.models import RollRequest
from roll.service import RollService
from shared.config import get_config
from shared.exceptions import DiceError

logger = Logger()
tracer = Tracer()
cors_config = CORSConfig(allow_origin="*", allow_headers=["Content-Type"], max_age=300)
app = APIGatewayRestResolver(cors=cors_config)

# Initialize service lazily
_service: RollService | None = None


def get_service() -> RollService:
    """Get or create the roll service instance."""
    global _service
    if _service is None:
        config = get_config()
        logger.append_keys(environment=config.environment)
        _service = RollService(max_quantity=config.max_quantity)
    return _service


def reset_service() -> None:
    """Reset the service instance (for testing)."""
    global _service
    _service = None


@app.post("/roll")
@tracer.capture_method
def roll_dice() -> Response:
    """Roll a dice expression, optionally from a seed.

    Returns:
        200 response with the roll, or 400 for bad notation
    """
    try:
        body = app.current_event.json_body or {}
        request = RollRequest.model_validate(body)
    except json.JSONDecodeError:
        raise BadRequestError("Request body must be valid JSON") from None
    except ValidationError as e:
        raise BadRequestError(str(e)) from None

    try:
        result = get_service().roll(request)
    except DiceError as e:
        return Response(
            status_code=400,
            content_type="application/json",
            body={"error": e.code, "message": e.message},
        )

    return Response(
        status_code=200,
        content_type="application/json",
        body=result.model_dump(),
    )


@logger.inject_lambda_context
@tracer.capture_lambda_handler
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """Main Lambda entry point.

    Args:
        event: API Gateway event
        context: Lambda context

    Returns:
        API Gateway response
    """
    return app.resolve(event, context)
