"""Integration tests for roll Lambda handler."""

import json
from unittest.mock import MagicMock

import pytest

from roll.handler import lambda_handler, reset_service

SEED_HEX = "0f" * 32


@pytest.fixture(autouse=True)
def reset_handler(env_setup):
    """Reset handler state before each test."""
    reset_service()
    yield
    reset_service()


def make_event(
    method: str,
    path: str,
    body: dict | None = None,
    raw_body: str | None = None,
) -> dict:
    """Create an API Gateway event for testing."""
    if raw_body is None and body is not None:
        raw_body = json.dumps(body)
    return {
        "httpMethod": method,
        "path": path,
        "headers": {"Content-Type": "application/json"},
        "pathParameters": {},
        "queryStringParameters": None,
        "body": raw_body,
        "requestContext": {
            "stage": "dev",
            "requestId": "test-request-id",
        },
        "resource": path,
    }


class TestRollEndpoint:
    """Tests for POST /roll."""

    def test_roll_returns_200(self):
        """POST /roll should return the roll."""
        event = make_event("POST", "/roll", body={"expression": "2d6+5"})

        response = lambda_handler(event, MagicMock())

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body["notation"] == "2d6+5"
        assert len(body["dice_rolls"]) == 2
        assert body["modifier"] == 5
        assert body["total"] == sum(body["dice_rolls"]) + 5
        assert body["display"].endswith(f"+ 5 = {body['total']}")
        assert body["seeded"] is False

    def test_seeded_roll_repeatable(self):
        """Same seed returns the same body."""
        event = make_event("POST", "/roll", body={"expression": "6d10-2", "seed": SEED_HEX})

        first = json.loads(lambda_handler(event, MagicMock())["body"])
        second = json.loads(lambda_handler(event, MagicMock())["body"])

        assert first == second
        assert first["seeded"] is True

    @pytest.mark.parametrize(
        ("expression", "code"),
        [
            ("2d", "invalid_format"),
            ("6", "invalid_format"),
            ("0d6", "invalid_quantity"),
            ("2d0", "invalid_die_size"),
            ("1001d6", "quantity_limit_exceeded"),
            ("99999999999d6", "parse_error"),
        ],
    )
    def test_invalid_expression_returns_400(self, expression, code):
        """Dice errors come back as 400 with their code."""
        event = make_event("POST", "/roll", body={"expression": expression})

        response = lambda_handler(event, MagicMock())

        assert response["statusCode"] == 400
        body = json.loads(response["body"])
        assert body["error"] == code
        assert body["message"]

    def test_missing_expression_returns_400(self):
        """A body without an expression is rejected."""
        event = make_event("POST", "/roll", body={"seed": SEED_HEX})

        response = lambda_handler(event, MagicMock())

        assert response["statusCode"] == 400

    @pytest.mark.parametrize("raw_body", ['["2d6"]', '"2d6"', "2d6", "{bad"])
    def test_non_object_body_returns_400(self, raw_body):
        """Bodies that are not a JSON object are rejected, not crashed on."""
        event = make_event("POST", "/roll", raw_body=raw_body)

        response = lambda_handler(event, MagicMock())

        assert response["statusCode"] == 400

    def test_bad_seed_returns_400(self):
        """A seed that is not 64 hex characters is rejected."""
        event = make_event("POST", "/roll", body={"expression": "d6", "seed": "1234"})

        response = lambda_handler(event, MagicMock())

        assert response["statusCode"] == 400

    def test_configured_limit(self, monkeypatch):
        """MAX_DICE_QUANTITY lowers the dice limit."""
        from shared.config import get_config

        monkeypatch.setenv("MAX_DICE_QUANTITY", "3")
        if hasattr(get_config, "_config"):
            delattr(get_config, "_config")

        event = make_event("POST", "/roll", body={"expression": "4d6"})
        response = lambda_handler(event, MagicMock())

        assert response["statusCode"] == 400
        body = json.loads(response["body"])
        assert body["error"] == "quantity_limit_exceeded"
        assert "maximum is 3" in body["message"]

    def test_unknown_route_returns_404(self):
        """Only POST /roll is routed."""
        event = make_event("GET", "/roll")

        response = lambda_handler(event, MagicMock())

        assert response["statusCode"] == 404
