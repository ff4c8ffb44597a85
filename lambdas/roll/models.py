"""Pydantic models for roll API requests and responses."""

import re

from pydantic import BaseModel, Field, field_validator

from shared.models import DiceRequest, RollResult


class RollRequest(BaseModel):
    """Request body for rolling dice."""

    expression: str = Field(..., min_length=1, max_length=100)
    seed: str | None = Field(default=None, description="64 hex characters (32 bytes)")

    @field_validator("seed")
    @classmethod
    def validate_seed(cls, v: str | None) -> str | None:
        """Validate that the seed is 32 bytes of hex."""
        if v is None:
            return v
        v = v.strip().lower()
        if not re.fullmatch(r"[0-9a-f]{64}", v):
            raise ValueError("seed must be 64 hexadecimal characters")
        return v

    @property
    def seed_bytes(self) -> bytes | None:
        """Seed decoded to raw bytes, if one was given."""
        return bytes.fromhex(self.seed) if self.seed is not None else None


class RollResponse(BaseModel):
    """Response for POST /roll."""

    notation: str
    dice_rolls: list[int]
    modifier: int
    total: int
    display: str
    seeded: bool = False

    @classmethod
    def from_result(
        cls, request: DiceRequest, result: RollResult, seeded: bool = False
    ) -> "RollResponse":
        """Build a response from a parsed request and its roll."""
        return cls(
            notation=request.notation,
            dice_rolls=list(result.dice_rolls),
            modifier=result.modifier,
            total=result.total,
            display=str(result),
            seeded=seeded,
        )
