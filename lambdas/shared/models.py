"""Pydantic models for dice requests and roll results."""

from pydantic import BaseModel, ConfigDict


class DiceRequest(BaseModel):
    """Parsed dice notation, before range validation.

    Values are whatever the notation said; ``validate`` enforces bounds.
    """

    model_config = ConfigDict(frozen=True)

    quantity: int = 1
    sides: int
    modifier: int = 0

    @property
    def notation(self) -> str:
        """Canonical notation string, e.g. ``2d6+5``."""
        base = f"{self.quantity}d{self.sides}"
        if self.modifier > 0:
            return f"{base}+{self.modifier}"
        if self.modifier < 0:
            return f"{base}{self.modifier}"
        return base


class RollResult(BaseModel):
    """Outcome of evaluating a dice request."""

    model_config = ConfigDict(frozen=True)

    total: int
    dice_rolls: tuple[int, ...]
    modifier: int = 0

    def __str__(self) -> str:
        """Render as ``[4, 2] + 5 = 9``."""
        rolls = "[" + ", ".join(str(r) for r in self.dice_rolls) + "]"
        if self.modifier > 0:
            return f"{rolls} + {self.modifier} = {self.total}"
        if self.modifier < 0:
            return f"{rolls} - {-self.modifier} = {self.total}"
        return f"{rolls} = {self.total}"
