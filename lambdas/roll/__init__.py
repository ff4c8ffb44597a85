"""Roll module for evaluating dice notation over HTTP."""

from .models import RollRequest, RollResponse
from .service import RollService

__all__ = [
    "RollRequest",
    "RollResponse",
    "RollService",
]
