"""Range checks for parsed dice requests."""

from .exceptions import InvalidDieSizeError, InvalidQuantityError, QuantityLimitExceededError
from .models import DiceRequest

MAX_QUANTITY = 1000


def validate(request: DiceRequest, max_quantity: int = MAX_QUANTITY) -> DiceRequest:
    """Check that a parsed request can be rolled.

    Quantity is checked before sides, so "0d0" reports the quantity.

    Args:
        request: Parsed dice request
        max_quantity: Most dice allowed in one roll

    Returns:
        The same request, unchanged

    Raises:
        InvalidQuantityError: If quantity is zero or negative
        QuantityLimitExceededError: If quantity is above max_quantity
        InvalidDieSizeError: If sides is zero or negative
    """
    if request.quantity < 1:
        raise InvalidQuantityError(request.quantity, max_quantity)
    if request.quantity > max_quantity:
        raise QuantityLimitExceededError(request.quantity, max_quantity)
    if request.sides < 1:
        raise InvalidDieSizeError(request.sides)
    return request
