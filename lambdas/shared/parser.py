"""Dice notation parser.

Grammar: ``[quantity] ('d' | 'D') sides [('+' | '-') modifier]``

Whitespace is allowed around the whole expression and around the modifier
sign, but not inside the ``<quantity>d<sides>`` group. Examples:
"d20", "2d6", "3D8+2", " 2d6 - 1 ".

Each field is read by its own sub-rule. A sub-rule takes the text and a
cursor position and returns the parsed value with the position just past
what it consumed, so every rule can be exercised on its own.

The parser only checks syntax. Range checks live in ``shared.validation``.
"""

from .exceptions import InvalidFormatError, NumberParseError
from .models import DiceRequest

DIGITS = frozenset("0123456789")
DIE_MARKERS = frozenset("dD")
SIGNS = frozenset("+-")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _digit_run(text: str, pos: int) -> int:
    """Return the end of the run of ASCII digits starting at pos."""
    while pos < len(text) and text[pos] in DIGITS:
        pos += 1
    return pos


def to_int32(literal: str) -> int:
    """Convert a (possibly signed) digit string to a 32-bit integer.

    Args:
        literal: Digits, optionally prefixed with '+' or '-'

    Returns:
        The integer value

    Raises:
        NumberParseError: If the value is outside the signed 32-bit range
    """
    # Leading zeros are legal, so only significant digits count toward overflow
    significant = literal.lstrip("+-").lstrip("0")
    if len(significant) > 10:
        raise NumberParseError(literal)

    value = int(literal)
    if not INT32_MIN <= value <= INT32_MAX:
        raise NumberParseError(literal)
    return value


def parse_quantity(text: str, pos: int) -> tuple[int, int]:
    """Read the optional dice count. Absent means one die."""
    end = _digit_run(text, pos)
    if end == pos:
        return 1, pos
    return to_int32(text[pos:end]), end


def parse_die_marker(text: str, pos: int) -> int:
    """Consume the single 'd' or 'D' separating quantity from sides."""
    if pos >= len(text):
        raise InvalidFormatError("missing die marker 'd'")
    if text[pos] not in DIE_MARKERS:
        raise InvalidFormatError(f"expected 'd' at position {pos}, found {text[pos]!r}")
    return pos + 1


def parse_sides(text: str, pos: int) -> tuple[int, int]:
    """Read the required number of sides."""
    end = _digit_run(text, pos)
    if end == pos:
        raise InvalidFormatError("missing die size after 'd'")
    return to_int32(text[pos:end]), end


def parse_modifier(text: str, pos: int) -> tuple[int, int]:
    """Read the optional signed modifier. Absent means zero.

    When no sign follows, the cursor is returned unchanged so trailing
    whitespace is left for the caller.
    """
    sign_pos = _skip_whitespace(text, pos)
    if sign_pos >= len(text) or text[sign_pos] not in SIGNS:
        return 0, pos

    sign = text[sign_pos]
    start = _skip_whitespace(text, sign_pos + 1)
    end = _digit_run(text, start)
    if end == start:
        raise InvalidFormatError(f"missing modifier value after '{sign}'")
    return to_int32(sign + text[start:end]), end


def parse(expression: str) -> DiceRequest:
    """Parse dice notation into a DiceRequest.

    Args:
        expression: Dice notation string (e.g., "2d6+3")

    Returns:
        DiceRequest with quantity, sides and modifier as written

    Raises:
        InvalidFormatError: If the notation does not match the grammar
        NumberParseError: If a number does not fit in 32 bits
    """
    if not isinstance(expression, str):
        raise InvalidFormatError(f"expected a string, got {type(expression).__name__}")

    pos = _skip_whitespace(expression, 0)
    quantity, pos = parse_quantity(expression, pos)
    pos = parse_die_marker(expression, pos)
    sides, pos = parse_sides(expression, pos)
    modifier, pos = parse_modifier(expression, pos)

    pos = _skip_whitespace(expression, pos)
    if pos != len(expression):
        raise InvalidFormatError(f"unexpected trailing input {expression[pos:]!r}")

    return DiceRequest(quantity=quantity, sides=sides, modifier=modifier)
