"""Custom exceptions for the dice roller."""


class DiceError(Exception):
    """Base exception for all dice errors."""

    code = "dice_error"

    def __init__(self, message: str = "An error occurred") -> None:
        """Initialize exception with message.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(self.message)


class InvalidFormatError(DiceError):
    """Expression does not match the dice notation grammar."""

    code = "invalid_format"

    def __init__(self, detail: str) -> None:
        """Initialize invalid format error.

        Args:
            detail: What part of the notation could not be read
        """
        self.detail = detail
        super().__init__(f"Invalid dice notation format: {detail}")


class InvalidQuantityError(DiceError):
    """Number of dice is below the minimum of one."""

    code = "invalid_quantity"

    def __init__(self, value: int, max_quantity: int = 1000) -> None:
        """Initialize invalid quantity error.

        Args:
            value: The rejected quantity
            max_quantity: Upper bound in force when the check ran
        """
        self.value = value
        super().__init__(f"Invalid quantity: {value} (must be 1-{max_quantity})")


class InvalidDieSizeError(DiceError):
    """Die has zero or fewer sides."""

    code = "invalid_die_size"

    def __init__(self, value: int) -> None:
        """Initialize invalid die size error.

        Args:
            value: The rejected number of sides
        """
        self.value = value
        super().__init__(f"Invalid die size: d{value} (must be positive)")


class QuantityLimitExceededError(DiceError):
    """Number of dice is above the configured maximum."""

    code = "quantity_limit_exceeded"

    def __init__(self, value: int, max_quantity: int = 1000) -> None:
        """Initialize quantity limit error.

        Args:
            value: The rejected quantity
            max_quantity: Upper bound in force when the check ran
        """
        self.value = value
        self.max_quantity = max_quantity
        super().__init__(f"Quantity limit exceeded: {value} (maximum is {max_quantity})")


class NumberParseError(DiceError):
    """Integer literal does not fit in a signed 32-bit integer."""

    code = "parse_error"

    def __init__(self, literal: str) -> None:
        """Initialize number parse error.

        Args:
            literal: The digit run (with sign, if any) that overflowed
        """
        self.literal = literal
        super().__init__(
            f"Parse error: number too large to fit in target type ({literal})"
        )


class InvalidSeedError(DiceError):
    """Seed is not exactly 32 bytes."""

    code = "invalid_seed"

    def __init__(self, length: int) -> None:
        """Initialize invalid seed error.

        Args:
            length: Length of the seed that was supplied
        """
        self.length = length
        super().__init__(f"Invalid seed: expected 32 bytes, got {length}")


class ConfigurationError(Exception):
    """Configuration or environment error."""

    code = "configuration_error"

    def __init__(self, message: str, config_key: str | None = None) -> None:
        """Initialize configuration error.

        Args:
            message: Error message
            config_key: Optional configuration key that caused the error
        """
        self.message = message
        self.config_key = config_key
        super().__init__(message)
