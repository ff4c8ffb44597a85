"""Environment configuration for Lambda functions."""
import os
from dataclasses import dataclass

from .exceptions import ConfigurationError
from .validation import MAX_QUANTITY


@dataclass
class Config:
    """Application configuration loaded from environment variables."""

    environment: str
    log_level: str
    max_quantity: int

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables.

        Returns:
            Config instance with values from environment

        Raises:
            ConfigurationError: If MAX_DICE_QUANTITY is not a positive integer
        """
        raw_max = os.environ.get("MAX_DICE_QUANTITY", str(MAX_QUANTITY))
        try:
            max_quantity = int(raw_max)
        except ValueError:
            raise ConfigurationError(
                f"MAX_DICE_QUANTITY must be an integer, got {raw_max!r}",
                config_key="MAX_DICE_QUANTITY",
            ) from None
        if max_quantity < 1:
            raise ConfigurationError(
                "MAX_DICE_QUANTITY must be at least 1",
                config_key="MAX_DICE_QUANTITY",
            )

        return cls(
            environment=os.environ.get("ENVIRONMENT", "dev"),
            log_level=os.environ.get("POWERTOOLS_LOG_LEVEL", "INFO"),
            max_quantity=max_quantity,
        )


def get_config() -> Config:
    """Get cached configuration instance.

    Returns:
        Config instance (cached after first call)
    """
    if not hasattr(get_config, "_config"):
        get_config._config = Config.from_env()
    return get_config._config
