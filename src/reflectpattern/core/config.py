"""Configuration management for reflectpattern"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv
from loguru import logger

from reflectpattern.channels.registry import registry
from reflectpattern.shared.exceptions import ConfigurationError

DEFAULT_CHANNEL = "sms"
DEFAULT_MESSAGE = "Hello reflection!"


@dataclass
class Config:
    """Configuration for the sample loaded from environment variables"""

    # Registry name of the dependency the factory manufactures
    channel: str = DEFAULT_CHANNEL
    message: str = DEFAULT_MESSAGE

    log_level: str = "WARNING"
    log_file: str | None = None

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables

        Values in a local .env file are loaded first and never override
        variables already set in the environment.

        Returns:
            Config instance with values from environment

        Raises:
            ConfigurationError: If REFLECT_CHANNEL names an unknown channel
        """
        load_dotenv()

        channel = os.getenv("REFLECT_CHANNEL", DEFAULT_CHANNEL).strip().lower()
        if channel not in registry.list_available():
            raise ConfigurationError(
                f"REFLECT_CHANNEL must be one of "
                f"{registry.list_available()}, got '{channel}'"
            )

        config = cls(
            channel=channel,
            message=os.getenv("REFLECT_MESSAGE", DEFAULT_MESSAGE),
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
            log_file=os.getenv("LOG_FILE") or None,
        )

        return config

    def log_summary(self) -> None:
        """Log the effective configuration at DEBUG level"""
        logger.debug("Configuration loaded:")
        logger.debug(f"  Channel: {self.channel}")
        logger.debug(f"  Message: {self.message!r}")
        logger.debug(f"  Log Level: {self.log_level}")
        logger.debug(f"  Log File: {self.log_file or 'Not configured'}")
