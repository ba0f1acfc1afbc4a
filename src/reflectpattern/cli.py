"""Entry routine: builds the notification graph and sends one message"""

import sys

from loguru import logger

from reflectpattern.channels.registry import registry
from reflectpattern.core.config import Config
from reflectpattern.domain.notification import Notification
from reflectpattern.reflection.factory import DynamicFactory
from reflectpattern.shared.exceptions import ReflectionError


def configure_logging(config: Config) -> None:
    """Route loguru output to stderr, plus an optional rotating file"""
    logger.remove()
    logger.add(sys.stderr, level=config.log_level)
    if config.log_file:
        logger.add(
            config.log_file,
            rotation="1 day",
            retention="30 days",
            compression="gz",
            level=config.log_level,
        )


def build_notification(config: Config) -> Notification:
    """Composition root for the sample object graph

    Args:
        config: Loaded configuration

    Returns:
        Notification whose messaging strategy was injected by reflection
    """
    factory = DynamicFactory(registry.get_builder(config.channel))
    return factory.create(Notification)


def main() -> int:
    """CLI entry point

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        config = Config.from_env()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    configure_logging(config)
    config.log_summary()

    try:
        notification = build_notification(config)
    except ReflectionError as e:
        logger.critical(f"Object construction failed: {e}")
        return 1

    notification.notify(config.message)
    logger.info(
        f"Notification sent via {type(notification.service).__name__}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
