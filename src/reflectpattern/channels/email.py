"""Email messaging strategy"""

from loguru import logger

from reflectpattern.channels.registry import register_channel
from reflectpattern.domain.messaging import MessageService


@register_channel("email")
class EmailService(MessageService):
    """Writes messages to stdout with an ``Email:`` prefix"""

    label = "Email"

    def send(self, message: str) -> None:
        logger.debug(f"Sending via {self.label} channel")
        print(f"{self.label}: {message}")
