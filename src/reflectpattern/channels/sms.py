"""SMS messaging strategy"""

from loguru import logger

from reflectpattern.channels.registry import register_channel
from reflectpattern.domain.messaging import MessageService


@register_channel("sms")
class SmsService(MessageService):
    """Writes messages to stdout with an ``SMS:`` prefix"""

    label = "SMS"

    def send(self, message: str) -> None:
        logger.debug(f"Sending via {self.label} channel")
        print(f"{self.label}: {message}")
