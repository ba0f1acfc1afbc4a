"""Notification consumer with an injected messaging strategy"""

from reflectpattern.domain.messaging import MessageService


class Notification:
    """Forwards notifications to whichever MessageService it was given"""

    def __init__(self, service: MessageService):
        """Initialise notification

        Args:
            service: Messaging strategy used for every notification

        Raises:
            TypeError: If no service is supplied
        """
        if service is None:
            raise TypeError("Notification requires a MessageService, got None")
        self._service = service

    @property
    def service(self) -> MessageService:
        """The injected messaging strategy"""
        return self._service

    def notify(self, message: str) -> None:
        self._service.send(message)
