"""Messaging capability interface"""

from abc import ABC, abstractmethod


class MessageService(ABC):
    """Capability to deliver a text message somewhere.

    Implementations decide where the message goes; the contract defines
    no errors and no return value.
    """

    @abstractmethod
    def send(self, message: str) -> None:
        """Deliver a message

        Args:
            message: Text payload to deliver
        """
