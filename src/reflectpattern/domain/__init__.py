"""Domain abstractions: the messaging capability and its consumer"""

from reflectpattern.domain.messaging import MessageService
from reflectpattern.domain.notification import Notification

__all__ = ["MessageService", "Notification"]
