"""Concrete messaging strategies

Importing this package registers every built-in channel on the
module-level registry.
"""

from reflectpattern.channels.email import EmailService
from reflectpattern.channels.registry import ChannelRegistry, register_channel
from reflectpattern.channels.sms import SmsService

__all__ = [
    "ChannelRegistry",
    "EmailService",
    "SmsService",
    "register_channel",
]
