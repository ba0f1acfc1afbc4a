"""Channel registry mapping names to zero-argument builders"""

from collections.abc import Callable

from reflectpattern.domain.messaging import MessageService

ChannelBuilder = Callable[[], MessageService]


class ChannelRegistry:
    """Registry for messaging channel builders.

    Each entry is a zero-argument callable, typically the channel class
    itself, so lookups always produce a fresh instance.
    """

    def __init__(self):
        self._builders: dict[str, ChannelBuilder] = {}

    def register(self, name: str, builder: ChannelBuilder) -> None:
        """Register a channel builder.

        Args:
            name: Channel identifier
            builder: Zero-argument callable returning a MessageService
        """
        self._builders[name] = builder

    def get_builder(self, name: str) -> ChannelBuilder:
        """Get the builder registered under a name.

        Args:
            name: Channel identifier

        Returns:
            Registered builder

        Raises:
            ValueError: If channel not found
        """
        if name not in self._builders:
            raise ValueError(
                f"Unknown channel: {name}. "
                f"Available channels: {self.list_available()}"
            )
        return self._builders[name]

    def get(self, name: str) -> MessageService:
        """Build a channel instance by name.

        Args:
            name: Channel identifier

        Returns:
            New MessageService instance

        Raises:
            ValueError: If channel not found
        """
        return self.get_builder(name)()

    def list_available(self) -> list[str]:
        """List all available channel names.

        Returns:
            List of channel identifiers
        """
        return list(self._builders.keys())


def register_channel(name: str) -> Callable:
    """Decorator to register a channel class or builder.

    Args:
        name: Channel identifier

    Returns:
        Decorator function
    """

    def decorator(builder: ChannelBuilder) -> ChannelBuilder:
        registry.register(name, builder)
        return builder

    return decorator


registry = ChannelRegistry()
