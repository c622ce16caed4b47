"""EventRenderer protocol — stable interface for event renderers.

Any renderer that implements ``render(events) -> str`` conforms to this protocol.
The built-in ``PlainTextRenderer`` is the reference implementation.

Example:
    from llano.renderers.protocol import EventRenderer

    def render_preview(renderer: EventRenderer, events: list[Event]) -> str:
        return renderer.render(events)

"""

from collections.abc import Iterable
from typing import Protocol

from llano.events import Event


class EventRenderer(Protocol):
    """Protocol for event renderers.

    Implementations must accept an event sequence and return a rendered string.

    """

    def render(self, events: Iterable[Event]) -> str:
        """Render a document event sequence to a string.

        Args:
            events: Balanced sequence of document events.

        Returns:
            Rendered string output.

        """
        ...
