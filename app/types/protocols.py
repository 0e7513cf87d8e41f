from __future__ import annotations

from typing import Any, Dict, List, Protocol

from .events import NormalizedEvent


class MessagingAdapter(Protocol):
    """Protocol for inbound webhook providers.

    Concrete implementations encapsulate provider-specific webhook shapes so
    routers remain provider-agnostic. An adapter turns one webhook body into
    zero or more `NormalizedEvent`s: canonical addresses for every party and
    classified content for every message.

    Minimal example:
        >>> from typing import Any, Dict, List
        >>> from app.types import MessagingAdapter, NormalizedEvent
        >>> class EchoAdapter(MessagingAdapter):
        ...     def normalize_events(self, body: Dict[str, Any]) -> List[NormalizedEvent]:
        ...         return [NormalizedEvent(content=str(body.get("text", "")))]
    """

    def normalize_events(self, body: Dict[str, Any]) -> List[NormalizedEvent]:
        """Normalize an inbound webhook payload to a list of common events.

        Implementations must not raise on unexpected shapes; bodies they do
        not understand produce an empty list.
        """
        ...
