"""Domain events package."""

from order_service.domain.events.base_event import DomainEvent
from order_service.domain.events.order_events import OrderCreated

__all__ = ["DomainEvent", "OrderCreated"]
