"""Order queries (CQRS read side)."""

from order_service.application.queries.order_queries import GetOrder

__all__ = ["GetOrder"]
