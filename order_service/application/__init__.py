"""Application layer - Use cases and orchestration.

This layer contains the order use cases following the CQRS pattern:
- Commands: CreateOrder, UpdateOrderStatus (change state)
- Queries: GetOrder (read only)
- Services: OrderNotificationDispatcher (detached order.created delivery)

The application layer orchestrates validation, persistence and notification;
business rules live in domain/validators.
"""
