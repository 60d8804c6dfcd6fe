"""Domain layer - Pure business logic.

This layer contains the order entity, its status enumeration, domain errors,
domain events and protocols (ports). The domain layer has NO dependencies on
any framework or infrastructure - it is pure Python.

Structure:
- entities/: Order and Item
- enums/: OrderStatus
- errors/: Order-specific error types and messages
- events/: Domain events (OrderCreated)
- protocols/: Repository, notifier and logger interfaces
"""
