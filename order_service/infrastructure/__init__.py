"""Infrastructure layer - adapters for the order store, notification bus and logging."""
