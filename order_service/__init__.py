"""Order service.

Purchase order lifecycle (create, get, update status) behind an HTTP API,
persisted in a document store, with best-effort order.created notifications.
"""

__version__ = "0.1.0"
