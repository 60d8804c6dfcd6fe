"""Run the order service: ``python -m order_service``."""

import uvicorn

from order_service.core.config import settings


def main() -> None:
    uvicorn.run(
        "order_service.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=settings.is_development and settings.debug,
    )


if __name__ == "__main__":
    main()
