"""Run the service with uvicorn: python -m credit_engine"""

import uvicorn

from credit_engine.config import settings


def main() -> None:
    uvicorn.run(
        "credit_engine.api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
