"""
Command line entry point for running the API server with uvicorn.
"""

import uvicorn

from .core.config import settings


def main() -> None:
    """Serve the application on the configured host and port."""
    uvicorn.run(
        "fivimedia_llc.server.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
