"""Realtime broker server entry point."""

import logging
import sys

import uvicorn
from pydantic import ValidationError

from .api import create_app
from .config import get_settings

logger = logging.getLogger(__name__)


def main():
    """Run the realtime broker API server.

    Exits before binding the port when OPENAI_API_KEY is not configured.
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        missing = ", ".join(str(err["loc"][0]).upper() for err in e.errors())
        logger.error(f"Missing or invalid configuration: {missing}")
        sys.exit(1)

    app = create_app(settings)

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
