"""
News Briefing server.

Loads configuration from the environment (and an optional .env file),
configures logging and serves the FastAPI app with uvicorn.
"""

import logging

import uvicorn
from dotenv import load_dotenv

from briefing.app import create_app
from briefing.config import load_settings

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def main():
    """Main execution entry point."""
    load_dotenv()
    settings = load_settings()
    configure_logging(settings.log_level)

    if not settings.api_key:
        logger.error("GOOGLE_API_KEY not set. Only cached summaries can be served.")

    app = create_app(settings)
    logger.info("Server running on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
