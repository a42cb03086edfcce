"""Entry point for the meeting summarizer service."""

import ddtrace.auto  # noqa: F401
import uvicorn

from meeting_summarizer.app import check_startup, create_app
from meeting_summarizer.config import load_config
from meeting_summarizer.logging import setup_logging

logger = setup_logging()


def main():
    """Loads configuration, validates credentials and serves the API."""
    config = load_config()
    check_startup(config)
    app = create_app(config)
    logger.info(
        "Starting meeting summarizer",
        extra={
            "port": config.server.port,
            "email_configured": config.email.configured,
            "gemini_configured": bool(config.gemini.api_key),
        },
    )
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_config=None)


if __name__ == "__main__":
    main()
