"""API routers."""

from meeting_summarizer.routes.health import router as health_router
from meeting_summarizer.routes.mail import router as mail_router
from meeting_summarizer.routes.summaries import router as summaries_router

__all__ = ["health_router", "mail_router", "summaries_router"]
