"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel, computed_field


class GeminiConfig(BaseModel, frozen=True):
    """Gemini summarization configuration."""

    api_key: str
    model_name: str = "gemini-2.0-flash"
    timeout_seconds: float = 30.0


class EmailConfig(BaseModel, frozen=True):
    """SMTP account used to deliver summaries."""

    user: str
    app_password: str
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465
    verify_tls: bool = True
    timeout_seconds: float = 30.0

    @computed_field
    @property
    def configured(self) -> bool:
        """True when both the account and its app password are set."""
        return bool(self.user and self.app_password)


class ServerConfig(BaseModel, frozen=True):
    """HTTP server configuration."""

    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: tuple[str, ...] = ("*",)


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    gemini: GeminiConfig
    email: EmailConfig
    server: ServerConfig = ServerConfig()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    origins = os.getenv("CORS_ORIGINS", "*")
    return AppConfig(
        gemini=GeminiConfig(
            api_key=os.getenv("GEMINI_API_KEY", ""),
            model_name=os.getenv("GEMINI_MODEL", "gemini-2.0-flash"),
            timeout_seconds=float(os.getenv("SUMMARY_TIMEOUT_SECONDS", "30")),
        ),
        email=EmailConfig(
            user=os.getenv("EMAIL_USER", ""),
            app_password=os.getenv("EMAIL_APP_PASSWORD", ""),
            smtp_host=os.getenv("SMTP_HOST", "smtp.gmail.com"),
            smtp_port=int(os.getenv("SMTP_PORT", "465")),
            verify_tls=_env_flag("SMTP_VERIFY_TLS", "true"),
            timeout_seconds=float(os.getenv("SMTP_TIMEOUT_SECONDS", "30")),
        ),
        server=ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        ),
    )
