"""
Configuration management using Pydantic Settings
"""
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# config.py is at: backend/cms_admin/core/config.py
_current_file = Path(__file__).resolve()
_backend_dir = _current_file.parent.parent.parent
_project_root = _backend_dir.parent
ENV_FILE = _project_root / ".env"
# Fallback: backend/.env
if not ENV_FILE.exists():
    ENV_FILE = _backend_dir / ".env"
if ENV_FILE.exists():
    load_dotenv(ENV_FILE, override=True)


class Settings(BaseSettings):
    """Application settings"""

    # Application
    app_name: str = "Shaafii CMS"
    app_env: str = Field(default="development", description="Application environment")
    log_level: str = Field(default="INFO", description="Logging level")
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API port")
    allowed_origins: str = Field(
        default="http://localhost:8000",
        description="Allowed CORS origins (comma-separated)"
    )

    # Logging
    log_sqlalchemy: bool = Field(default=False, description="Enable SQLAlchemy query logging")
    log_uvicorn_access: bool = Field(default=False, description="Enable Uvicorn access logging")
    log_module_levels: Optional[str] = Field(
        default=None,
        description='Module-specific log levels (JSON string, e.g., {"cms_admin.services": "DEBUG"})'
    )
    log_format: str = Field(
        default="json",
        description="Log format: 'json' for structured logging, 'text' for plain text"
    )
    log_file_enabled: bool = Field(default=True, description="Enable file logging")
    log_file_path: str = Field(
        default="logs/cms.log",
        description="Path to log file (relative to project root)"
    )
    log_file_rotation: str = Field(
        default="midnight",
        description="Log file rotation: 'midnight' or 'W0'..'W6' (weekly)"
    )
    log_file_retention: int = Field(default=30, ge=1, description="Number of log files to keep")
    log_sensitive_data: bool = Field(
        default=False,
        description="Enable logging of sensitive data (passwords, tokens) - NOT RECOMMENDED"
    )

    # Database
    db_url: Optional[str] = Field(
        default=None,
        description="Full SQLAlchemy URL; takes precedence over the postgres_* settings"
    )
    postgres_host: Optional[str] = Field(default=None, description="PostgreSQL host")
    postgres_db: str = Field(default="postgres", description="PostgreSQL database name")
    postgres_user: str = Field(default="postgres", description="PostgreSQL user")
    postgres_password: str = Field(default="", description="PostgreSQL password")
    postgres_port: int = Field(default=5432, ge=1, le=65535, description="PostgreSQL port")
    database_pool_size: int = Field(default=10, ge=1, description="Database pool size")
    database_max_overflow: int = Field(default=10, ge=0, description="Database max overflow")

    # Auth session
    session_cookie_name: str = Field(default="session_token", description="Session cookie name")
    session_duration_hours: int = Field(default=24, ge=1, description="Sliding session lifetime")
    session_cookie_secure: bool = Field(default=False, description="Send the session cookie over HTTPS only")

    # Web app manifest
    manifest_name: str = "Shaafii Center"
    manifest_short_name: str = "Shaafii"
    manifest_description: str = "Learning Center for: Islamic Sciences, Arabic, Qur'an"
    manifest_start_url: str = "/"
    manifest_display: str = "browser"
    manifest_background_color: str = "#015670"
    manifest_theme_color: str = "#B9795E"
    manifest_icon_src: str = Field(default="/static/icon.svg", description="Icon served from frontend/static")
    manifest_icon_type: str = "image/svg+xml"
    manifest_icon_sizes: str = "any"

    @property
    def database_url(self) -> str:
        """Construct database URL"""
        if self.db_url:
            return self.db_url
        if self.postgres_host:
            return (
                f"postgresql://{self.postgres_user}:{self.postgres_password}"
                f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
            )
        return f"sqlite:///{_project_root / 'cms.db'}"

    @property
    def allowed_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE) if ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
