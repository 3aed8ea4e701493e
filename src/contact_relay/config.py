"""Configuration management for the contact relay."""

from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv
from pydantic import Field, ValidationError, field_validator
from pydantic_core import PydanticUseDefault
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

DEFAULT_CONTACT_EMAIL = "philippe.clemente@orange.fr"
DEFAULT_FROM_EMAIL = "onboarding@resend.dev"


class _CredentialSettings(BaseSettings):
    """Settings whose string values are trimmed, blank meaning default."""

    @field_validator("*", mode="before")
    @classmethod
    def _strip_strings(cls, value):
        if isinstance(value, str):
            value = value.strip()
            if not value:
                raise PydanticUseDefault()
        return value


class ResendConfig(_CredentialSettings):
    """Resend API configuration."""

    api_key: Optional[str] = Field(None, description="Resend API key")

    model_config = SettingsConfigDict(env_prefix="RESEND_", extra="ignore")

    @property
    def configured(self) -> bool:
        return bool(self.api_key)


class SendGridConfig(_CredentialSettings):
    """SendGrid configuration."""

    api_key: Optional[str] = Field(None, description="SendGrid API key")

    model_config = SettingsConfigDict(env_prefix="SENDGRID_", extra="ignore")

    @property
    def configured(self) -> bool:
        return bool(self.api_key)


class GmailConfig(_CredentialSettings):
    """Gmail mailbox authenticated with an app password."""

    user: Optional[str] = None
    app_password: Optional[str] = None

    model_config = SettingsConfigDict(env_prefix="GMAIL_", extra="ignore")

    @property
    def configured(self) -> bool:
        return bool(self.user and self.app_password)


class SmtpConfig(_CredentialSettings):
    """Generic authenticated SMTP mailbox."""

    host: str = Field("smtp.orange.fr", description="SMTP server host")
    port: int = Field(587, description="SMTP server port")
    secure: bool = Field(False, description="Use implicit TLS instead of STARTTLS")
    user: Optional[str] = None
    password: Optional[str] = None

    model_config = SettingsConfigDict(env_prefix="SMTP_", extra="ignore")

    @property
    def configured(self) -> bool:
        return bool(self.user and self.password)


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    level: str = Field("INFO", description="Logging level")
    format: str = Field(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string",
    )
    file_path: Optional[str] = Field(None, description="Path to log file")
    max_file_size: int = Field(10 * 1024 * 1024, description="Maximum log file size in bytes")
    backup_count: int = Field(5, description="Number of backup log files to keep")
    console_output: bool = Field(True, description="Enable console logging")

    model_config = SettingsConfigDict(env_prefix="LOG_", extra="ignore")


class Settings(BaseSettings):
    """Main application settings."""

    host: str = Field("0.0.0.0", description="Address the HTTP server binds to")
    port: int = Field(3000, description="HTTP port")
    contact_email: str = Field(DEFAULT_CONTACT_EMAIL, description="Destination of contact messages")
    from_email: str = Field(DEFAULT_FROM_EMAIL, description="Sender for API-based providers")
    static_dir: Optional[str] = Field(None, description="Directory served at /")
    send_timeout: float = Field(15.0, description="Per-attempt provider timeout in seconds")

    resend: ResendConfig = Field(default_factory=ResendConfig)
    sendgrid: SendGridConfig = Field(default_factory=SendGridConfig)
    gmail: GmailConfig = Field(default_factory=GmailConfig)
    smtp: SmtpConfig = Field(default_factory=SmtpConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(case_sensitive=False, extra="ignore")

    @field_validator("contact_email", "from_email", mode="before")
    @classmethod
    def _strip_address(cls, value):
        return value.strip() if isinstance(value, str) else value

    @property
    def static_path(self) -> Optional[Path]:
        if not self.static_dir:
            return None
        path = Path(self.static_dir)
        return path if path.is_dir() else None


def load_settings(env_file: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load application settings.

    Sources, later overriding earlier:
    1. Default values
    2. Environment file (.env), without overriding variables already set
    3. Environment variables

    Args:
        env_file: Path to environment file (default: .env in the current directory)

    Returns:
        Loaded settings instance

    Raises:
        ConfigurationError: If a value fails validation
    """
    env_path = Path(env_file) if env_file else Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path)
    elif env_file:
        raise ConfigurationError(f"Environment file not found: {env_path}")

    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Failed to load configuration: {e}") from e


__all__ = [
    "Settings",
    "ResendConfig",
    "SendGridConfig",
    "GmailConfig",
    "SmtpConfig",
    "LoggingConfig",
    "load_settings",
]
