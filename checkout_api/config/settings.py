"""
Configuration settings for the checkout API
Handles environment variables and application settings
"""
from typing import Optional, List
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "checkout-api"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # CORS (comma-separated)
    ALLOWED_ORIGINS: str = "*"

    # Razorpay
    RAZORPAY_KEY_ID: Optional[str] = None
    RAZORPAY_KEY_SECRET: Optional[str] = None
    RAZORPAY_API_BASE: str = "https://api.razorpay.com"
    RAZORPAY_TIMEOUT_SECONDS: float = 15.0

    # Email (service mailbox is both sender and cc)
    EMAIL_USER: Optional[str] = None
    EMAIL_FROM_NAME: Optional[str] = None
    SENDGRID_API_KEY: Optional[str] = None

    @field_validator("RAZORPAY_KEY_ID", "RAZORPAY_KEY_SECRET", "EMAIL_USER", "SENDGRID_API_KEY")
    @classmethod
    def blank_as_missing(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]

    @property
    def razorpay_configured(self) -> bool:
        return bool(self.RAZORPAY_KEY_ID and self.RAZORPAY_KEY_SECRET)

    @property
    def email_configured(self) -> bool:
        return bool(self.EMAIL_USER and self.SENDGRID_API_KEY)

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore extra fields from .env file


# Create settings instance
settings = Settings()


# Environment-specific overrides
if settings.ENVIRONMENT == "development":
    settings.DEBUG = True


def missing_settings(current: Settings) -> List[str]:
    """Names of credentials that are not set; the process still starts without them."""
    missing = []
    if not current.RAZORPAY_KEY_ID:
        missing.append("RAZORPAY_KEY_ID")
    if not current.RAZORPAY_KEY_SECRET:
        missing.append("RAZORPAY_KEY_SECRET")
    if not current.EMAIL_USER:
        missing.append("EMAIL_USER")
    if not current.SENDGRID_API_KEY:
        missing.append("SENDGRID_API_KEY")
    return missing
