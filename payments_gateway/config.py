"""Configuration management using Pydantic Settings"""

from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict

from payments_gateway.domain.models import PaymentType


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Record store: "fixture" (in-memory sample data) or "http" (remote payments API)
    payment_source: Literal["fixture", "http"] = "fixture"

    # External Services
    payments_api_base: str = "http://localhost:8001"

    # Service
    service_name: str = "payments-gateway"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 5.0
    payments_api_max_retries: int = 3
    payments_api_backoff_base: float = 0.5  # Exponential backoff base in seconds

    # Fixture store latency simulation
    fixture_delay_seconds: float = 0.5
    fixture_lookup_delay_seconds: float = 0.3

    # Wire records with an unknown type string resolve to this member
    unknown_payment_type_fallback: PaymentType = PaymentType.CARD

    # Presentation
    display_utc_offset_hours: int = 9
    currency_suffix: str = "원"


settings = Settings()
