"""Application configuration and settings management."""

from typing import Any, Optional

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Appliance Storefront API"
    api_prefix: str = "/api"

    # Store reference point used for delivery distance
    shop_latitude: float = Field(default=6.1145877, description="Latitude of the physical store.")
    shop_longitude: float = Field(default=125.1802737, description="Longitude of the physical store.")
    default_shipping_fee: int = Field(
        default=500,
        ge=0,
        description="Flat fee (PHP) charged when the customer's location cannot be determined.",
    )

    geolocation_url: Optional[str] = Field(
        default=None,
        description="HTTP geolocation service returning {latitude, longitude} JSON.",
    )
    geolocation_timeout_seconds: float = Field(default=5.0, gt=0.0)
    geolocation_high_accuracy: bool = True
    geolocation_maximum_age_seconds: int = Field(default=0, ge=0)

    product_page_size: int = Field(default=50, ge=1, le=500)
    address_list_limit: int = Field(default=50, ge=1)
    service_request_list_limit: int = Field(default=50, ge=1)

    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    # Supabase configuration
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL (e.g., https://xxx.supabase.co).",
    )
    supabase_key: Optional[str] = Field(
        default=None,
        description="Supabase service role key for backend operations.",
    )

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @property
    def shop_location(self) -> tuple[float, float]:
        return (self.shop_latitude, self.shop_longitude)


settings = Settings()
