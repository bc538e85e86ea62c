"""Runtime feature toggles derived from configuration."""

from pydantic import BaseModel, Field

from vagaflow.config import Settings, get_settings


class FeatureFlags(BaseModel):
    """Switches that turn whole features on or off without a deploy."""

    user_registrations: bool = Field(..., description="Whether new accounts can be created")
    rate_limiting: bool = Field(..., description="Whether auth endpoints are rate limited")

    @classmethod
    def from_settings(cls, settings: Settings) -> "FeatureFlags":
        return cls(
            user_registrations=settings.ALLOW_USER_REGISTRATIONS,
            rate_limiting=settings.RATE_LIMIT_ENABLED,
        )


def get_feature_flags() -> FeatureFlags:
    """Current flags. Read on every call so tests can swap settings."""
    return FeatureFlags.from_settings(get_settings())


def is_user_registrations_enabled() -> bool:
    return get_feature_flags().user_registrations


def is_rate_limiting_enabled() -> bool:
    return get_feature_flags().rate_limiting
