"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field, SecretStr, field_validator

from weathercaster.config.defaults import (
    DEFAULT_API_HOST,
    DEFAULT_API_PATH,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)
from weathercaster.models.units import DEFAULT_UNIT_SYSTEM, UnitSystem, parse_unit_system


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = Field(default=DEFAULT_API_HOST, min_length=1)
    path: str = DEFAULT_API_PATH
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT

    @field_validator("host")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class WeathercasterConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = Field(default_factory=ApiConfig)
    api_key: SecretStr = SecretStr("")
    location: str = ""
    units: UnitSystem = DEFAULT_UNIT_SYSTEM

    @field_validator("units", mode="before")
    @classmethod
    def _resolve_unit_alias(cls, value: object) -> UnitSystem:
        # InvalidUnitSystem is a ValueError, so pydantic reports it as a
        # validation error for this field.
        return parse_unit_system(value)
