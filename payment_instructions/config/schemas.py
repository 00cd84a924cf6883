"""Pydantic schemas for service configuration."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from payment_instructions.instructions.constants import SUPPORTED_CURRENCIES

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# ============================================================================
# Section Schemas
# ============================================================================

class ServerSettings(BaseModel):
    """HTTP server binding."""
    host: str = Field("127.0.0.1", description="Interface the API binds to")
    port: int = Field(8000, description="TCP port the API listens on", ge=1, le=65535)


class LoggingSettings(BaseModel):
    """Log level shared by the service loggers and uvicorn."""
    level: str = Field("INFO", description="Standard logging level name")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate level is a standard logging level name."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown logging level: {v}")
        return level


class InstructionSettings(BaseModel):
    """Vocabulary accepted by the instruction parser."""
    supported_currencies: list[str] = Field(
        default_factory=lambda: sorted(SUPPORTED_CURRENCIES),
        description="Currency codes accepted in instructions",
        min_length=1,
    )

    @field_validator("supported_currencies")
    @classmethod
    def validate_currency_codes(cls, v: list[str]) -> list[str]:
        """Normalize codes to upper case and require 3 unique letters each."""
        codes = [code.strip().upper() for code in v]
        for code in codes:
            if len(code) != 3 or not code.isalpha() or not code.isascii():
                raise ValueError(f"Currency code must be 3 letters, got {code!r}")
        if len(set(codes)) != len(codes):
            raise ValueError(f"Duplicate currency codes: {codes}")
        return codes


# ============================================================================
# Root Configuration
# ============================================================================

class ServiceConfig(BaseModel):
    """Complete service configuration. Every section has defaults."""
    server: ServerSettings = Field(default_factory=ServerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    instructions: InstructionSettings = Field(default_factory=InstructionSettings)

    @property
    def supported_currencies(self) -> frozenset[str]:
        return frozenset(self.instructions.supported_currencies)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> ServiceConfig:
        """Create config from dictionary."""
        return cls.model_validate(config_dict)
