"""Configuration module for Payment Instructions."""
from pydantic import ValidationError

from .loader import load_config
from .schemas import (
    InstructionSettings,
    LoggingSettings,
    ServerSettings,
    ServiceConfig,
)

__all__ = [
    "InstructionSettings",
    "LoggingSettings",
    "ServerSettings",
    "ServiceConfig",
    "ValidationError",
    "load_config",
]
