"""Pydantic models for API request/response schemas."""

from .payment_instructions import (
    AccountPayload,
    AccountResponse,
    ErrorResponse,
    OutcomeResponse,
    PaymentInstructionRequest,
)

__all__ = [
    "AccountPayload",
    "AccountResponse",
    "ErrorResponse",
    "OutcomeResponse",
    "PaymentInstructionRequest",
]
