"""API services for Payment Instructions."""

from .instruction_service import (
    InstructionService,
    PaymentRequestError,
)

__all__ = [
    "InstructionService",
    "PaymentRequestError",
]
