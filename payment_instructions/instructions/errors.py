"""Classified failures raised by the instruction parser.

Each subclass names one kind of failure and carries the status code that
is reported on the resulting failed outcome.
"""

from __future__ import annotations

from payment_instructions.instructions.constants import StatusCode, StatusMessage


class InstructionError(Exception):
    """Base class for instruction parse failures."""

    kind: str = "InstructionError"
    status_code: str = StatusCode.MALFORMED_INSTRUCTION
    default_message: str = StatusMessage.MALFORMED_INSTRUCTION

    def __init__(self, message: str | None = None, instruction: str | None = None) -> None:
        self.message = message or self.default_message
        self.instruction = instruction
        super().__init__(self.message)

    def to_dict(self) -> dict[str, str]:
        return {
            "kind": self.kind,
            "message": self.message,
            "status_code": self.status_code,
        }


class MalformedInstructionError(InstructionError):
    """Leading keyword missing or invalid, or FROM/TO missing or misordered."""

    kind = "MalformedInstruction"
    status_code = StatusCode.MALFORMED_INSTRUCTION
    default_message = StatusMessage.MALFORMED_INSTRUCTION


class InvalidAmountError(InstructionError):
    """Amount token is not a positive integer."""

    kind = "InvalidAmount"
    status_code = StatusCode.INVALID_AMOUNT
    default_message = StatusMessage.INVALID_AMOUNT


class UnsupportedCurrencyError(InstructionError):
    """Currency token is not in the supported set."""

    kind = "UnsupportedCurrency"
    status_code = StatusCode.UNSUPPORTED_CURRENCY
    default_message = StatusMessage.UNSUPPORTED_CURRENCY


class InvalidInstructionFormatError(InstructionError):
    """Route account tokens are missing or contain disallowed characters."""

    kind = "InvalidInstructionFormat"
    status_code = StatusCode.INVALID_ACCOUNT_FORMAT
    default_message = StatusMessage.INVALID_INSTRUCTION_FORMAT


class SameAccountError(InstructionError):
    """Debit and credit identifiers are identical."""

    kind = "SameAccountError"
    status_code = StatusCode.SAME_ACCOUNT_ERROR
    default_message = StatusMessage.SAME_ACCOUNT_ERROR


class InvalidDateFormatError(InstructionError):
    """Token after ON is not a real YYYY-MM-DD calendar date."""

    kind = "InvalidDateFormat"
    status_code = StatusCode.INVALID_DATE_FORMAT
    default_message = StatusMessage.INVALID_DATE_FORMAT
