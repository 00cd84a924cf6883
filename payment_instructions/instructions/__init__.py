"""Instruction parsing and settlement evaluation."""

from .constants import (
    ACCOUNT_ID_CHARACTERS,
    INSTRUCTION_TYPES,
    MAX_AMOUNT_DIGITS,
    SUPPORTED_CURRENCIES,
    StatusCode,
    StatusMessage,
)
from .errors import (
    InstructionError,
    InvalidAmountError,
    InvalidDateFormatError,
    InvalidInstructionFormatError,
    MalformedInstructionError,
    SameAccountError,
    UnsupportedCurrencyError,
)
from .evaluator import evaluate_settlement
from .parser import is_valid_account_id, is_valid_calendar_date, parse_instruction
from .processing import evaluate_instruction

__all__ = [
    "ACCOUNT_ID_CHARACTERS",
    "INSTRUCTION_TYPES",
    "MAX_AMOUNT_DIGITS",
    "SUPPORTED_CURRENCIES",
    "InstructionError",
    "InvalidAmountError",
    "InvalidDateFormatError",
    "InvalidInstructionFormatError",
    "MalformedInstructionError",
    "SameAccountError",
    "StatusCode",
    "StatusMessage",
    "UnsupportedCurrencyError",
    "evaluate_instruction",
    "evaluate_settlement",
    "is_valid_account_id",
    "is_valid_calendar_date",
    "parse_instruction",
]
