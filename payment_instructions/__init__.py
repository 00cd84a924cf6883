"""Payment Instructions - parse and settle free-text payment instructions."""

from payment_instructions.instructions import (
    InstructionError,
    evaluate_instruction,
    evaluate_settlement,
    parse_instruction,
)
from payment_instructions.shared import (
    Account,
    InstructionType,
    Outcome,
    ParsedInstruction,
    TransactionStatus,
)

__version__ = "0.1.0"

__all__ = [
    "Account",
    "InstructionError",
    "InstructionType",
    "Outcome",
    "ParsedInstruction",
    "TransactionStatus",
    "__version__",
    "evaluate_instruction",
    "evaluate_settlement",
    "parse_instruction",
]
