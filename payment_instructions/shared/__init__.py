"""Shared data contracts for the core, the API and the CLI.

Usage:
    from payment_instructions.shared import Account, Outcome

    outcome = evaluate_instruction([Account("A1", 200, "USD")], instruction)
    payload = outcome.to_dict()  # same shape over HTTP and on the CLI
"""

from payment_instructions.shared.data_contracts import (
    Account,
    InstructionType,
    Outcome,
    ParsedInstruction,
    TransactionStatus,
)

__all__ = [
    "Account",
    "InstructionType",
    "Outcome",
    "ParsedInstruction",
    "TransactionStatus",
]
