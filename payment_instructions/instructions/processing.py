"""Core entry point: parse an instruction and evaluate it in one call."""

from __future__ import annotations

import logging
from collections.abc import Collection, Sequence
from datetime import date

from payment_instructions.instructions.constants import SUPPORTED_CURRENCIES
from payment_instructions.instructions.errors import InstructionError
from payment_instructions.instructions.evaluator import evaluate_settlement
from payment_instructions.instructions.parser import parse_instruction
from payment_instructions.shared.data_contracts import (
    Account,
    Outcome,
    TransactionStatus,
)

logger = logging.getLogger(__name__)


def evaluate_instruction(
    accounts: Sequence[Account],
    instruction: str,
    supported_currencies: Collection[str] = SUPPORTED_CURRENCIES,
    today: date | None = None,
) -> Outcome:
    """Parse and evaluate a payment instruction.

    A parse failure becomes a failed outcome carrying the error's message
    and status code, with no instruction fields and no accounts. Any other
    exception is not an outcome and propagates to the caller.

    Args:
        accounts: Accounts supplied with the request
        instruction: Raw instruction text
        supported_currencies: Currency allow-list passed to the parser
        today: Calendar day used for the schedule check

    Returns:
        The outcome of the instruction
    """
    try:
        parsed = parse_instruction(instruction, supported_currencies)
    except InstructionError as e:
        return Outcome(
            status=TransactionStatus.FAILED,
            status_reason=e.message,
            status_code=e.status_code,
        )

    outcome = evaluate_settlement(parsed, accounts, today=today)
    logger.info(
        f"Instruction {parsed.type.value} {parsed.amount} {parsed.currency} "
        f"evaluated: {outcome.status.value} ({outcome.status_code})"
    )
    return outcome
