"""Settlement evaluator.

Applies the business checks to a parsed instruction, in order:

1. Schedule: a future execution date leaves the instruction pending
2. Account resolution: both route accounts must be supplied
3. Currency: both accounts must hold the instruction currency
4. Funds: the debit account must cover the amount
5. Settlement: both balances move by the amount

Every branch returns an Outcome; nothing here raises.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from payment_instructions.instructions.constants import StatusCode, StatusMessage
from payment_instructions.shared.data_contracts import (
    Account,
    Outcome,
    ParsedInstruction,
    TransactionStatus,
)


def evaluate_settlement(
    parsed: ParsedInstruction,
    accounts: Sequence[Account],
    today: date | None = None,
) -> Outcome:
    """Decide the outcome of a parsed instruction against the given accounts.

    Args:
        parsed: Instruction produced by parse_instruction
        accounts: Accounts supplied with the request, in request order
        today: Calendar day to compare execute_by against (defaults to
            the local current date)

    Returns:
        Pending, failed or successful outcome. Only a successful outcome
        carries updated balances; the input accounts are never modified.
    """
    today = today or date.today()

    if parsed.execute_by is not None and date.fromisoformat(parsed.execute_by) > today:
        return Outcome(
            status=TransactionStatus.PENDING,
            status_reason=StatusMessage.TRANSACTION_PENDING,
            status_code=StatusCode.TRANSACTION_PENDING,
            instruction=parsed,
        )

    debit = _find_account(accounts, parsed.debit_account)
    credit = _find_account(accounts, parsed.credit_account)

    if debit is None or credit is None:
        route = (parsed.debit_account, parsed.credit_account)
        return _failed(
            parsed,
            StatusMessage.ACCOUNT_NOT_FOUND,
            StatusCode.ACCOUNT_NOT_FOUND,
            tuple(account for account in accounts if account.id in route),
        )

    if (
        debit.currency.upper() != parsed.currency
        or credit.currency.upper() != parsed.currency
    ):
        return _failed(
            parsed,
            StatusMessage.CURRENCY_MISMATCH,
            StatusCode.CURRENCY_MISMATCH,
            (debit, credit),
        )

    if debit.balance < parsed.amount:
        return _failed(
            parsed,
            StatusMessage.INSUFFICIENT_FUNDS,
            StatusCode.INSUFFICIENT_FUNDS,
            (debit, credit),
        )

    return Outcome(
        status=TransactionStatus.SUCCESSFUL,
        status_reason=StatusMessage.TRANSACTION_SUCCESSFUL,
        status_code=StatusCode.TRANSACTION_SUCCESSFUL,
        instruction=parsed,
        accounts=(
            debit.settled(debit.balance - parsed.amount),
            credit.settled(credit.balance + parsed.amount),
        ),
    )


def _find_account(accounts: Sequence[Account], account_id: str) -> Account | None:
    """First account with the given id (ids are case-sensitive)."""
    for account in accounts:
        if account.id == account_id:
            return account
    return None


def _failed(
    parsed: ParsedInstruction,
    reason: str,
    code: str,
    accounts: tuple[Account, ...],
) -> Outcome:
    return Outcome(
        status=TransactionStatus.FAILED,
        status_reason=reason,
        status_code=code,
        instruction=parsed,
        accounts=accounts,
    )
