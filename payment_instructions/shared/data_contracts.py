"""Canonical data structures shared between the core, the API and the CLI.

These define the SINGLE SOURCE OF TRUTH for field names and types.
The API response models and the CLI JSON output are both built from
``to_dict()`` on these contracts.

Example:
    >>> from payment_instructions.shared.data_contracts import Account
    >>> account = Account(id="A1", balance=200, currency="USD")
    >>> account.settled(balance=100).to_dict()
    {'id': 'A1', 'balance': 100, 'currency': 'USD', 'balance_before': 200}
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any


class InstructionType(str, Enum):
    """Direction keyword leading every instruction."""

    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


class TransactionStatus(str, Enum):
    """Terminal status of an evaluated instruction."""

    PENDING = "pending"
    FAILED = "failed"
    SUCCESSFUL = "successful"


@dataclass(frozen=True)
class Account:
    """Account record supplied with a request.

    Fields:
        id: Account identifier (case-sensitive)
        balance: Current balance, never negative on input
        currency: ISO-style 3-letter currency code
        balance_before: Balance prior to settlement. Only set on the
            copies produced by a successful settlement.
    """

    id: str
    balance: int | float
    currency: str
    balance_before: int | float | None = None

    def settled(self, balance: int | float) -> Account:
        """Return a copy carrying the new balance and the previous one."""
        return replace(self, balance=balance, balance_before=self.balance)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "balance": self.balance,
            "currency": self.currency,
        }
        if self.balance_before is not None:
            data["balance_before"] = self.balance_before
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Account:
        return cls(
            id=data["id"],
            balance=data["balance"],
            currency=data["currency"],
            balance_before=data.get("balance_before"),
        )


@dataclass(frozen=True)
class ParsedInstruction:
    """Structured form of a payment instruction.

    IMPORTANT: ``debit_account`` is always the account named after FROM and
    ``credit_account`` the one named after TO, for both instruction types.
    """

    type: InstructionType
    amount: int
    currency: str
    debit_account: str
    credit_account: str
    execute_by: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "amount": self.amount,
            "currency": self.currency,
            "debit_account": self.debit_account,
            "credit_account": self.credit_account,
            "execute_by": self.execute_by,
        }


# Field values of an outcome produced before an instruction could be parsed
EMPTY_INSTRUCTION_FIELDS: dict[str, Any] = {
    "type": None,
    "amount": None,
    "currency": None,
    "debit_account": None,
    "credit_account": None,
    "execute_by": None,
}


@dataclass(frozen=True)
class Outcome:
    """Final decision record for one instruction.

    ``instruction`` is None when the instruction failed to parse; the
    flattened instruction fields are then all None.
    """

    status: TransactionStatus
    status_reason: str
    status_code: str
    instruction: ParsedInstruction | None = None
    accounts: tuple[Account, ...] = field(default_factory=tuple)

    @property
    def is_failed(self) -> bool:
        return self.status is TransactionStatus.FAILED

    def to_dict(self) -> dict[str, Any]:
        """Flatten the instruction fields next to the status fields."""
        if self.instruction is not None:
            data = self.instruction.to_dict()
        else:
            data = dict(EMPTY_INSTRUCTION_FIELDS)
        data.update(
            {
                "status": self.status.value,
                "status_reason": self.status_reason,
                "status_code": self.status_code,
                "accounts": [account.to_dict() for account in self.accounts],
            }
        )
        return data
