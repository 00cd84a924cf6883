"""Pydantic models for the payment instruction endpoint."""

from __future__ import annotations

import math
from typing import Annotated, Any

from pydantic import BaseModel, Field, StringConstraints, field_validator

from payment_instructions.shared.data_contracts import Account, Outcome


class AccountPayload(BaseModel):
    """Account record as supplied in a request body."""

    id: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)
    ] = Field(..., description="Account identifier")
    balance: int | float = Field(..., description="Current balance, at least 0")
    currency: Annotated[str, StringConstraints(strip_whitespace=True)] = Field(
        ..., description="3-letter currency code"
    )

    @field_validator("balance", mode="before")
    @classmethod
    def balance_is_a_number(cls, v: Any) -> Any:
        """Reject strings, booleans and non-finite floats before coercion."""
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("balance must be a number")
        if isinstance(v, float) and not math.isfinite(v):
            raise ValueError("balance must be a finite number")
        return v

    @field_validator("balance")
    @classmethod
    def balance_not_negative(cls, v: int | float) -> int | float:
        """Validate balance >= 0."""
        if v < 0:
            raise ValueError("balance must be greater than or equal to 0")
        return v

    @field_validator("currency")
    @classmethod
    def currency_is_three_letters(cls, v: str) -> str:
        """Validate currency is exactly 3 letters and normalize to upper case."""
        if len(v) != 3 or not v.isalpha() or not v.isascii():
            raise ValueError("currency must be exactly 3 letters")
        return v.upper()

    def to_account(self) -> Account:
        return Account(id=self.id, balance=self.balance, currency=self.currency)


class PaymentInstructionRequest(BaseModel):
    """Request body for POST /payment-instructions."""

    accounts: list[AccountPayload] = Field(
        ..., description="Accounts the instruction may reference"
    )
    instruction: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=5)
    ] = Field(..., description="Free-text payment instruction")


class AccountResponse(BaseModel):
    """Account as echoed back in an outcome."""

    id: str
    balance: int | float
    currency: str
    balance_before: int | float | None = Field(
        None, description="Balance before settlement (successful outcomes only)"
    )


class OutcomeResponse(BaseModel):
    """Response model for an evaluated payment instruction."""

    type: str | None = Field(None, description="DEBIT or CREDIT")
    amount: int | None = None
    currency: str | None = None
    debit_account: str | None = None
    credit_account: str | None = None
    execute_by: str | None = Field(None, description="Scheduled date (YYYY-MM-DD)")
    status: str = Field(..., description="pending, failed or successful")
    status_reason: str
    status_code: str
    accounts: list[AccountResponse]

    @classmethod
    def from_outcome(cls, outcome: Outcome) -> OutcomeResponse:
        return cls.model_validate(outcome.to_dict())


class ErrorResponse(BaseModel):
    """Response model for a rejected request body."""

    error: bool = True
    message: str
    body: Any = Field(None, description="The request body as received")
