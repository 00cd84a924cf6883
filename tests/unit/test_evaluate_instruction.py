"""Tests for evaluate_instruction, the parse-then-settle entry point."""

from datetime import date

import pytest

from payment_instructions import evaluate_instruction
from payment_instructions.instructions import StatusCode
from payment_instructions.shared.data_contracts import Account, TransactionStatus


class TestEvaluateInstruction:
    """End-to-end behavior of a single instruction."""

    def test_successful_debit(self, usd_accounts: list[Account]) -> None:
        outcome = evaluate_instruction(
            usd_accounts, "DEBIT 100 USD FROM ACCOUNT A1 TO ACCOUNT A2"
        )

        assert outcome.status is TransactionStatus.SUCCESSFUL
        assert {account.id: account.balance for account in outcome.accounts} == {
            "A1": 100,
            "A2": 150,
        }

    def test_insufficient_funds(self) -> None:
        accounts = [
            Account(id="A1", balance=50, currency="USD"),
            Account(id="A2", balance=50, currency="USD"),
        ]

        outcome = evaluate_instruction(accounts, "DEBIT 100 USD FROM ACCOUNT A1 TO ACCOUNT A2")

        assert outcome.status is TransactionStatus.FAILED
        assert outcome.status_code == StatusCode.INSUFFICIENT_FUNDS
        assert [account.balance for account in outcome.accounts] == [50, 50]

    def test_scheduled_for_tomorrow_is_pending(
        self, usd_accounts: list[Account], tomorrow: date
    ) -> None:
        outcome = evaluate_instruction(
            usd_accounts,
            f"DEBIT 100 USD FROM ACCOUNT A1 TO ACCOUNT A2 ON {tomorrow.isoformat()}",
        )

        assert outcome.status is TransactionStatus.PENDING
        assert outcome.accounts == ()
        assert outcome.to_dict()["execute_by"] == tomorrow.isoformat()

    def test_explicit_today_controls_schedule(self, usd_accounts: list[Account]) -> None:
        instruction = "DEBIT 100 USD FROM ACCOUNT A1 TO ACCOUNT A2 ON 2030-01-01"

        before = evaluate_instruction(usd_accounts, instruction, today=date(2029, 12, 31))
        on_day = evaluate_instruction(usd_accounts, instruction, today=date(2030, 1, 1))

        assert before.status is TransactionStatus.PENDING
        assert on_day.status is TransactionStatus.SUCCESSFUL

    def test_missing_account(self, usd_accounts: list[Account]) -> None:
        outcome = evaluate_instruction(
            usd_accounts, "DEBIT 100 USD FROM ACCOUNT A9 TO ACCOUNT A2"
        )

        assert outcome.status_code == StatusCode.ACCOUNT_NOT_FOUND
        assert [account.id for account in outcome.accounts] == ["A2"]

    @pytest.mark.parametrize(
        ("instruction", "status_code"),
        [
            ("CREDIT 100 EUR TO ACCOUNT A2 FROM ACCOUNT A1", StatusCode.UNSUPPORTED_CURRENCY),
            ("DEBIT 100 USD FROM ACCOUNT A1 TO ACCOUNT A1", StatusCode.SAME_ACCOUNT_ERROR),
            ("PAY 100 USD FROM ACCOUNT A1 TO ACCOUNT A2", StatusCode.MALFORMED_INSTRUCTION),
            ("DEBIT 1.5 USD FROM ACCOUNT A1 TO ACCOUNT A2", StatusCode.INVALID_AMOUNT),
            ("DEBIT 1e5000 USD FROM ACCOUNT A1 TO ACCOUNT A2", StatusCode.INVALID_AMOUNT),
            (
                "DEBIT 100 USD FROM ACCOUNT A1 TO ACCOUNT A2 ON 2025-02-30",
                StatusCode.INVALID_DATE_FORMAT,
            ),
        ],
    )
    def test_parse_failure_becomes_failed_outcome(
        self, usd_accounts: list[Account], instruction: str, status_code: str
    ) -> None:
        """Parse errors are reported as outcomes with empty instruction fields."""
        outcome = evaluate_instruction(usd_accounts, instruction)

        data = outcome.to_dict()
        assert outcome.status is TransactionStatus.FAILED
        assert outcome.status_code == status_code
        assert outcome.instruction is None
        assert data["type"] is None
        assert data["amount"] is None
        assert data["debit_account"] is None
        assert data["accounts"] == []

    def test_supported_currencies_are_configurable(self) -> None:
        accounts = [
            Account(id="A1", balance=10, currency="EUR"),
            Account(id="A2", balance=0, currency="EUR"),
        ]

        outcome = evaluate_instruction(
            accounts,
            "DEBIT 10 EUR FROM ACCOUNT A1 TO ACCOUNT A2",
            supported_currencies={"EUR", "USD"},
        )

        assert outcome.status is TransactionStatus.SUCCESSFUL

    def test_unexpected_errors_propagate(self) -> None:
        """Failures outside the parser are not turned into outcomes."""
        with pytest.raises(AttributeError):
            evaluate_instruction([object()], "DEBIT 1 USD FROM ACCOUNT A1 TO ACCOUNT A2")
