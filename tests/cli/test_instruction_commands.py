"""Tests for the parse and evaluate CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from payment_instructions.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def accounts_file(tmp_path: Path, account_payloads: list[dict]) -> Path:
    """Accounts file in list form."""
    path = tmp_path / "accounts.json"
    path.write_text(json.dumps(account_payloads))
    return path


def _stdout_json(result) -> dict:
    """Parse the JSON document printed on stdout."""
    return json.loads(result.stdout)


class TestParseCommand:
    """Tests for `payment-instructions parse`."""

    def test_prints_parsed_instruction(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["parse", "CREDIT 50 ngn TO ACCOUNT B2 FROM ACCOUNT B1", "--quiet"]
        )

        assert result.exit_code == 0
        assert _stdout_json(result) == {
            "type": "CREDIT",
            "amount": 50,
            "currency": "NGN",
            "debit_account": "B1",
            "credit_account": "B2",
            "execute_by": None,
        }

    def test_parse_error_exits_1(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["parse", "DEBIT 100 USD FROM ACCOUNT A1 TO ACCOUNT A1"])

        assert result.exit_code == 1
        data = _stdout_json(result)
        assert data["kind"] == "SameAccountError"
        assert data["status_code"] == "AC02"

    def test_uses_configured_currencies(self, runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "service.yaml"
        config.write_text("instructions:\n  supported_currencies: [EUR]\n")

        result = runner.invoke(
            app,
            ["parse", "DEBIT 1 EUR FROM ACCOUNT A1 TO ACCOUNT A2", "--config", str(config)],
        )

        assert result.exit_code == 0
        assert _stdout_json(result)["currency"] == "EUR"

    def test_missing_config_exits_1(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "parse",
                "DEBIT 1 USD FROM ACCOUNT A1 TO ACCOUNT A2",
                "--config",
                str(tmp_path / "missing.yaml"),
            ],
        )

        assert result.exit_code == 1

    def test_malformed_config_exits_1(self, runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "service.yaml"
        config.write_text("instructions: [unclosed\n")

        result = runner.invoke(
            app,
            ["parse", "DEBIT 1 USD FROM ACCOUNT A1 TO ACCOUNT A2", "--config", str(config)],
        )

        assert result.exit_code == 1
        assert result.stdout == ""


class TestEvaluateCommand:
    """Tests for `payment-instructions evaluate`."""

    def test_successful_outcome(self, runner: CliRunner, accounts_file: Path) -> None:
        result = runner.invoke(
            app,
            [
                "evaluate",
                "DEBIT 100 USD FROM ACCOUNT A1 TO ACCOUNT A2",
                "--accounts",
                str(accounts_file),
                "--quiet",
            ],
        )

        assert result.exit_code == 0
        data = _stdout_json(result)
        assert data["status"] == "successful"
        assert [account["balance"] for account in data["accounts"]] == [100, 150]

    def test_accounts_object_form(
        self, runner: CliRunner, tmp_path: Path, account_payloads: list[dict]
    ) -> None:
        path = tmp_path / "request.json"
        path.write_text(json.dumps({"accounts": account_payloads}))

        result = runner.invoke(
            app,
            ["evaluate", "DEBIT 10 USD FROM ACCOUNT A1 TO ACCOUNT A2", "-a", str(path)],
        )

        assert result.exit_code == 0
        assert _stdout_json(result)["status"] == "successful"

    def test_failed_outcome_exits_1(self, runner: CliRunner, accounts_file: Path) -> None:
        result = runner.invoke(
            app,
            ["evaluate", "DEBIT 500 USD FROM ACCOUNT A1 TO ACCOUNT A2", "-a", str(accounts_file)],
        )

        assert result.exit_code == 1
        assert _stdout_json(result)["status_code"] == "AC01"

    def test_as_of_controls_schedule(self, runner: CliRunner, accounts_file: Path) -> None:
        instruction = "DEBIT 100 USD FROM ACCOUNT A1 TO ACCOUNT A2 ON 2030-01-01"

        pending = runner.invoke(
            app, ["evaluate", instruction, "-a", str(accounts_file), "--as-of", "2029-12-31"]
        )
        settled = runner.invoke(
            app, ["evaluate", instruction, "-a", str(accounts_file), "--as-of", "2030-01-01"]
        )

        assert pending.exit_code == 0
        assert _stdout_json(pending)["status"] == "pending"
        assert _stdout_json(settled)["status"] == "successful"

    def test_invalid_accounts_exit_1(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "accounts.json"
        path.write_text(json.dumps([{"id": "A1", "balance": -5, "currency": "USD"}]))

        result = runner.invoke(
            app, ["evaluate", "DEBIT 1 USD FROM ACCOUNT A1 TO ACCOUNT A2", "-a", str(path)]
        )

        assert result.exit_code == 1
        assert result.stdout == ""

    def test_missing_accounts_file_exits_1(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "evaluate",
                "DEBIT 1 USD FROM ACCOUNT A1 TO ACCOUNT A2",
                "-a",
                str(tmp_path / "nope.json"),
            ],
        )

        assert result.exit_code == 1

    def test_malformed_json_exits_1(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "accounts.json"
        path.write_text("[{")

        result = runner.invoke(
            app, ["evaluate", "DEBIT 1 USD FROM ACCOUNT A1 TO ACCOUNT A2", "-a", str(path)]
        )

        assert result.exit_code == 1


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
