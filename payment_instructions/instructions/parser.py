"""Instruction parser.

Turns a free-text payment instruction such as::

    DEBIT 500 USD FROM ACCOUNT A1 TO ACCOUNT A2 ON 2025-01-01

into a ParsedInstruction. Checks run in a fixed order and the first
violated rule raises; nothing after it is inspected.

Keywords are matched case-insensitively. Account identifiers keep their
original case. FROM/TO/ON are located by walking the token positions, so
the route may follow the currency directly or sit anywhere after it, as
long as its direction agrees with the instruction type.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Collection, Sequence
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import NoReturn

from payment_instructions.instructions.constants import (
    ACCOUNT_ID_CHARACTERS,
    INSTRUCTION_TYPES,
    KEYWORD_ACCOUNT,
    KEYWORD_FROM,
    KEYWORD_ON,
    KEYWORD_TO,
    MAX_AMOUNT_DIGITS,
    SUPPORTED_CURRENCIES,
    StatusMessage,
)
from payment_instructions.instructions.errors import (
    InstructionError,
    InvalidAmountError,
    InvalidDateFormatError,
    InvalidInstructionFormatError,
    MalformedInstructionError,
    SameAccountError,
    UnsupportedCurrencyError,
)
from payment_instructions.shared.data_contracts import (
    InstructionType,
    ParsedInstruction,
)

logger = logging.getLogger(__name__)

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_instruction(
    instruction: str,
    supported_currencies: Collection[str] = SUPPORTED_CURRENCIES,
) -> ParsedInstruction:
    """Parse a payment instruction.

    Args:
        instruction: Raw instruction text
        supported_currencies: Upper-case currency codes accepted in the
            currency slot

    Returns:
        The structured instruction

    Raises:
        MalformedInstructionError: Bad leading keyword, or FROM/TO missing
            or in the wrong order for the instruction type
        InvalidAmountError: Amount is not a positive integer
        UnsupportedCurrencyError: Currency not in supported_currencies
        InvalidInstructionFormatError: Route accounts missing or with
            disallowed characters
        SameAccountError: Both route accounts are the same
        InvalidDateFormatError: Token after ON is not a real calendar date
    """
    words = instruction.split()
    upper_words = [word.upper() for word in words]

    if not upper_words or upper_words[0] not in INSTRUCTION_TYPES:
        _reject(MalformedInstructionError, instruction)
    instruction_type = InstructionType(upper_words[0])

    amount = _parse_amount(_token_at(words, 1))
    if amount is None:
        _reject(InvalidAmountError, instruction)

    currency = _token_at(upper_words, 2)
    if currency is None or currency not in supported_currencies:
        supported = ", ".join(sorted(supported_currencies))
        _reject(
            UnsupportedCurrencyError,
            instruction,
            f"{StatusMessage.UNSUPPORTED_CURRENCY}. Supported currencies: {supported}",
        )

    from_position = _keyword_position(upper_words, KEYWORD_FROM)
    to_position = _keyword_position(upper_words, KEYWORD_TO)
    if not _route_in_order(instruction_type, from_position, to_position):
        _reject(MalformedInstructionError, instruction)

    debit_account = _route_account(words, upper_words, from_position)
    credit_account = _route_account(words, upper_words, to_position)

    for account in (debit_account, credit_account):
        if account is not None and not is_valid_account_id(account):
            _reject(InvalidInstructionFormatError, instruction)

    if debit_account is None or credit_account is None:
        _reject(InvalidInstructionFormatError, instruction)

    if debit_account == credit_account:
        _reject(SameAccountError, instruction)

    execute_by = None
    on_position = _keyword_position(upper_words, KEYWORD_ON)
    if on_position is not None:
        execute_by = _token_at(words, on_position + 1)
        if execute_by is None or not is_valid_calendar_date(execute_by):
            _reject(InvalidDateFormatError, instruction)

    parsed = ParsedInstruction(
        type=instruction_type,
        amount=amount,
        currency=currency,
        debit_account=debit_account,
        credit_account=credit_account,
        execute_by=execute_by,
    )
    logger.info(f"Parsed instruction: {parsed.to_dict()}")
    return parsed


def is_valid_account_id(account_id: str) -> bool:
    """Return True if every character is a letter, digit, '-', '_' or '.'."""
    return bool(account_id) and all(char in ACCOUNT_ID_CHARACTERS for char in account_id)


def is_valid_calendar_date(value: str) -> bool:
    """Return True for a YYYY-MM-DD string naming a real day.

    Overflowing components (2025-02-30, 2025-13-01) do not round-trip
    through year/month/day and are rejected.
    """
    if not _DATE_PATTERN.fullmatch(value):
        return False
    year, month, day = (int(part) for part in value.split("-"))
    try:
        date(year, month, day)
    except ValueError:
        return False
    return True


def _parse_amount(token: str | None) -> int | None:
    """Return the amount as an int, or None unless it is a positive integer.

    Numeric spellings of an integer ("100", "1e3", "100.0") are accepted.
    Digit separators, non-ASCII digits and values of MAX_AMOUNT_DIGITS
    digits or more are not.
    """
    if token is None or "_" in token or not token.isascii():
        return None
    try:
        value = Decimal(token)
    except InvalidOperation:
        return None
    if not value.is_finite() or value <= 0:
        return None
    # adjusted() is the exponent of the leading digit; checked before int()
    if value.adjusted() >= MAX_AMOUNT_DIGITS - 1 or value != value.to_integral_value():
        return None
    return int(value)


def _token_at(tokens: Sequence[str], position: int) -> str | None:
    if position < len(tokens):
        return tokens[position]
    return None


def _keyword_position(upper_words: Sequence[str], keyword: str) -> int | None:
    """Position of the first token equal to keyword, or None."""
    for position, word in enumerate(upper_words):
        if word == keyword:
            return position
    return None


def _route_in_order(
    instruction_type: InstructionType,
    from_position: int | None,
    to_position: int | None,
) -> bool:
    """DEBIT routes read FROM..TO, CREDIT routes read TO..FROM."""
    if from_position is None or to_position is None:
        return False
    if instruction_type is InstructionType.DEBIT:
        return from_position < to_position
    return to_position < from_position


def _route_account(
    words: Sequence[str],
    upper_words: Sequence[str],
    keyword_position: int | None,
) -> str | None:
    """Identifier in '<keyword> ACCOUNT <id>', or None if the shape is off."""
    if keyword_position is None:
        return None
    if _token_at(upper_words, keyword_position + 1) != KEYWORD_ACCOUNT:
        return None
    return _token_at(words, keyword_position + 2)


def _reject(
    error_cls: type[InstructionError],
    instruction: str,
    message: str | None = None,
) -> NoReturn:
    error = error_cls(message, instruction=instruction)
    logger.error(f"{error.kind}: {error.message} in instruction: {instruction}")
    raise error
