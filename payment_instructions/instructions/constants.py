"""Static vocabulary of the instruction language and its status codes."""

SUPPORTED_CURRENCIES: frozenset[str] = frozenset({"USD", "NGN", "GBP", "GHS"})

INSTRUCTION_TYPES: frozenset[str] = frozenset({"DEBIT", "CREDIT"})

ACCOUNT_ID_CHARACTERS: frozenset[str] = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789"
    "-_."
)

# Amounts with this many integer digits or more are out of range
MAX_AMOUNT_DIGITS = 309

# Route and schedule keywords
KEYWORD_FROM = "FROM"
KEYWORD_TO = "TO"
KEYWORD_ACCOUNT = "ACCOUNT"
KEYWORD_ON = "ON"


class StatusCode:
    """Status codes reported on outcomes and parse errors."""

    TRANSACTION_SUCCESSFUL = "AP00"
    TRANSACTION_PENDING = "AP02"
    INSUFFICIENT_FUNDS = "AC01"
    SAME_ACCOUNT_ERROR = "AC02"
    ACCOUNT_NOT_FOUND = "AC03"
    INVALID_ACCOUNT_FORMAT = "AC04"
    INVALID_AMOUNT = "AM01"
    CURRENCY_MISMATCH = "CU01"
    UNSUPPORTED_CURRENCY = "CU02"
    INVALID_DATE_FORMAT = "DT01"
    MALFORMED_INSTRUCTION = "SY03"


class StatusMessage:
    """Human-readable reasons paired with the status codes."""

    TRANSACTION_SUCCESSFUL = "Transaction executed successfully"
    TRANSACTION_PENDING = "Transaction pending"
    INSUFFICIENT_FUNDS = "Insufficient funds in debit account"
    SAME_ACCOUNT_ERROR = "Debit and credit accounts cannot be the same"
    ACCOUNT_NOT_FOUND = "Account not found"
    INVALID_INSTRUCTION_FORMAT = "Invalid account format in instruction"
    INVALID_AMOUNT = "Amount must be a positive integer"
    CURRENCY_MISMATCH = "Account currency does not match instruction currency"
    UNSUPPORTED_CURRENCY = "Unsupported currency"
    INVALID_DATE_FORMAT = "Invalid date format. Expected a valid YYYY-MM-DD date"
    MALFORMED_INSTRUCTION = "Malformed instruction"
