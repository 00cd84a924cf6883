"""Service layer for payment instruction handling.

This module provides the InstructionService class which validates request
bodies and runs the parse-and-settle pipeline on them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection
from datetime import date
from typing import Any

from pydantic import ValidationError

from payment_instructions.api.models import PaymentInstructionRequest
from payment_instructions.instructions import SUPPORTED_CURRENCIES, evaluate_instruction
from payment_instructions.shared.data_contracts import Outcome

logger = logging.getLogger(__name__)


class PaymentRequestError(Exception):
    """Raised when a request body cannot be handed to the instruction pipeline.

    ``code`` is BADREQUEST when the body is not a JSON object at all and
    VALIDATION when it is an object that fails the request schema.
    """

    BADREQUEST = "BADREQUEST"
    VALIDATION = "VALIDATION"

    def __init__(self, message: str, code: str, body: Any = None) -> None:
        self.message = message
        self.code = code
        self.body = body
        super().__init__(message)


def first_validation_message(error: ValidationError) -> str:
    """Readable form of the first error in a pydantic ValidationError."""
    details = error.errors()
    if not details:
        return str(error)
    first = details[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    if location:
        return f"{location}: {first['msg']}"
    return first["msg"]


class InstructionService:
    """Service for evaluating payment instructions.

    This service handles:
    - Request body validation
    - Conversion of validated accounts to Account contracts
    - Parsing and evaluation with the configured currency allow-list

    It holds no per-request state, so one instance serves every request.
    """

    def __init__(
        self,
        supported_currencies: Collection[str] = SUPPORTED_CURRENCIES,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the instruction service.

        Args:
            supported_currencies: Currency codes accepted by the parser
            today: Callable returning the current calendar date
        """
        self._supported_currencies = frozenset(supported_currencies)
        self._today = today

    @property
    def supported_currencies(self) -> frozenset[str]:
        return self._supported_currencies

    def validate_request(self, body: Any) -> PaymentInstructionRequest:
        """Validate a raw request body.

        Args:
            body: Decoded JSON request body

        Returns:
            The validated request

        Raises:
            PaymentRequestError: If the body is not an object or fails validation
        """
        if not isinstance(body, dict):
            logger.warning(f"Rejected request body of type {type(body).__name__}")
            raise PaymentRequestError(
                "Request body must be a JSON object",
                PaymentRequestError.BADREQUEST,
                body,
            )
        try:
            return PaymentInstructionRequest.model_validate(body)
        except ValidationError as e:
            message = first_validation_message(e)
            logger.warning(f"Rejected request body: {message}")
            raise PaymentRequestError(
                message, PaymentRequestError.VALIDATION, body
            ) from e

    def handle_payment_instruction(self, body: Any) -> Outcome:
        """Validate a request body and evaluate its instruction.

        Args:
            body: Decoded JSON request body

        Returns:
            The outcome of the instruction. Parse failures and business
            rule failures are failed outcomes, not exceptions.

        Raises:
            PaymentRequestError: If the body fails validation
        """
        request = self.validate_request(body)
        accounts = [payload.to_account() for payload in request.accounts]
        outcome = evaluate_instruction(
            accounts,
            request.instruction,
            supported_currencies=self._supported_currencies,
            today=self._today(),
        )
        logger.info(
            f"Payment instruction {outcome.status.value}: "
            f"{outcome.status_code} {outcome.status_reason}"
        )
        return outcome
