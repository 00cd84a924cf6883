"""Router for payment instruction endpoints.

Handles evaluation of a single instruction against the accounts sent
with it.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.responses import Response

from payment_instructions.api.dependencies import get_instruction_service
from payment_instructions.api.models import ErrorResponse, OutcomeResponse
from payment_instructions.api.services import InstructionService, PaymentRequestError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["payment-instructions"])


@router.post(
    "/payment-instructions",
    response_model=OutcomeResponse,
    response_model_exclude_unset=True,
    responses={400: {"model": ErrorResponse}},
)
def handle_payment_instruction(
    body: Any = Body(...),
    service: InstructionService = Depends(get_instruction_service),
) -> OutcomeResponse | Response:
    """Evaluate a payment instruction.

    Returns the outcome (pending, failed or successful) flattened with the
    parsed instruction fields. A body that fails validation is answered
    with 400 and echoed back.
    """
    try:
        outcome = service.handle_payment_instruction(body)
        return OutcomeResponse.from_outcome(outcome)

    except PaymentRequestError as e:
        error = ErrorResponse(message=e.message, body=body)
        # model_dump_json writes null for non-finite floats in the echoed body
        return Response(
            content=error.model_dump_json(), status_code=400, media_type="application/json"
        )
    except Exception as e:
        logger.exception("Unexpected failure while evaluating payment instruction")
        raise HTTPException(status_code=500, detail=f"Internal error: {e}") from e
