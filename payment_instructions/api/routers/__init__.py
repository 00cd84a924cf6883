"""FastAPI routers for API endpoints."""

from .payment_instructions import router as payment_instructions_router

__all__ = [
    "payment_instructions_router",
]
