"""FastAPI application for Payment Instructions."""

from __future__ import annotations

from fastapi import FastAPI

from payment_instructions import __version__
from payment_instructions.api.dependencies import container
from payment_instructions.api.routers import payment_instructions_router
from payment_instructions.config import ServiceConfig


def create_app(config: ServiceConfig | None = None) -> FastAPI:
    """Build the API application.

    Args:
        config: Service configuration. Defaults apply when omitted.

    Returns:
        Configured FastAPI application
    """
    container.config = config or ServiceConfig()

    application = FastAPI(
        title="Payment Instructions API",
        description="Parse and settle free-text payment instructions",
        version=__version__,
    )
    application.include_router(payment_instructions_router)

    @application.get("/health")
    def health_check() -> dict[str, str | list[str]]:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "supported_currencies": sorted(container.config.supported_currencies),
        }

    @application.get("/")
    def root() -> dict[str, str]:
        """API root with basic info."""
        return {
            "name": "Payment Instructions API",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    return application


app = create_app()
