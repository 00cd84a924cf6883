"""FastAPI dependencies for service injection.

This module provides dependency injection for API services,
enabling clean separation between HTTP routing and business logic.
"""

from __future__ import annotations

from payment_instructions.api.services import InstructionService
from payment_instructions.config import ServiceConfig


class ServiceContainer:
    """Container for all API services.

    This provides a central location for service instances,
    enabling dependency injection and testability.
    """

    def __init__(self) -> None:
        """Initialize the service container with default configuration."""
        self._config = ServiceConfig()
        self._instruction_service: InstructionService | None = None

    @property
    def config(self) -> ServiceConfig:
        """Get the active service configuration."""
        return self._config

    @config.setter
    def config(self, value: ServiceConfig) -> None:
        """Set the configuration and drop services built from the old one."""
        self._config = value
        self._instruction_service = None

    @property
    def instruction_service(self) -> InstructionService:
        """Get the instruction service, creating if needed."""
        if self._instruction_service is None:
            self._instruction_service = InstructionService(
                supported_currencies=self._config.supported_currencies
            )
        return self._instruction_service

    def clear_all(self) -> None:
        """Reset to the default configuration (used for testing cleanup)."""
        self.config = ServiceConfig()


# Global service container instance
container = ServiceContainer()


def get_instruction_service() -> InstructionService:
    """Dependency that provides the InstructionService.

    Usage in endpoints:
        @router.post("/payment-instructions")
        def handle(service: InstructionService = Depends(get_instruction_service)):
            ...
    """
    return container.instruction_service
