"""Configuration contract violations detected before a simulation starts."""

from typing import TYPE_CHECKING, Optional

from .recovery import UnrecoverableError

if TYPE_CHECKING:
    from ..config.validation import ValidationError


class ConfigurationError(UnrecoverableError):
    """Simulation parameters failed validation."""

    def __init__(self, message: str,
                 errors: Optional[list["ValidationError"]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = list(errors or [])

    @property
    def fields(self) -> list[str]:
        """Names of the offending configuration fields."""
        return [error.field for error in self.errors]
