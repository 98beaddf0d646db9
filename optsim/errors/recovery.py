"""
Recovery classification for error handling.

The simulator has no retry concept, so only the unrecoverable category
survives: anything raised here needs a corrected input, not another attempt.
"""


class UnrecoverableError(Exception):
    """Mixin for errors that require human intervention."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message)
        self.recoverable = False
