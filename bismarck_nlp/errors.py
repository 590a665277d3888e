from typing import Any, Optional


class NLPError(Exception):
    """Base error of the annotation pipeline.

    ``stage`` and ``error_code`` are available to callers that want to tag a
    failure with its origin; the built-in stages leave them unset.
    """

    def __init__(
        self,
        message: str,
        stage: Optional[str] = None,
        error_code: Optional[str] = None,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.stage = stage
        self.error_code = error_code
        self.details = details


class ProcessingError(NLPError):
    """Raised when any stage fails during ``process``."""
