"""
Domain error hierarchy shared by all bounded contexts.

Services raise these and never transport-level errors; an outer layer
translates ``code`` into whatever its protocol needs.
"""
from typing import Any, Dict, List, Optional


class DomainError(Exception):
    """Base class for domain-level errors."""
    code: str = "domain_error"
    message: str
    details: Optional[Dict[str, Any]]

    def __init__(
        self,
        message: str = "",
        *,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message or self.__class__.__name__)
        if code is not None:
            self.code = code
        self.message = message or self.__class__.__name__
        self.details = details


class ValidationError(DomainError):
    """
    Raised by a validator before any mutation happens.

    Carries the offending input model so the caller can re-render it next to
    the field errors.
    """
    code = "validation_error"

    def __init__(self, model: Any, errors: Dict[str, List[str]]) -> None:
        self.model = model
        self.errors = errors
        fields = ", ".join(sorted(errors))
        super().__init__(f"Validation failed for: {fields}", details={"errors": errors})


class NotFoundError(DomainError):
    # generic; subclasses set a specific code (e.g., "user_not_found")
    code = "not_found"
