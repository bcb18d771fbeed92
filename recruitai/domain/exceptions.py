"""
Domain-level exceptions for the hexagonal architecture.

These exceptions represent business rule violations and domain logic errors.
They should be mapped to appropriate HTTP responses in the API layer.
"""

from typing import List, Optional


class DomainException(Exception):
    """Base exception for all domain-level errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation rules are violated."""
    pass


class MatchingConfigValidationError(ValidationError):
    """Raised when a matching configuration fails validation before save."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("Invalid matching configuration: " + "; ".join(self.errors))


class NotFoundError(DomainException):
    """Base exception for entities not found."""
    pass


class JobNotFoundError(NotFoundError):
    """Raised when a job is not found within the caller's tenant."""
    pass


class ResumeNotFoundError(NotFoundError):
    """Raised when a resume is not found within the caller's tenant."""
    pass


class MatchNotFoundError(NotFoundError):
    """Raised when a job match is not found."""
    pass


class InterviewNotFoundError(NotFoundError):
    """Raised when an interview is not found by id or access token."""
    pass


class QuestionNotFoundError(NotFoundError):
    """Raised when an answer references a question not in the interview."""
    pass


class TemplateNotFoundError(NotFoundError):
    """Raised when an interview template is missing or inactive."""
    pass


class InterviewExpiredError(DomainException):
    """Raised when an interview link is used after its expiry."""

    def __init__(self, message: str = "Interview has expired", expired_at: Optional[object] = None):
        self.expired_at = expired_at
        super().__init__(message)


class InterviewStateError(DomainException):
    """Raised when an interview transition is not allowed from its current status."""

    def __init__(self, current_status: str, action: str):
        self.current_status = current_status
        self.action = action
        super().__init__(f"Cannot {action} interview in status '{current_status}'")


class AuthorizationError(DomainException):
    """Base exception for authorization errors."""
    pass


class InsufficientPermissionsError(AuthorizationError):
    """Raised when user lacks required permissions."""
    pass


class ProcessingError(DomainException):
    """Base exception for processing errors."""
    pass


class AIAnalysisError(ProcessingError):
    """Raised when an AI analyzer fails or returns an unusable response."""
    pass


class ConfigurationError(DomainException):
    """Raised when configuration is invalid or missing."""
    pass


__all__ = [
    "DomainException",
    "ValidationError",
    "MatchingConfigValidationError",
    "NotFoundError",
    "JobNotFoundError",
    "ResumeNotFoundError",
    "MatchNotFoundError",
    "InterviewNotFoundError",
    "QuestionNotFoundError",
    "TemplateNotFoundError",
    "InterviewExpiredError",
    "InterviewStateError",
    "AuthorizationError",
    "InsufficientPermissionsError",
    "ProcessingError",
    "AIAnalysisError",
    "ConfigurationError",
]
