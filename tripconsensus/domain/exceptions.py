"""Domain semantic exceptions."""


class DomainError(Exception):
    """Base domain exception."""


class InvalidSurveyInput(DomainError, TypeError):
    """Raised when the caller hands over something that is not a sequence of survey responses."""
