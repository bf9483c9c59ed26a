"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class AuthServiceError(DomainException):
    """Auth service returned an error or is unavailable"""

    pass


class InvalidSessionError(DomainException):
    """Access token is missing, expired or rejected by the auth service"""

    pass


class InvalidPreferenceError(DomainException):
    """Stored cost-split percentages do not add up"""

    pass
