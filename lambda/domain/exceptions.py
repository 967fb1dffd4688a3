"""
Domain Exceptions - Business Rule Violations
Clean Architecture: Domain layer exceptions
"""


class DomainException(Exception):
    """Base exception for all domain-level errors"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidInputException(DomainException):
    """Raised when a request parameter is empty or out of range"""
    pass


class WeatherDataNotFoundException(DomainException):
    """Raised when weather data is not available"""
    pass


class TransportFailureException(DomainException):
    """Raised when a storage or weather source call fails unexpectedly"""
    def __init__(self, message: str, details: dict = None, original: Exception = None):
        super().__init__(message, details)
        self.original = original


class OperationCancelledException(DomainException):
    """Raised when an operation is aborted through its cancellation token"""
    pass
