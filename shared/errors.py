"""
Shared error handling for the CFTools client.
"""

from typing import Dict, Any, Optional


class CFToolsException(Exception):
    """Base exception for the CFTools client."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary, e.g. for structured logs."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class MalformedRequestError(CFToolsException):
    """Request cannot be normalized into a cache key or upstream call."""

    def __init__(self, message: str = "Malformed request", details: Optional[Dict[str, Any]] = None):
        super().__init__("MALFORMED_REQUEST", message, details)


class ConfigurationError(CFToolsException):
    """Invalid client or cache configuration."""

    def __init__(self, message: str = "Invalid configuration", details: Optional[Dict[str, Any]] = None):
        super().__init__("CONFIGURATION_ERROR", message, details)


class AuthenticationRequired(CFToolsException):
    """Operation needs credentials but the client was built without them."""

    def __init__(self, message: str = "Credentials are required for this operation", details: Optional[Dict[str, Any]] = None):
        super().__init__("AUTHENTICATION_REQUIRED", message, details)


class ServerApiIdRequired(CFToolsException):
    """Operation needs a server context but none was given."""

    def __init__(self, message: str = "A server API id is required for this operation", details: Optional[Dict[str, Any]] = None):
        super().__init__("SERVER_API_ID_REQUIRED", message, details)


class AuthenticationError(CFToolsException):
    """Authentication-related errors."""

    def __init__(self, message: str = "Authentication failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("AUTHENTICATION_ERROR", message, details)


class ResourceNotFound(CFToolsException):
    """Requested resource does not exist upstream."""

    def __init__(self, message: str = "Resource not found", details: Optional[Dict[str, Any]] = None):
        super().__init__("RESOURCE_NOT_FOUND", message, details)


class DuplicateResourceCreation(CFToolsException):
    """Resource already exists upstream."""

    def __init__(self, message: str = "Resource already exists", details: Optional[Dict[str, Any]] = None):
        super().__init__("DUPLICATE_RESOURCE", message, details)


class RateLimitError(CFToolsException):
    """Rate limiting errors."""

    def __init__(self, message: str = "Rate limit exceeded", details: Optional[Dict[str, Any]] = None):
        super().__init__("RATE_LIMIT_ERROR", message, details)


class ExternalServiceError(CFToolsException):
    """External service errors."""

    def __init__(self, service: str, message: str = "External service error", details: Optional[Dict[str, Any]] = None):
        super().__init__("EXTERNAL_SERVICE_ERROR", f"{service}: {message}", details)
