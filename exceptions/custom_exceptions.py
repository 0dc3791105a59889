from http import HTTPStatus


class AdWordsException(Exception):
    """Base class for all AdWords client exceptions."""
    def __init__(
        self,
        message: str,
        status_code: int = HTTPStatus.BAD_REQUEST,
        details: dict = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

class AdWordsApiException(AdWordsException):
    """SOAP fault returned by the AdWords API."""
    def __init__(
        self,
        message: str = "AdWords API request failed",
        errors: list = None,
        status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR,
        details: dict = None,
    ):
        super().__init__(message, status_code, details)
        self.errors = errors or []

class AdWordsAuthException(AdWordsException):
    """Missing credentials or rejected access token."""
    def __init__(self, message: str = "AdWords authentication failed", details: dict = None):
        super().__init__(message, HTTPStatus.UNAUTHORIZED, details)

class AdWordsValidationException(AdWordsException):
    """Request rejected locally before it was sent."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, HTTPStatus.UNPROCESSABLE_ENTITY, details)

class AdWordsDecodeException(AdWordsException):
    """Response XML is malformed or carries an unknown type."""
    def __init__(self, message: str = "Failed to decode AdWords response", details: dict = None):
        super().__init__(message, HTTPStatus.BAD_GATEWAY, details)

class AdWordsPartialFailureException(AdWordsException):
    """Mutate succeeded for some operations and failed for others."""
    def __init__(self, errors: list, results: list = None):
        super().__init__(
            f"Partial failure: {len(errors)} operation error(s)",
            HTTPStatus.MULTI_STATUS,
            {"error_count": len(errors)},
        )
        self.errors = errors
        self.results = results or []
