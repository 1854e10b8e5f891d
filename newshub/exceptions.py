from typing import Optional, Dict, Any


class NewsHubError(Exception):
    status_code = 500
    default_message = "An unexpected error occurred"

    def __init__(self, message: Optional[str] = None, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class ConfigError(NewsHubError):
    default_message = "Required configuration is missing"


class ExternalServiceError(NewsHubError):
    pass


class RateLimitError(ExternalServiceError):
    status_code = 429
    default_message = "Rate limits exceeded. Please try again later."


class PaymentRequiredError(ExternalServiceError):
    status_code = 402
    default_message = "Payment required. Please add credits to continue."


class UpstreamError(ExternalServiceError):
    default_message = "Upstream provider error"


class ParseFailure(NewsHubError):
    default_message = "Upstream response could not be parsed"
