from .http_response import api_response, error_response

__all__ = ["api_response", "error_response"]
