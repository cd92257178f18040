import logging

from typing import Optional

from .models import HTTPRequest, HTTPResponse

# Middleware System
class BaseMiddleware:
    """Base class for HTTP middleware."""

    def process_request(self, request: HTTPRequest) -> HTTPRequest:
        """Process the request before it's sent."""
        return request

    def process_response(self, response: HTTPResponse) -> HTTPResponse:
        """Process the response after it's parsed."""
        return response

    def process_error(self, error: Exception, request: HTTPRequest) -> Exception:
        """Process an error that occurred during the request."""
        return error

class LoggingMiddleware(BaseMiddleware):
    """Middleware for logging requests and responses."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def process_request(self, request: HTTPRequest) -> HTTPRequest:
        self.logger.debug(f"Request: {request.method} {request.host}:{request.port}{request.path}")
        return request

    def process_response(self, response: HTTPResponse) -> HTTPResponse:
        self.logger.debug(f"Response: {response.status_line}")
        return response

    def process_error(self, error: Exception, request: HTTPRequest) -> Exception:
        self.logger.error(f"Request failed: {request.method} {request.host}{request.path} - {error}")
        return error

class UserAgentMiddleware(BaseMiddleware):
    """Middleware for adding User-Agent header."""

    def __init__(self, user_agent: str):
        self.user_agent = user_agent

    def process_request(self, request: HTTPRequest) -> HTTPRequest:
        if not request.has_header('User-Agent'):
            request.add_header('User-Agent', self.user_agent)
        return request
