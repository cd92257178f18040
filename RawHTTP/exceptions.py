from typing import List, Optional

# Exceptions
class HTTPClientError(Exception):
    """Base exception for every failure raised by the client."""
    prefix = "Request failed"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"

class NetworkError(HTTPClientError):
    """Raised when connecting, sending or reading fails."""
    prefix = "Network error"

class RequestTimeoutError(NetworkError):
    """Raised when the peer does not answer within the read timeout."""
    pass

class InvalidResponseError(HTTPClientError):
    """Raised when the response text has no usable status line."""
    prefix = "Invalid response"

class HTTPError(HTTPClientError):
    """Raised when the server answers with a status code of 400 or above."""
    def __init__(self, status_code: int, message: str, status_line: str = "",
                 headers: Optional[List[str]] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.status_line = status_line
        self.headers = headers or []
        self.body = body

    def __str__(self) -> str:
        return f"HTTP {self.status_code} error: {self.message}"
