"""RawHTTP - A minimal single-shot HTTP/1.1 client over raw sockets."""

# Import key classes for easier access
from .top import request, get, post
from .base import SyncHTTPClient, Transport
from .config import ClientConfig
from .models import HTTPRequest, HTTPResponse
from .parser import parse_response
from .middlewares import BaseMiddleware, LoggingMiddleware, UserAgentMiddleware
from .exceptions import (
    HTTPClientError,
    NetworkError,
    RequestTimeoutError,
    InvalidResponseError,
    HTTPError
)

__version__ = "0.1.0"
