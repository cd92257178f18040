import socket
import logging
from typing import List, Optional, Union

from .config import ClientConfig
from .exceptions import *
from .middlewares import *  # this also imports models
from .parser import parse_response
from .utils import Headers

logger = logging.getLogger(__name__)


# Transport
class Transport:
    """
    Blocking one-shot transport: connect, write the whole request, read until
    the peer closes, close. Every socket failure surfaces as NetworkError.
    """

    def __init__(self, recv_buffer_size: int = 4096):
        self.recv_buffer_size = recv_buffer_size

    def _connect(self, request: HTTPRequest) -> socket.socket:
        try:
            sock = socket.create_connection(request.address)
        except OSError as e:
            raise NetworkError(f"Failed to connect to {request.host}: {e}") from e

        try:
            sock.settimeout(request.timeout)
        except (OSError, ValueError) as e:
            sock.close()
            raise NetworkError(f"Failed to set timeout: {e}") from e
        return sock

    def _receive(self, sock: socket.socket, timeout: float) -> bytes:
        chunks = []
        while True:
            try:
                chunk = sock.recv(self.recv_buffer_size)
            except socket.timeout as e:
                raise RequestTimeoutError(f"Failed to read response: timed out after {timeout} seconds") from e
            except OSError as e:
                raise NetworkError(f"Failed to read response: {e}") from e
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks)

    def send(self, request: HTTPRequest) -> str:
        """Send the request and return the full response text."""
        payload = request.serialize()

        sock = self._connect(request)
        with sock:
            logger.debug(f"Connected to {request.host}:{request.port}, sending {len(payload)} bytes")
            try:
                sock.sendall(payload)
            except OSError as e:
                raise NetworkError(f"Failed to send request: {e}") from e

            raw = self._receive(sock, request.timeout)

        logger.debug(f"Received {len(raw)} bytes from {request.host}:{request.port}")
        try:
            return raw.decode('utf-8')
        except UnicodeDecodeError as e:
            raise NetworkError(f"Failed to read response: {e}") from e

# Synchronous Client
class SyncHTTPClient:
    """Synchronous one-shot HTTP client with middleware. One attempt per call, no retries."""

    def __init__(self, config: Optional[ClientConfig] = None,
                 middleware: Optional[List[BaseMiddleware]] = None,
                 transport: Optional[Transport] = None):
        self.config = config or ClientConfig()
        if middleware is None:
            middleware = [LoggingMiddleware()]
            if self.config.user_agent:
                middleware.insert(0, UserAgentMiddleware(self.config.user_agent))
        self.middleware = middleware
        self._transport = transport or Transport(self.config.recv_buffer_size)
        self._closed = False

    def build_request(self, method: str, host: str, path: str,
                      body: Optional[Union[str, bytes]] = None,
                      headers: Optional[Headers] = None) -> HTTPRequest:
        return HTTPRequest(
            method=method,
            host=host,
            path=path,
            body=body,
            headers=headers or [],
            port=self.config.port,
            timeout=self.config.timeout,
            content_type=self.config.content_type
        )

    def request(self, method: str, host: str, path: str,
                body: Optional[Union[str, bytes]] = None,
                headers: Optional[Headers] = None) -> HTTPResponse:
        """Send one request and return the parsed response."""
        if self._closed:
            raise RuntimeError("Client is closed")

        request = self.build_request(method, host, path, body, headers)

        # Process request through middleware
        for middleware in self.middleware:
            request = middleware.process_request(request)

        try:
            response = parse_response(self._transport.send(request))
        except HTTPClientError as error:
            # Process error through middleware
            for middleware in self.middleware:
                error = middleware.process_error(error, request)
            raise error

        # Process response through middleware
        for middleware in reversed(self.middleware):
            response = middleware.process_response(response)

        return response

    def get(self, host: str, path: str, headers: Optional[Headers] = None) -> HTTPResponse:
        """Send a GET request."""
        return self.request('GET', host, path, headers=headers)

    def post(self, host: str, path: str, body: Union[str, bytes],
             headers: Optional[Headers] = None) -> HTTPResponse:
        """Send a POST request with a body."""
        return self.request('POST', host, path, body=body, headers=headers)

    def close(self):
        """Close the client. Connections are per call, so nothing else is held."""
        self._closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
