"""
Module-level entry points. Each call builds a fresh SyncHTTPClient, sends a
single request over a new connection and returns the parsed response.
"""

from typing import Optional, Union

from .base import SyncHTTPClient
from .config import ClientConfig
from .models import HTTPResponse
from .utils import Headers


def request(method: str, host: str, path: str,
            body: Optional[Union[str, bytes]] = None,
            headers: Optional[Headers] = None,
            config: Optional[ClientConfig] = None) -> HTTPResponse:
    """Send one request to host:80 (or config.port) and return the parsed response."""
    with SyncHTTPClient(config) as client:
        return client.request(method, host, path, body=body, headers=headers)


def get(host: str, path: str, headers: Optional[Headers] = None,
        config: Optional[ClientConfig] = None) -> HTTPResponse:
    return request('GET', host, path, headers=headers, config=config)


def post(host: str, path: str, body: Union[str, bytes],
         headers: Optional[Headers] = None,
         config: Optional[ClientConfig] = None) -> HTTPResponse:
    return request('POST', host, path, body=body, headers=headers, config=config)
