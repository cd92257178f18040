""" Client configuration """

from dataclasses import dataclass
from typing import Optional

DEFAULT_PORT = 80
DEFAULT_TIMEOUT = 10.0
DEFAULT_CONTENT_TYPE = "application/json"
RECV_BUFFER_SIZE = 4096


@dataclass
class ClientConfig:
    """Settings shared by every request a client sends."""
    port: int = DEFAULT_PORT
    timeout: float = DEFAULT_TIMEOUT
    content_type: str = DEFAULT_CONTENT_TYPE
    recv_buffer_size: int = RECV_BUFFER_SIZE
    user_agent: Optional[str] = None

    def __post_init__(self):
        """Reject values the transport cannot work with."""
        if not 0 < self.port < 65536:
            raise ValueError(f"Port must be between 1 and 65535, got {self.port}")
        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout}")
        if self.recv_buffer_size <= 0:
            raise ValueError(f"Receive buffer size must be positive, got {self.recv_buffer_size}")
        if not self.content_type:
            raise ValueError("Content type cannot be empty")
