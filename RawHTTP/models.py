import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from .config import DEFAULT_CONTENT_TYPE, DEFAULT_PORT, DEFAULT_TIMEOUT
from .utils import Headers, normalize_headers, split_header_line

HTTP_VERSION = "HTTP/1.1"
CRLF = "\r\n"

# Request/Response Models
@dataclass
class HTTPRequest:
    """Represents a single HTTP/1.1 request sent over a fresh connection."""
    method: str
    host: str
    path: str
    body: Optional[Union[str, bytes]] = None
    headers: Headers = field(default_factory=list)
    port: int = DEFAULT_PORT
    timeout: float = DEFAULT_TIMEOUT
    content_type: str = DEFAULT_CONTENT_TYPE

    def __post_init__(self):
        self.headers = normalize_headers(self.headers)

    @property
    def address(self) -> Tuple[str, int]:
        return self.host, self.port

    @property
    def body_bytes(self) -> Optional[bytes]:
        if self.body is None or isinstance(self.body, bytes):
            return self.body
        return self.body.encode('utf-8')

    def has_header(self, name: str) -> bool:
        name = name.lower()
        return any(key.lower() == name for key, _ in self.headers)

    def add_header(self, name: str, value: str) -> None:
        self.headers.append((name, value))

    def serialize(self) -> bytes:
        """Build the wire form: request line, Host, body headers, caller headers, Connection: close."""
        body = self.body_bytes

        lines = [f"{self.method} {self.path} {HTTP_VERSION}", f"Host: {self.host}"]
        if body is not None:
            lines.append(f"Content-Length: {len(body)}")
            lines.append(f"Content-Type: {self.content_type}")
        lines.extend(f"{name}: {value}" for name, value in self.headers)
        lines.append("Connection: close")

        head = (CRLF.join(lines) + CRLF + CRLF).encode('utf-8')
        return head + body if body is not None else head

@dataclass(frozen=True)
class HTTPResponse:
    """Represents a parsed HTTP response. Header lines are kept unsplit."""
    status_line: str
    status_code: int
    headers: List[str]
    body: str

    @property
    def reason(self) -> str:
        parts = self.status_line.split(None, 2)
        return parts[2] if len(parts) > 2 else ""

    def get_header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value of the first header line called `name`, ignoring case."""
        name = name.lower()
        for line in self.headers:
            key, value = split_header_line(line)
            if key.lower() == name:
                return value
        return default

    def header_dict(self) -> Dict[str, str]:
        """Header lines as a dict; later duplicates overwrite earlier ones."""
        return dict(split_header_line(line) for line in self.headers)

    def json(self) -> Any:
        return json.loads(self.body)
