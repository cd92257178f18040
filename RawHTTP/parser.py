"""
Response parsing.

The whole response is parsed in one linear pass: status line, raw header
lines up to the first blank line, then the body. Status codes of 400 and
above are raised as HTTPError with the parsed fields attached.
"""

import logging
import re
from typing import List

from .exceptions import HTTPError, InvalidResponseError
from .models import HTTPResponse

logger = logging.getLogger(__name__)

STATUS_CODE_PATTERN: re.Pattern = re.compile(r"\+?[0-9]+")
MAX_STATUS_CODE = 65535


def split_lines(raw: str) -> List[str]:
    """Split on LF, dropping one trailing CR per line. A final newline adds no empty line."""
    if not raw:
        return []
    lines = raw.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_status_code(status_line: str) -> int:
    tokens = status_line.split()
    if len(tokens) < 2 or not STATUS_CODE_PATTERN.fullmatch(tokens[1]):
        raise InvalidResponseError("Invalid status line")

    status_code = int(tokens[1])
    if status_code > MAX_STATUS_CODE:
        raise InvalidResponseError("Invalid status line")
    return status_code


def parse_response(raw: str) -> HTTPResponse:
    """Parse a complete raw response into an HTTPResponse."""
    lines = iter(split_lines(raw))

    status_line = next(lines, None)
    if status_line is None:
        raise InvalidResponseError("Empty response")

    status_code = parse_status_code(status_line)

    headers = []
    for line in lines:
        if not line:
            break
        headers.append(line)

    body = "\n".join(lines)
    logger.debug(f"Parsed response: {status_code} ({len(headers)} headers, {len(body)} chars)")

    # Check for HTTP errors
    if status_code >= 400:
        raise HTTPError(
            status_code,
            f"Server returned error: {status_line}",
            status_line=status_line,
            headers=headers,
            body=body
        )

    return HTTPResponse(
        status_line=status_line,
        status_code=status_code,
        headers=headers,
        body=body
    )
