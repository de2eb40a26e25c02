"""Parser primitives for conversion requests."""

from .numbers import parse_number
from .request import (
    MalformedNumberError,
    ParsedRequest,
    RequestParseError,
    UnresolvedConnectorError,
    is_exit_command,
    parse_request,
    tokenize,
)

__all__ = [
    "MalformedNumberError",
    "ParsedRequest",
    "RequestParseError",
    "UnresolvedConnectorError",
    "is_exit_command",
    "parse_number",
    "parse_request",
    "tokenize",
]
