"""Split a free-form request such as ``10 km to miles`` into its parts."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .numbers import parse_number

__all__ = [
    "MalformedNumberError",
    "ParsedRequest",
    "RequestParseError",
    "UnresolvedConnectorError",
    "is_exit_command",
    "parse_request",
    "tokenize",
]

_EXIT_TOKEN = "exit"
_DEGREE_WORDS = frozenset({"degree", "degrees"})


class RequestParseError(ValueError):
    """Raised when a request line cannot be split into value and unit names."""


class MalformedNumberError(RequestParseError):
    """The leading token is not a number."""


class UnresolvedConnectorError(RequestParseError):
    """No ``to``/``in`` boundary separates the two unit phrases."""


@dataclass(frozen=True)
class ParsedRequest:
    """Magnitude plus the raw source and destination unit names."""

    value: float
    source: str
    target: str


def tokenize(line: str) -> List[str]:
    return line.lower().split()


def is_exit_command(line: str) -> bool:
    tokens = tokenize(line)
    return bool(tokens) and tokens[0] == _EXIT_TOKEN


def _last_index(tokens: Sequence[str], word: str) -> int:
    for index in range(len(tokens) - 1, -1, -1):
        if tokens[index] == word:
            return index
    return -1


def _token_at(tokens: Sequence[str], index: int) -> str:
    if index < 0 or index >= len(tokens):
        raise RequestParseError(f"Request is missing a token at position {index}")
    return tokens[index]


def _unit_phrase(tokens: Sequence[str], index: int) -> str:
    word = _token_at(tokens, index)
    if word in _DEGREE_WORDS:
        return f"{word} {_token_at(tokens, index + 1)}"
    return word


def _connector_index(tokens: Sequence[str]) -> int:
    # Order matters: "into" before an exact "to", then "in" only when no "to" exists.
    if len(tokens) >= 2 and "to" in tokens[-2]:
        return len(tokens) - 2
    last_to = _last_index(tokens, "to")
    if last_to == -1:
        return _last_index(tokens, "in")
    return last_to


def parse_request(line: str) -> ParsedRequest:
    """Parse ``line`` into a :class:`ParsedRequest`.

    The destination phrase follows the connector token, located by checking in
    order: a second-to-last token containing ``"to"`` (``into``), the last
    ``"in"`` when no standalone ``"to"`` exists, and finally the last ``"to"``.
    ``degree``/``degrees`` joins the following word into a single unit name.
    """

    tokens = tokenize(line)
    if not tokens:
        raise MalformedNumberError("Empty request")
    try:
        value = parse_number(tokens[0])
    except ValueError as exc:
        raise MalformedNumberError(str(exc)) from exc

    source = _unit_phrase(tokens, 1)

    connector = _connector_index(tokens)
    if connector == -1:
        raise UnresolvedConnectorError(f"No connector found in {line.strip()!r}")
    target = _unit_phrase(tokens, connector + 1)

    return ParsedRequest(value=value, source=source, target=target)
