"""Read-eval-print loop turning request lines into conversion sentences."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, TextIO

from ..config import DEFAULT_PROMPT
from ..utils.logging import SessionLog
from .engine import convert, is_convertible
from .parsers.request import RequestParseError, is_exit_command, parse_request
from .units import UnitDefinition, lookup_unit, pluralize

__all__ = [
    "ConversionResult",
    "Outcome",
    "OutcomeKind",
    "PARSE_ERROR_MESSAGE",
    "SessionState",
    "evaluate",
    "log_outcome",
    "process_line",
    "run_session",
]

PARSE_ERROR_MESSAGE = "Parse error"


class SessionState(Enum):
    READING = "reading"
    TERMINATED = "terminated"


class OutcomeKind(str, Enum):
    CONVERTED = "converted"
    IMPOSSIBLE = "impossible"
    NEGATIVE = "negative"
    PARSE_ERROR = "parse_error"


@dataclass(frozen=True)
class ConversionResult:
    """Computed value together with the units used to render it."""

    value: float
    source: UnitDefinition
    target: UnitDefinition
    result: float

    def describe(self) -> str:
        return (
            f"{self.value} {pluralize(self.source, self.value)} is "
            f"{self.result} {pluralize(self.target, self.result)}"
        )

    def as_dict(self) -> Dict[str, object]:
        return {
            "value": self.value,
            "source": self.source.id,
            "target": self.target.id,
            "result": self.result,
            "category": str(self.source.category),
        }


@dataclass(frozen=True)
class Outcome:
    """What happened to a single request line."""

    kind: OutcomeKind
    message: str
    conversion: Optional[ConversionResult] = None

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.CONVERTED


def evaluate(line: str) -> Outcome:
    """Run the parse, lookup, validate and convert steps for ``line``."""

    try:
        request = parse_request(line)
    except RequestParseError:
        return Outcome(OutcomeKind.PARSE_ERROR, PARSE_ERROR_MESSAGE)

    source = lookup_unit(request.source)
    target = lookup_unit(request.target)

    if not is_convertible(source, target):
        return Outcome(
            OutcomeKind.IMPOSSIBLE,
            f"Conversion from {source.plural} to {target.plural} is impossible",
        )

    if request.value < 0.0 and source.category.is_linear:
        return Outcome(OutcomeKind.NEGATIVE, f"{source.category} shouldn't be negative.")

    conversion = ConversionResult(
        value=request.value,
        source=source,
        target=target,
        result=convert(request.value, source, target),
    )
    return Outcome(OutcomeKind.CONVERTED, conversion.describe(), conversion)


def process_line(line: str) -> str:
    return evaluate(line).message


def log_outcome(events: SessionLog, line: str, outcome: Outcome) -> None:
    """Record ``outcome`` as a ``request.<kind>`` event."""

    fields: Dict[str, object] = {"input": line.strip()}
    if outcome.conversion is not None:
        fields.update(outcome.conversion.as_dict())
    level = logging.WARNING if outcome.kind is OutcomeKind.PARSE_ERROR else logging.INFO
    events.request(outcome.kind.value, level=level, **fields)


def run_session(
    stream: TextIO,
    write: Callable[[str], None],
    *,
    prompt: str = DEFAULT_PROMPT,
    logger: Optional[logging.Logger] = None,
) -> int:
    """Prompt, read and answer lines from ``stream`` until exit or end of input.

    ``write`` receives raw text and is responsible for emitting it without
    adding newlines. Returns the number of requests answered.
    """

    events = SessionLog(logger)
    events.started()
    state = SessionState.READING
    processed = 0

    while state is SessionState.READING:
        write(prompt)
        line = stream.readline()
        if not line or is_exit_command(line):
            state = SessionState.TERMINATED
            continue

        outcome = evaluate(line)
        write(outcome.message + "\n")
        log_outcome(events, line, outcome)
        processed += 1

    events.finished(processed=processed)
    return processed
