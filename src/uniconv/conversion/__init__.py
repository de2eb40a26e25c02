"""Conversion pipeline: unit catalog, engine, request parser and session loop."""

from .engine import convert, is_convertible
from .parsers import (
    MalformedNumberError,
    ParsedRequest,
    RequestParseError,
    UnresolvedConnectorError,
    parse_request,
)
from .session import ConversionResult, Outcome, OutcomeKind, evaluate, process_line, run_session
from .units import UNITS, UNRECOGNIZED, UnitCategory, UnitDefinition, lookup_unit, pluralize

__all__ = [
    "ConversionResult",
    "MalformedNumberError",
    "Outcome",
    "OutcomeKind",
    "ParsedRequest",
    "RequestParseError",
    "UNITS",
    "UNRECOGNIZED",
    "UnitCategory",
    "UnitDefinition",
    "UnresolvedConnectorError",
    "convert",
    "evaluate",
    "is_convertible",
    "lookup_unit",
    "parse_request",
    "pluralize",
    "process_line",
    "run_session",
]
