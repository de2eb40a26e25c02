import pytest

from uniconv.conversion.parsers.request import (
    MalformedNumberError,
    ParsedRequest,
    RequestParseError,
    UnresolvedConnectorError,
    is_exit_command,
    parse_request,
)


@pytest.mark.parametrize(
    "line, expected",
    [
        ("10 km to miles", ParsedRequest(10.0, "km", "miles")),
        ("10 KM TO Miles", ParsedRequest(10.0, "km", "miles")),
        ("  2.5   kg   to   lb  ", ParsedRequest(2.5, "kg", "lb")),
        ("10 miles into km", ParsedRequest(10.0, "miles", "km")),
        ("10 C in F", ParsedRequest(10.0, "c", "f")),
        ("10 in in cm", ParsedRequest(10.0, "in", "cm")),
        ("10 in to cm", ParsedRequest(10.0, "in", "cm")),
        ("10 degrees celsius to degrees fahrenheit", ParsedRequest(10.0, "degrees celsius", "degrees fahrenheit")),
        ("0 degrees celsius in degrees fahrenheit", ParsedRequest(0.0, "degrees celsius", "degrees fahrenheit")),
        ("1 degree Celsius to k", ParsedRequest(1.0, "degree celsius", "k")),
        ("-5 kg to g", ParsedRequest(-5.0, "kg", "g")),
        ("3 feet convert to inches", ParsedRequest(3.0, "feet", "inches")),
    ],
)
def test_parse_request(line: str, expected: ParsedRequest) -> None:
    assert parse_request(line) == expected


def test_second_to_last_token_containing_to_wins() -> None:
    # "tons" contains "to", so it is taken as the connector before any exact "to".
    request = parse_request("5 tons kg")
    assert request == ParsedRequest(5.0, "tons", "kg")


def test_in_is_ignored_when_to_is_present() -> None:
    request = parse_request("10 in to in cm")
    assert request.target == "in"


@pytest.mark.parametrize("line", ["abc km to m", "", "   ", "ten km to m", "exit now"])
def test_malformed_number(line: str) -> None:
    with pytest.raises(MalformedNumberError):
        parse_request(line)


@pytest.mark.parametrize("line", ["10 km miles", "10 km", "1 c f"])
def test_unresolved_connector(line: str) -> None:
    with pytest.raises(UnresolvedConnectorError):
        parse_request(line)


@pytest.mark.parametrize("line", ["10", "10 degrees", "10 km to", "10 c to degrees"])
def test_incomplete_request(line: str) -> None:
    with pytest.raises(RequestParseError):
        parse_request(line)


def test_parse_errors_are_value_errors() -> None:
    assert issubclass(MalformedNumberError, ValueError)
    assert issubclass(UnresolvedConnectorError, RequestParseError)


@pytest.mark.parametrize(
    "line, expected",
    [
        ("exit", True),
        ("EXIT\n", True),
        ("  Exit please", True),
        ("exiting", False),
        ("10 km to exit", False),
        ("", False),
    ],
)
def test_is_exit_command(line: str, expected: bool) -> None:
    assert is_exit_command(line) is expected
