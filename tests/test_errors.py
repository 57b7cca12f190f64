import pytest

from mexc_api.spot.errors import (
    ApiError,
    ErrorCode,
    ErrorResponse,
    InternalServerError,
    MalformedRequestError,
    RateLimitExceededError,
    UnableToParseResponseError,
    WebApplicationFirewallViolatedError,
    error_for_status,
    parse_api_response,
    parse_error_response,
)


def test_deserialize_error_parameter_error():
    payload = {"code": "730002", "msg": "Parameter error"}
    with pytest.raises(ErrorResponse) as info:
        parse_api_response(payload)
    assert info.value.code is ErrorCode.YOUR_INPUT_PARAM_IS_INVALID_OR_PARAMETER_ERROR
    assert info.value.msg == "Parameter error"


def test_integer_error_code():
    error = parse_error_response({"code": -2011, "msg": "Unknown order sent."})
    assert error.code is ErrorCode.UNKNOWN_ORDER_SENT
    assert error.extend is None


def test_extend_kept_and_shown():
    error = parse_error_response({"code": 10007, "msg": "bad symbol", "_extend": {"a": 1}})
    assert error.extend == {"a": 1}
    assert str(error) == "Error BAD_SYMBOL: bad symbol (extend: {'a': 1})"


def test_str_without_extend():
    error = parse_error_response({"code": "730002", "msg": "Parameter error"})
    assert str(error) == "Error YOUR_INPUT_PARAM_IS_INVALID_OR_PARAMETER_ERROR: Parameter error"


@pytest.mark.parametrize("code", ["abc", "99999999", ""])
def test_unparseable_stringified_code(code):
    error = parse_error_response({"code": code, "msg": "whatever"})
    assert error.code is ErrorCode.INVALID_RESPONSE
    assert error.msg == "Stringified error code cannot be parsed"


def test_unknown_integer_code_cannot_be_parsed():
    with pytest.raises(UnableToParseResponseError):
        parse_error_response({"code": 123456789, "msg": "whatever"})


def test_success_payload_passes_through():
    payload = {"serverTime": 1695571596791}
    assert parse_api_response(payload) is payload
    assert parse_error_response(payload) is None


def test_success_with_code_and_data_passes_through():
    payload = {"code": 0, "data": ["BTCUSDT"], "msg": None}
    assert parse_api_response(payload) == payload


def test_list_payload_passes_through():
    payload = [{"symbol": "KASUSDT"}]
    assert parse_api_response(payload) == payload


@pytest.mark.parametrize(
    ("status", "error_type"),
    [
        (400, MalformedRequestError),
        (403, WebApplicationFirewallViolatedError),
        (429, RateLimitExceededError),
        (500, InternalServerError),
    ],
)
def test_error_for_status(status, error_type):
    assert type(error_for_status(status, "ignored")) is error_type


def test_error_for_other_status_keeps_message():
    error = error_for_status(404, "not found")
    assert type(error) is ApiError
    assert str(error) == "not found"


def test_status_error_messages():
    assert str(error_for_status(429, "x")) == "Rate limit exceeded"
    assert str(error_for_status(400, "x")) == "Malformed request"


def test_error_code_display_is_name():
    assert str(ErrorCode.ORDER_DOES_NOT_EXIST) == "ORDER_DOES_NOT_EXIST"
    assert ErrorCode(-2013) is ErrorCode.ORDER_DOES_NOT_EXIST