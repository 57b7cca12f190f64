"""Errors and the response envelope of the spot API."""

from __future__ import annotations

import enum
import re
from typing import Any

_INTEGER = re.compile(r"[+-]?\d+")
_ERROR_KEYS = frozenset({"code", "msg", "_extend"})


class ErrorCode(enum.IntEnum):
    """Error codes returned by the spot API."""

    UNKNOWN_ORDER_SENT = -2011
    OPERATION_NOT_ALLOWED = 26
    API_KEY_REQUIRED = 400
    NO_AUTHORITY = 401
    ACCESS_DENIED = 403
    TOO_MANY_REQUESTS = 429
    INTERNAL_ERROR = 500
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504
    SIGNATURE_VERIFICATION_FAILED = 602
    USER_DOES_NOT_EXIST = 10001
    BAD_SYMBOL = 10007
    USER_ID_CANNOT_BE_NULL = 10015
    INVALID_ACCESS_KEY = 10072
    INVALID_REQUEST_TIME = 10073
    AMOUNT_CANNOT_BE_NULL = 10095
    AMOUNT_DECIMAL_PLACES_IS_TOO_LONG = 10096
    AMOUNT_IS_ERROR = 10097
    RISK_CONTROL_SYSTEM_DETECTED_ABNORMAL = 10098
    USER_SUB_ACCOUNT_DOES_NOT_OPEN = 10099
    THIS_CURRENCY_TRANSFER_IS_NOT_SUPPORTED = 10100
    INSUFFICIENT_BALANCE = 10101
    AMOUNT_CANNOT_BE_ZERO_OR_NEGATIVE = 10102
    THIS_ACCOUNT_TRANSFER_IS_NOT_SUPPORTED = 10103
    TRANSFER_OPERATION_PROCESSING = 10200
    TRANSFER_IN_FAILED = 10201
    TRANSFER_OUT_FAILED = 10202
    TRANSFER_IS_DISABLED = 10206
    TRANSFER_IS_FORBIDDEN = 10211
    WITHDRAWAL_ADDRESS_NOT_IN_COMMON_LIST_OR_INVALIDATED = 10212
    NO_ADDRESS_AVAILABLE = 10216
    ASSET_FLOW_WRITING_FAILED = 10219
    CURRENCY_CANNOT_BE_NULL = 10222
    CURRENCY_DOES_NOT_EXIST = 10232
    INTERMEDIATE_ACCOUNT_NOT_CONFIGURED = 10259
    WITHDRAWAL_UNAVAILABLE_DUE_TO_RISK_CONTROL = 10265
    REMARK_LENGTH_IS_TOO_LONG = 10268
    SUBSYSTEM_IS_NOT_SUPPORTED = 20001
    INTERNAL_SYSTEM_ERROR = 20002
    RECORD_DOES_NOT_EXIST = 22222
    SUSPENDED_TRANSACTION_FOR_THE_SYMBOL = 30000
    TRANSACTION_DIRECTION_NOT_ALLOWED = 30001
    MINIMUM_TRANSACTION_VOLUME_NOT_REACHED = 30002
    MAXIMUM_TRANSACTION_VOLUME_EXCEEDED = 30003
    INSUFFICIENT_POSITION = 30004
    OVERSOLD = 30005
    NO_VALID_TRADE_PRICE = 30010
    INVALID_SYMBOL = 30014
    TRADING_DISABLED = 30016
    MARKET_ORDER_IS_DISABLED = 30018
    API_MARKET_ORDER_IS_DISABLED = 30019
    NO_PERMISSION_FOR_THE_SYMBOL = 30020
    NO_EXIST_OPPONENT_ORDER = 30025
    INVALID_ORDER_IDS = 30026
    MAXIMUM_POSITION_LIMIT_REACHED_BUYING_SUSPENDED = 30027
    RISK_CONTROL_TRIGGERED_SELLING_SUSPENDED = 30028
    CANNOT_EXCEED_THE_MAXIMUM_ORDER_LIMIT = 30029
    CANNOT_EXCEED_THE_MAXIMUM_POSITION = 30032
    CURRENT_ORDER_TYPE_CAN_NOT_PLACE_ORDER = 30041
    PARAM_IS_ERROR = 33333
    PARAM_CANNOT_BE_NULL = 44444
    YOUR_ACCOUNT_IS_ABNORMAL = 60005
    PAIR_USER_BAN_TRADE_APIKEY = 70011
    API_KEY_FORMAT_INVALID = 700001
    SIGNATURE_FOR_THIS_REQUEST_IS_NOT_VALID = 700002
    TIMESTAMP_OUTSIDE_OF_RECV_WINDOW = 700003
    ORIG_CLIENT_ORDER_ID_OR_ORDER_ID_REQUIRED = 700004
    RECV_WINDOW_MUST_BE_LESS_THAN_60000 = 700005
    IP_NON_WHITE_LIST = 700006
    NO_PERMISSION_TO_ACCESS_THE_ENDPOINT = 700007
    ILLEGAL_CHARACTERS_FOUND_IN_PARAMETER = 700008
    REQUEST_FAILED_CONTACT_CUSTOMER_SERVICE = 730000
    PAIR_NOT_FOUND_OR_USER_INFORMATION_ERROR = 730001
    YOUR_INPUT_PARAM_IS_INVALID_OR_PARAMETER_ERROR = 730002
    UNSUPPORTED_OPERATION = 730003
    UNUSUAL_USER_STATUS = 730100
    USER_NAME_ALREADY_EXISTS = 730101
    SUB_ACCOUNT_NAME_CANNOT_BE_NULL = 730600
    SUB_ACCOUNT_NAME_FORMAT_INVALID = 730601
    SUB_ACCOUNT_REMARKS_CANNOT_BE_NULL = 730602
    API_KEY_REMARKS_CANNOT_BE_NULL = 730700
    API_KEY_PERMISSION_CANNOT_BE_NULL = 730701
    API_KEY_PERMISSION_DOES_NOT_EXIST = 730702
    IP_INFORMATION_INCORRECT = 730703
    BOUND_IP_FORMAT_INCORRECT = 730704
    AT_MOST_30_GROUPS_OF_API_KEYS = 730705
    API_KEY_INFORMATION_DOES_NOT_EXIST = 730706
    ACCESS_KEY_CANNOT_BE_NULL = 730707
    SUB_ACCOUNT_DOES_NOT_EXIST = 140001
    SUB_ACCOUNT_IS_FORBIDDEN = 140002
    ORDER_DOES_NOT_EXIST = -2013
    INVALID_RESPONSE = -1234568

    def __str__(self) -> str:
        return self.name


class ApiError(Exception):
    """Any failure while talking to the spot API."""


class _FixedMessageError(ApiError):
    default_message = ""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class MalformedRequestError(_FixedMessageError):
    """HTTP 400: the request was malformed."""

    default_message = "Malformed request"


class WebApplicationFirewallViolatedError(_FixedMessageError):
    """HTTP 403: the web application firewall limit was violated."""

    default_message = "Web application firewall (WAF) violated"


class RateLimitExceededError(_FixedMessageError):
    """HTTP 429: a request rate limit was broken."""

    default_message = "Rate limit exceeded"


class InternalServerError(_FixedMessageError):
    """HTTP 500: the execution status is unknown and may have succeeded."""

    default_message = "Internal server error"


class UnableToParseResponseError(_FixedMessageError):
    """The response did not have the expected shape."""

    default_message = "Unable to parse response"


class ErrorResponse(ApiError):
    """The API answered with an error code and message."""

    def __init__(self, code: ErrorCode, msg: str, extend: Any = None) -> None:
        super().__init__(code, msg)
        self.code = code
        self.msg = msg
        self.extend = extend

    def __str__(self) -> str:
        text = f"Error {self.code}: {self.msg}"
        if self.extend is not None:
            text += f" (extend: {self.extend!r})"
        return text


_STATUS_ERRORS: dict[int, type[_FixedMessageError]] = {
    400: MalformedRequestError,
    403: WebApplicationFirewallViolatedError,
    429: RateLimitExceededError,
    500: InternalServerError,
}


def error_for_status(status: int, message: str) -> ApiError:
    """Return the error that an HTTP failure status stands for."""
    error_type = _STATUS_ERRORS.get(status)
    if error_type is not None:
        return error_type()
    return ApiError(message)


def _is_error_shape(payload: Any) -> bool:
    return (
        isinstance(payload, dict)
        and "code" in payload
        and isinstance(payload.get("msg"), str)
        and set(payload) <= _ERROR_KEYS
    )


def parse_error_response(payload: Any) -> ErrorResponse | None:
    """Return the error a decoded response carries, or None if it is not an error."""
    if not _is_error_shape(payload):
        return None
    code = payload["code"]
    msg = payload["msg"]
    extend = payload.get("_extend")
    if isinstance(code, int) and not isinstance(code, bool):
        try:
            return ErrorResponse(ErrorCode(code), msg, extend)
        except ValueError:
            raise UnableToParseResponseError(f"unknown error code {code}: {msg}") from None
    if isinstance(code, str):
        if _INTEGER.fullmatch(code):
            try:
                return ErrorResponse(ErrorCode(int(code)), msg, extend)
            except ValueError:
                pass
        return ErrorResponse(
            ErrorCode.INVALID_RESPONSE, "Stringified error code cannot be parsed"
        )
    raise UnableToParseResponseError(f"error code of unexpected type: {code!r}")


def parse_api_response(payload: Any) -> Any:
    """Return a decoded response unchanged, raising ErrorResponse if it is an error."""
    error = parse_error_response(payload)
    if error is not None:
        raise error
    return payload