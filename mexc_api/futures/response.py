"""Futures API response envelope and error codes."""

from __future__ import annotations

import enum
from typing import Any


class ErrorCode(enum.IntEnum):
    """Error codes returned by the futures API."""

    OPERATION_SUCCEED = 0
    PUBLIC_ABNORMAL = 9999
    INTERNAL_ERROR = 500
    SYSTEM_BUSY = 501
    UNAUTHORIZED = 401
    API_KEY_EXPIRED = 402
    NOT_FOUND = 404
    ACCESSED_IP_NOT_IN_WHITELIST = 406
    UNKNOWN_SOURCE_OF_REQUEST = 506
    EXCESSIVE_FREQUENCY_OF_REQUESTS = 510
    ENDPOINT_INACCESSIBLE = 511
    INVALID_REQUEST = 513
    PARAMETER_ERROR = 600
    DATA_DECODING_ERROR = 601
    VERIFY_FAILED = 602
    REPEATED_REQUESTS = 603
    ACCOUNT_READ_PERMISSION_REQUIRED = 701
    ACCOUNT_MODIFY_PERMISSION_REQUIRED = 702
    TRADE_INFORMATION_READ_PERMISSION_REQUIRED = 703
    TRANSACTION_INFORMATION_MODIFY_PERMISSION_REQUIRED = 704
    ACCOUNT_DOES_NOT_EXIST = 1000
    CONTRACT_DOES_NOT_EXIST = 1001
    CONTRACT_NOT_ACTIVATED = 1002
    ERROR_IN_RISK_LIMIT_LEVEL = 1003
    AMOUNT_ERROR = 1004
    WRONG_ORDER_DIRECTION = 2001
    WRONG_OPENING_TYPE = 2002
    OVERPRICED_TO_PAY = 2003
    LOW_PRICE_FOR_SELLING = 2004
    BALANCE_INSUFFICIENT = 2005
    LEVERAGE_RATIO_ERROR = 2006
    ORDER_PRICE_ERROR = 2007
    QUANTITY_INSUFFICIENT = 2008
    POSITIONS_DO_NOT_EXIST_OR_HAVE_BEEN_CLOSED = 2009
    UNKNOWN_ORDER_SENT = 2011
    ORDER_QUANTITY_ERROR = 2012
    CANCEL_ORDERS_OVER_MAXIMUM_LIMIT = 2013
    QUANTITY_OF_BATCH_ORDER_EXCEEDS_LIMIT = 2014
    PRICE_OR_QUANTITY_ACCURACY_ERROR = 2015
    TRIGGER_VOLUME_OVER_MAXIMUM = 2016
    EXCEEDING_MAXIMUM_AVAILABLE_MARGIN = 2018
    THERE_IS_ACTIVE_OPEN_POSITION = 2019
    SINGLE_LEVERAGE_NOT_CONSISTENT_WITH_POSITION_LEVERAGE = 2021
    WRONG_POSITION_TYPE = 2022
    POSITIONS_OVER_MAXIMUM_LEVERAGE = 2023
    ORDERS_WITH_LEVERAGE_OVER_MAXIMUM = 2024
    HOLDING_POSITIONS_OVER_MAXIMUM_ALLOWABLE_POSITIONS = 2025
    MODIFICATION_OF_LEVERAGE_NOT_SUPPORTED_FOR_CROSS = 2026
    ONLY_ONE_CROSS_OR_ISOLATED_IN_SAME_DIRECTION = 2027
    MAXIMUM_ORDER_QUANTITY_EXCEEDED = 2028
    ERROR_ORDER_TYPE = 2029
    EXTERNAL_ORDER_ID_IS_TOO_LONG = 2030
    ALLOWABLE_HOLDING_POSITION_EXCEED_CURRENT_RISK_LIMIT = 2031
    ORDER_PRICE_LESS_THAN_LONG_POSITION_FORCE_LIQUIDATE_PRICE = 2032
    ORDER_PRICE_MORE_THAN_SHORT_POSITION_FORCE_LIQUIDATE_PRICE = 2033
    BATCH_QUERY_QUANTITY_LIMIT_EXCEEDED = 2034
    UNSUPPORTED_MARKET_PRICE_TIER = 2035
    ORDERS_MORE_THAN_LIMIT = 2036
    FREQUENT_TRANSACTIONS = 2037
    MAXIMUM_ALLOWABLE_POSITION_QUANTITY_EXCEEDED = 2038
    TRIGGER_PRICE_TYPE_ERROR = 3001
    TRIGGER_TYPE_ERROR = 3002
    EXECUTIVE_CYCLE_ERROR = 3003
    TRIGGER_PRICE_ERROR = 3004
    UNSUPPORTED_CURRENCY = 4001
    TAKE_PRICE_AND_STOP_LOSS_PRICE_CANNOT_BOTH_BE_NONE = 5001
    STOP_LIMIT_ORDER_DOES_NOT_EXIST_OR_HAS_CLOSED = 5002
    TAKE_PROFIT_AND_STOP_LOSS_PRICE_SETTING_IS_WRONG = 5003
    TAKE_PROFIT_AND_STOP_LOSS_VOLUME_EXCEEDS_LIQUIDATABLE_POSITIONS = 5004
    TRADING_FORBIDDEN = 6001
    OPEN_FORBIDDEN = 6002
    TIME_RANGE_ERROR = 6003
    TRADING_PAIR_AND_STATUS_SHOULD_BE_FILLED_IN = 6004
    TRADING_PAIR_IS_NOT_AVAILABLE = 6005

    def __str__(self) -> str:
        return self.name


class ApiError(Exception):
    """Any failure while talking to the futures API."""


class ErrorApiResponse(ApiError):
    """The API answered with an error code and message."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(code, message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"Error response: code: {self.code}, msg: {self.message}"


def unwrap_response(payload: Any) -> Any:
    """Return the ``data`` of a decoded response, raising on an error response."""
    if not isinstance(payload, dict):
        raise ApiError(f"unexpected response: {payload!r}")
    if "data" in payload:
        return payload["data"]
    code = payload.get("code")
    message = payload.get("message")
    if isinstance(code, int) and not isinstance(code, bool) and isinstance(message, str):
        try:
            error_code = ErrorCode(code)
        except ValueError:
            raise ApiError(f"unknown error code {code}: {message}") from None
        raise ErrorApiResponse(error_code, message)
    raise ApiError(f"unexpected response: {payload!r}")