"""Account information, user data streams and order lookup of the spot API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation
from typing import Any

from mexc_api.spot.errors import UnableToParseResponseError, parse_api_response

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MISSING = object()


def _timestamp_millis(moment: datetime) -> int:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (moment - _EPOCH) // timedelta(milliseconds=1)


def _mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise UnableToParseResponseError(f"expected an object, got {data!r}")
    return data


def _get(data: Mapping[str, Any], key: str) -> Any:
    value = data.get(key, _MISSING)
    if value is _MISSING:
        raise UnableToParseResponseError(f"missing field {key!r}")
    return value


def _decimal(value: Any, key: str) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise UnableToParseResponseError(f"field {key!r} is not a decimal: {value!r}")
    try:
        return Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except InvalidOperation:
        raise UnableToParseResponseError(
            f"field {key!r} is not a decimal: {value!r}"
        ) from None


def _req_decimal(data: Mapping[str, Any], key: str) -> Decimal:
    return _decimal(_get(data, key), key)


def _opt_decimal(data: Mapping[str, Any], key: str) -> Decimal | None:
    value = data.get(key)
    return None if value is None else _decimal(value, key)


def _req_str(data: Mapping[str, Any], key: str) -> str:
    value = _get(data, key)
    if not isinstance(value, str):
        raise UnableToParseResponseError(f"field {key!r} is not a string: {value!r}")
    return value


def _req_bool(data: Mapping[str, Any], key: str) -> bool:
    value = _get(data, key)
    if not isinstance(value, bool):
        raise UnableToParseResponseError(f"field {key!r} is not a boolean: {value!r}")
    return value


def _opt_millis(data: Mapping[str, Any], key: str) -> datetime | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise UnableToParseResponseError(
            f"field {key!r} is not a millisecond timestamp: {value!r}"
        )
    return _EPOCH + timedelta(milliseconds=value)


def _str_list(data: Mapping[str, Any], key: str) -> list[str]:
    value = _get(data, key)
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise UnableToParseResponseError(
            f"field {key!r} is not a list of strings: {value!r}"
        )
    return list(value)


@dataclass(frozen=True)
class AccountBalance:
    """The free and locked amount of one asset."""

    asset: str
    free: Decimal
    locked: Decimal

    @classmethod
    def from_dict(cls, data: Any) -> AccountBalance:
        data = _mapping(data)
        return cls(
            asset=_req_str(data, "asset"),
            free=_req_decimal(data, "free"),
            locked=_req_decimal(data, "locked"),
        )


@dataclass(frozen=True)
class AccountInformation:
    """Commissions, permissions and balances of the account."""

    maker_commission: Decimal | None
    taker_commission: Decimal | None
    buyer_commission: Decimal | None
    seller_commission: Decimal | None
    can_trade: bool
    can_withdraw: bool
    can_deposit: bool
    update_time: datetime | None
    account_type: str
    balances: list[AccountBalance]
    permissions: list[str]

    @classmethod
    def from_dict(cls, data: Any) -> AccountInformation:
        data = _mapping(data)
        balances = _get(data, "balances")
        if not isinstance(balances, list):
            raise UnableToParseResponseError(
                f"field 'balances' is not a list: {balances!r}"
            )
        return cls(
            maker_commission=_opt_decimal(data, "makerCommission"),
            taker_commission=_opt_decimal(data, "takerCommission"),
            buyer_commission=_opt_decimal(data, "buyerCommission"),
            seller_commission=_opt_decimal(data, "sellerCommission"),
            can_trade=_req_bool(data, "canTrade"),
            can_withdraw=_req_bool(data, "canWithdraw"),
            can_deposit=_req_bool(data, "canDeposit"),
            update_time=_opt_millis(data, "updateTime"),
            account_type=_req_str(data, "accountType"),
            balances=[AccountBalance.from_dict(item) for item in balances],
            permissions=_str_list(data, "permissions"),
        )


@dataclass(frozen=True)
class GetOrderParams:
    """Which order to fetch."""

    symbol: str
    order_id: str | None = None
    original_client_order_id: str | None = None
    new_client_order_id: str | None = None

    def to_query(self, timestamp: datetime) -> dict[str, Any]:
        """Return the unsigned query of the order request."""
        query = {
            "symbol": self.symbol,
            "orderId": self.order_id,
            "origClientOrderId": self.original_client_order_id,
            "newClientOrderId": self.new_client_order_id,
            "timestamp": _timestamp_millis(timestamp),
        }
        return {key: value for key, value in query.items() if value is not None}


def account_information_query(timestamp: datetime) -> dict[str, int]:
    """Return the unsigned query of the account information request."""
    return {"timestamp": _timestamp_millis(timestamp)}


def user_data_stream_query(timestamp: datetime) -> dict[str, int]:
    """Return the unsigned query that creates a user data stream."""
    return {"timestamp": _timestamp_millis(timestamp)}


def keep_alive_query(listen_key: str, timestamp: datetime) -> dict[str, Any]:
    """Return the unsigned query that keeps a user data stream alive."""
    return {"timestamp": _timestamp_millis(timestamp), "listenKey": listen_key}


def parse_listen_key(data: Any) -> str:
    """Return the listen key of a decoded user data stream response."""
    return _req_str(_mapping(parse_api_response(data)), "listenKey")