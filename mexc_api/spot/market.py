"""Public market data of the spot API: klines, depth, prices, trades and time."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation
from typing import Any

from mexc_api.spot.enums import KlineInterval, TradeType
from mexc_api.spot.errors import UnableToParseResponseError, parse_error_response

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


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _unsigned(data: Mapping[str, Any], key: str) -> int:
    value = _get(data, key)
    if not _is_int(value) or value < 0:
        raise UnableToParseResponseError(
            f"field {key!r} is not an unsigned integer: {value!r}"
        )
    return value


def _req_bool(data: Mapping[str, Any], key: str) -> bool:
    value = _get(data, key)
    if not isinstance(value, bool):
        raise UnableToParseResponseError(f"field {key!r} is not a boolean: {value!r}")
    return value


def _seconds(data: Mapping[str, Any], key: str) -> datetime:
    value = _get(data, key)
    if not _is_int(value):
        raise UnableToParseResponseError(
            f"field {key!r} is not a second timestamp: {value!r}"
        )
    return _EPOCH + timedelta(seconds=value)


def _filter_decimal_str(text: str) -> str:
    return "".join(char for char in text if char.isnumeric() or char == ".")


@dataclass(frozen=True)
class KlinesParams:
    """Parameters of a kline request; limit defaults to 500 server side, max 1000."""

    symbol: str
    interval: KlineInterval
    start_time: datetime | None = None
    end_time: datetime | None = None
    limit: int | None = None

    def to_query(self) -> dict[str, Any]:
        """Return the query of the kline request, leaving out unset values."""
        query: dict[str, Any] = {
            "symbol": self.symbol,
            "interval": KlineInterval(self.interval).value,
        }
        if self.start_time is not None:
            query["startTime"] = _timestamp_millis(self.start_time)
        if self.end_time is not None:
            query["endTime"] = _timestamp_millis(self.end_time)
        if self.limit is not None:
            query["limit"] = self.limit
        return query


@dataclass(frozen=True)
class Kline:
    open_time: datetime
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: Decimal
    close_time: datetime
    quote_asset_volume: Decimal


def _kline_time(entries: Sequence[Any], index: int) -> datetime:
    value = entries[index] if index < len(entries) else None
    if not _is_int(value):
        raise UnableToParseResponseError(f"kline entry {index} is not a timestamp")
    return _EPOCH + timedelta(milliseconds=value)


def _kline_decimal(entries: Sequence[Any], index: int, name: str) -> Decimal:
    value = entries[index] if index < len(entries) else None
    if not isinstance(value, str):
        raise UnableToParseResponseError(f"kline entry {index} is not a string")
    try:
        return Decimal(_filter_decimal_str(value))
    except InvalidOperation:
        raise UnableToParseResponseError(
            f"unable to parse decimal for {name}: {value!r}"
        ) from None


def _parse_kline(entries: Any) -> Kline:
    if not isinstance(entries, list):
        raise UnableToParseResponseError(f"kline is not a list: {entries!r}")
    return Kline(
        open_time=_kline_time(entries, 0),
        open=_kline_decimal(entries, 1, "open"),
        high=_kline_decimal(entries, 2, "high"),
        low=_kline_decimal(entries, 3, "low"),
        close=_kline_decimal(entries, 4, "close"),
        volume=_kline_decimal(entries, 5, "volume"),
        close_time=_kline_time(entries, 6),
        quote_asset_volume=_kline_decimal(entries, 7, "quote_asset_volume"),
    )


def parse_klines(payload: Any) -> list[Kline]:
    """Return the klines of a decoded kline response, raising if it is an error."""
    error = parse_error_response(payload)
    if error is not None:
        raise error
    if not isinstance(payload, list):
        raise UnableToParseResponseError(f"klines are not a list: {payload!r}")
    return [_parse_kline(entries) for entries in payload]


@dataclass(frozen=True)
class PriceAndQuantity:
    price: Decimal
    quantity: Decimal

    @classmethod
    def from_value(cls, value: Any) -> PriceAndQuantity:
        """Decode a level given as a [price, quantity] pair or as an object."""
        if isinstance(value, Mapping):
            return cls(
                price=_decimal(_get(value, "price"), "price"),
                quantity=_decimal(_get(value, "quantity"), "quantity"),
            )
        if isinstance(value, list) and len(value) == 2:
            return cls(
                price=_decimal(value[0], "price"),
                quantity=_decimal(value[1], "quantity"),
            )
        raise UnableToParseResponseError(f"not a price level: {value!r}")


def _levels(data: Mapping[str, Any], key: str) -> list[PriceAndQuantity]:
    value = _get(data, key)
    if not isinstance(value, list):
        raise UnableToParseResponseError(f"field {key!r} is not a list: {value!r}")
    return [PriceAndQuantity.from_value(level) for level in value]


@dataclass(frozen=True)
class Depth:
    """The order book of a symbol."""

    last_update_id: int
    bids: list[PriceAndQuantity]
    asks: list[PriceAndQuantity]

    @classmethod
    def from_dict(cls, data: Any) -> Depth:
        data = _mapping(data)
        return cls(
            last_update_id=_unsigned(data, "lastUpdateId"),
            bids=_levels(data, "bids"),
            asks=_levels(data, "asks"),
        )


@dataclass(frozen=True)
class AvgPrice:
    """The average price of a symbol over a number of minutes."""

    mins: int
    price: Decimal

    @classmethod
    def from_dict(cls, data: Any) -> AvgPrice:
        data = _mapping(data)
        return cls(
            mins=_unsigned(data, "mins"),
            price=_decimal(_get(data, "price"), "price"),
        )


@dataclass(frozen=True)
class Trade:
    """A recent trade; the API currently always sends a null id."""

    id: Any
    price: Decimal
    quantity: Decimal
    quote_quantity: Decimal
    time: datetime
    is_buyer_maker: bool
    is_best_match: bool
    trade_type: TradeType

    @classmethod
    def from_dict(cls, data: Any) -> Trade:
        data = _mapping(data)
        trade_type = _get(data, "tradeType")
        try:
            kind = TradeType(trade_type)
        except ValueError:
            raise UnableToParseResponseError(
                f"field 'tradeType' has unknown value {trade_type!r}"
            ) from None
        return cls(
            id=data.get("id"),
            price=_decimal(_get(data, "price"), "price"),
            quantity=_decimal(_get(data, "qty"), "qty"),
            quote_quantity=_decimal(_get(data, "quoteQty"), "quoteQty"),
            time=_seconds(data, "time"),
            is_buyer_maker=_req_bool(data, "isBuyerMaker"),
            is_best_match=_req_bool(data, "isBestMatch"),
            trade_type=kind,
        )


@dataclass(frozen=True)
class DefaultSymbols:
    """The symbols tradable through the API."""

    code: int
    data: list[str]
    msg: str | None

    @classmethod
    def from_dict(cls, data: Any) -> DefaultSymbols:
        data = _mapping(data)
        code = _get(data, "code")
        if not _is_int(code):
            raise UnableToParseResponseError(f"field 'code' is not an integer: {code!r}")
        symbols = _get(data, "data")
        if not isinstance(symbols, list) or not all(isinstance(s, str) for s in symbols):
            raise UnableToParseResponseError(
                f"field 'data' is not a list of strings: {symbols!r}"
            )
        msg = data.get("msg")
        if msg is not None and not isinstance(msg, str):
            raise UnableToParseResponseError(f"field 'msg' is not a string: {msg!r}")
        return cls(code=code, data=list(symbols), msg=msg)


def parse_server_time(data: Any) -> datetime:
    """Return the server time of a decoded time response."""
    return _seconds(_mapping(data), "serverTime")