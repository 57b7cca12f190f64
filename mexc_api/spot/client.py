"""Client for the public endpoints of the spot API."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal, InvalidOperation
from typing import Any

import httpx

from mexc_api.spot.enums import OrderType
from mexc_api.spot.errors import (
    ApiError,
    UnableToParseResponseError,
    error_for_status,
    parse_error_response,
)
from mexc_api.spot.market import (
    AvgPrice,
    DefaultSymbols,
    Depth,
    Kline,
    KlinesParams,
    Trade,
    parse_klines,
    parse_server_time,
)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MISSING = object()


def _mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise UnableToParseResponseError(f"expected an object, got {data!r}")
    return data


def _get(data: Mapping[str, Any], key: str) -> Any:
    value = data.get(key, _MISSING)
    if value is _MISSING:
        raise UnableToParseResponseError(f"missing field {key!r}")
    return value


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _int(data: Mapping[str, Any], key: str) -> int:
    value = _get(data, key)
    if not _is_int(value):
        raise UnableToParseResponseError(f"field {key!r} is not an integer: {value!r}")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = _get(data, key)
    if not isinstance(value, str):
        raise UnableToParseResponseError(f"field {key!r} is not a string: {value!r}")
    return value


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = _get(data, key)
    if not isinstance(value, bool):
        raise UnableToParseResponseError(f"field {key!r} is not a boolean: {value!r}")
    return value


def _opt_bool(data: Mapping[str, Any], key: str) -> bool | None:
    value = data.get(key)
    if value is not None and not isinstance(value, bool):
        raise UnableToParseResponseError(f"field {key!r} is not a boolean: {value!r}")
    return value


def _decimal(data: Mapping[str, Any], key: str) -> Decimal:
    value = _get(data, key)
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise UnableToParseResponseError(f"field {key!r} is not a decimal: {value!r}")
    try:
        return Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except InvalidOperation:
        raise UnableToParseResponseError(
            f"field {key!r} is not a decimal: {value!r}"
        ) from None


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = _get(data, key)
    if not isinstance(value, list):
        raise UnableToParseResponseError(f"field {key!r} is not a list: {value!r}")
    return list(value)


def _str_list(data: Mapping[str, Any], key: str) -> list[str]:
    values = _list(data, key)
    if not all(isinstance(item, str) for item in values):
        raise UnableToParseResponseError(f"field {key!r} is not a list of strings")
    return values


def _order_types(data: Mapping[str, Any], key: str) -> list[OrderType]:
    result = []
    for value in _list(data, key):
        try:
            result.append(OrderType(value))
        except ValueError:
            raise UnableToParseResponseError(
                f"field {key!r} holds unknown order type {value!r}"
            ) from None
    return result


def exchange_information_query(
    symbols: str | Iterable[str] | None = None,
) -> dict[str, str]:
    """Return the query for no symbol, one symbol or several symbols."""
    if symbols is None:
        return {}
    if isinstance(symbols, str):
        return {"symbol": symbols}
    return {"symbols": ",".join(symbols)}


@dataclass(frozen=True)
class ExchangeSymbol:
    """Trading rules of one symbol."""

    symbol: str
    status: str
    base_asset: str
    base_asset_precision: int
    quote_asset: str
    quote_precision: int
    quote_asset_precision: int
    base_commission_precision: int
    quote_commission_precision: int
    order_types: list[OrderType]
    quote_order_qty_market_allowed: bool | None
    is_spot_trading_allowed: bool
    is_margin_trading_allowed: bool
    quote_amount_precision: Decimal
    base_size_precision: Decimal
    permissions: list[str]
    filters: list[Any]
    max_quote_amount: Decimal
    maker_commission: Decimal
    taker_commission: Decimal

    @classmethod
    def from_dict(cls, data: Any) -> ExchangeSymbol:
        data = _mapping(data)
        return cls(
            symbol=_str(data, "symbol"),
            status=_str(data, "status"),
            base_asset=_str(data, "baseAsset"),
            base_asset_precision=_int(data, "baseAssetPrecision"),
            quote_asset=_str(data, "quoteAsset"),
            quote_precision=_int(data, "quotePrecision"),
            quote_asset_precision=_int(data, "quoteAssetPrecision"),
            base_commission_precision=_int(data, "baseCommissionPrecision"),
            quote_commission_precision=_int(data, "quoteCommissionPrecision"),
            order_types=_order_types(data, "orderTypes"),
            quote_order_qty_market_allowed=_opt_bool(data, "quoteOrderQtyMarketAllowed"),
            is_spot_trading_allowed=_bool(data, "isSpotTradingAllowed"),
            is_margin_trading_allowed=_bool(data, "isMarginTradingAllowed"),
            quote_amount_precision=_decimal(data, "quoteAmountPrecision"),
            base_size_precision=_decimal(data, "baseSizePrecision"),
            permissions=_str_list(data, "permissions"),
            filters=_list(data, "filters"),
            max_quote_amount=_decimal(data, "maxQuoteAmount"),
            maker_commission=_decimal(data, "makerCommission"),
            taker_commission=_decimal(data, "takerCommission"),
        )


@dataclass(frozen=True)
class ExchangeInformation:
    """Trading rules of the exchange; the server time is in seconds."""

    timezone: str
    server_time: datetime
    rate_limits: list[Any]
    exchange_filters: list[Any]
    symbols: list[ExchangeSymbol]

    @classmethod
    def from_dict(cls, data: Any) -> ExchangeInformation:
        data = _mapping(data)
        return cls(
            timezone=_str(data, "timezone"),
            server_time=_EPOCH + timedelta(seconds=_int(data, "serverTime")),
            rate_limits=_list(data, "rateLimits"),
            exchange_filters=_list(data, "exchangeFilters"),
            symbols=[ExchangeSymbol.from_dict(item) for item in _list(data, "symbols")],
        )


class SpotClient:
    """Client for the public spot endpoints."""

    def __init__(self, base_url: str, http_client: httpx.Client | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self.http_client = http_client if http_client is not None else httpx.Client()

    def __enter__(self) -> SpotClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _send(self, path: str, params: Mapping[str, Any] | None = None) -> httpx.Response:
        try:
            return self.http_client.get(f"{self.base_url}{path}", params=params)
        except httpx.HTTPError as exc:
            raise ApiError(f"request failed: {exc}") from exc

    def _get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        response = self._send(path, params)
        try:
            payload = response.json()
        except ValueError:
            if response.is_error:
                raise error_for_status(
                    response.status_code, f"HTTP status {response.status_code}"
                ) from None
            raise UnableToParseResponseError("response is not JSON") from None
        error = parse_error_response(payload)
        if error is not None:
            raise error
        if response.is_error:
            raise error_for_status(
                response.status_code, f"HTTP status {response.status_code}"
            )
        return payload

    def ping(self) -> None:
        """Test connectivity to the API."""
        self._send("/api/v3/ping")

    def time(self) -> datetime:
        """Return the server time."""
        return parse_server_time(self._get("/api/v3/time"))

    def default_symbols(self) -> DefaultSymbols:
        """Return the symbols tradable through the API."""
        return DefaultSymbols.from_dict(self._get("/api/v3/defaultSymbols"))

    def depth(self, symbol: str, limit: int | None = None) -> Depth:
        """Return the order book; limit defaults to 100 server side, max 5000."""
        params: dict[str, Any] = {"symbol": symbol}
        if limit is not None:
            params["limit"] = limit
        return Depth.from_dict(self._get("/api/v3/depth", params))

    def avg_price(self, symbol: str) -> AvgPrice:
        """Return the current average price of a symbol."""
        return AvgPrice.from_dict(self._get("/api/v3/avgPrice", {"symbol": symbol}))

    def trades(self, symbol: str, limit: int | None = None) -> list[Trade]:
        """Return recent trades; limit defaults to 500 server side, max 1000."""
        params: dict[str, Any] = {"symbol": symbol}
        if limit is not None:
            params["limit"] = limit
        data = self._get("/api/v3/trades", params)
        if not isinstance(data, list):
            raise UnableToParseResponseError(f"trades are not a list: {data!r}")
        return [Trade.from_dict(item) for item in data]

    def klines(self, params: KlinesParams) -> list[Kline]:
        """Return the klines of a symbol."""
        return parse_klines(self._get("/api/v3/klines", params.to_query()))

    def exchange_information(
        self, symbols: str | Iterable[str] | None = None
    ) -> ExchangeInformation:
        """Return the trading rules for all, one or several symbols."""
        data = self._get("/api/v3/exchangeInfo", exchange_information_query(symbols))
        return ExchangeInformation.from_dict(data)

    def close(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_client:
            self.http_client.close()