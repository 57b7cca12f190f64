from datetime import datetime, timedelta, timezone
from decimal import Decimal

import httpx
import pytest

from mexc_api.spot.client import (
    ExchangeInformation,
    ExchangeSymbol,
    SpotClient,
    exchange_information_query,
)
from mexc_api.spot.enums import KlineInterval, OrderType, TradeType
from mexc_api.spot.errors import (
    ErrorCode,
    ErrorResponse,
    RateLimitExceededError,
    UnableToParseResponseError,
)
from mexc_api.spot.market import KlinesParams

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def symbol_payload(name, **overrides):
    payload = {
        "symbol": name,
        "status": "ENABLED",
        "baseAsset": name[:-4],
        "baseAssetPrecision": 2,
        "quoteAsset": "USDT",
        "quotePrecision": 2,
        "quoteAssetPrecision": 2,
        "baseCommissionPrecision": 2,
        "quoteCommissionPrecision": 2,
        "orderTypes": ["LIMIT", "MARKET", "LIMIT_MAKER"],
        "quoteOrderQtyMarketAllowed": False,
        "isSpotTradingAllowed": True,
        "isMarginTradingAllowed": False,
        "quoteAmountPrecision": "5",
        "baseSizePrecision": "0.0001",
        "permissions": ["SPOT"],
        "filters": [],
        "maxQuoteAmount": "5000000",
        "makerCommission": "0",
        "takerCommission": "0.0005",
    }
    payload.update(overrides)
    return payload


def exchange_payload(*names):
    return {
        "timezone": "CST",
        "serverTime": 1609991676,
        "rateLimits": [],
        "exchangeFilters": [],
        "symbols": [symbol_payload(name) for name in names],
    }


def make_client(routes):
    seen = []

    def handler(request):
        seen.append(request)
        body = routes[request.url.path]
        if isinstance(body, httpx.Response):
            return body
        return httpx.Response(200, json=body)

    http = httpx.Client(transport=httpx.MockTransport(handler))
    return SpotClient("https://api.example.com", http), seen


@pytest.mark.parametrize(
    "symbols, expected",
    [
        (None, {}),
        ("BTCUSDT", {"symbol": "BTCUSDT"}),
        (["BTCUSDT", "ETHUSDT"], {"symbols": "BTCUSDT,ETHUSDT"}),
    ],
)
def test_exchange_information_query(symbols, expected):
    assert exchange_information_query(symbols) == expected


def test_exchange_symbol_from_dict():
    symbol = ExchangeSymbol.from_dict(symbol_payload("BTCUSDT"))
    assert symbol.symbol == "BTCUSDT"
    assert symbol.base_asset == "BTC"
    assert symbol.order_types == [OrderType.LIMIT, OrderType.MARKET, OrderType.LIMIT_MAKER]
    assert symbol.base_size_precision == Decimal("0.0001")
    assert symbol.quote_order_qty_market_allowed is False


def test_exchange_symbol_unknown_order_type():
    with pytest.raises(UnableToParseResponseError):
        ExchangeSymbol.from_dict(symbol_payload("BTCUSDT", orderTypes=["STOP"]))


def test_exchange_symbol_missing_field():
    payload = symbol_payload("BTCUSDT")
    del payload["takerCommission"]
    with pytest.raises(UnableToParseResponseError):
        ExchangeSymbol.from_dict(payload)


def test_exchange_information_server_time_in_seconds():
    info = ExchangeInformation.from_dict(exchange_payload("BTCUSDT"))
    assert info.server_time == EPOCH + timedelta(seconds=1609991676)
    assert [s.symbol for s in info.symbols] == ["BTCUSDT"]


def test_ping_requests_ping_path():
    client, seen = make_client({"/api/v3/ping": {}})
    assert client.ping() is None
    assert [request.url.path for request in seen] == ["/api/v3/ping"]


def test_time():
    client, _ = make_client({"/api/v3/time": {"serverTime": 1609991676}})
    assert client.time() == EPOCH + timedelta(seconds=1609991676)


def test_default_symbols():
    body = {"code": 0, "data": ["BTCUSDT", "ETHUSDT"], "msg": None}
    client, _ = make_client({"/api/v3/defaultSymbols": body})
    result = client.default_symbols()
    assert result.data == ["BTCUSDT", "ETHUSDT"]
    assert result.msg is None


def test_depth_with_limit():
    body = {"lastUpdateId": 7, "bids": [["1.5", "2"]], "asks": [["1.6", "3"]]}
    client, seen = make_client({"/api/v3/depth": body})
    depth = client.depth("BTCUSDT", 5)
    assert seen[0].url.params["symbol"] == "BTCUSDT"
    assert seen[0].url.params["limit"] == "5"
    assert depth.last_update_id == 7
    assert depth.bids[0].price == Decimal("1.5")
    assert depth.asks[0].quantity == Decimal("3")


def test_depth_without_limit():
    body = {"lastUpdateId": 1, "bids": [], "asks": []}
    client, seen = make_client({"/api/v3/depth": body})
    client.depth("BTCUSDT")
    assert "limit" not in seen[0].url.params


def test_avg_price():
    client, seen = make_client({"/api/v3/avgPrice": {"mins": 5, "price": "26000.5"}})
    result = client.avg_price("BTCUSDT")
    assert seen[0].url.params["symbol"] == "BTCUSDT"
    assert (result.mins, result.price) == (5, Decimal("26000.5"))


def test_trades():
    body = [
        {
            "id": None,
            "price": "0.04",
            "qty": "10",
            "quoteQty": "0.4",
            "time": 1695571596,
            "isBuyerMaker": True,
            "isBestMatch": True,
            "tradeType": "BID",
        }
    ]
    client, seen = make_client({"/api/v3/trades": body})
    trades = client.trades("KASUSDT", 1000)
    assert seen[0].url.params["limit"] == "1000"
    assert len(trades) == 1
    assert trades[0].trade_type is TradeType.BID
    assert trades[0].quote_quantity == Decimal("0.4")


def test_klines_sends_params_and_parses():
    body = [[1609991676000, "1.0", "2.0", "0.5", "1.5", "10", 1609991736000, "15"]]
    client, seen = make_client({"/api/v3/klines": body})
    params = KlinesParams("BTCUSDT", KlineInterval.ONE_MINUTE, limit=1)
    klines = client.klines(params)
    assert seen[0].url.params["interval"] == "1m"
    assert seen[0].url.params["limit"] == "1"
    assert klines[0].open_time == EPOCH + timedelta(milliseconds=1609991676000)
    assert klines[0].high == Decimal("2.0")
    assert klines[0].quote_asset_volume == Decimal("15")


def test_exchange_information_single_symbol():
    client, seen = make_client({"/api/v3/exchangeInfo": exchange_payload("BTCUSDT")})
    info = client.exchange_information("BTCUSDT")
    assert seen[0].url.params["symbol"] == "BTCUSDT"
    assert len(info.symbols) == 1
    assert info.symbols[0].symbol == "BTCUSDT"


def test_exchange_information_multiple_symbols():
    payload = exchange_payload("BTCUSDT", "ETHUSDT")
    client, seen = make_client({"/api/v3/exchangeInfo": payload})
    info = client.exchange_information(["BTCUSDT", "ETHUSDT"])
    assert seen[0].url.params["symbols"] == "BTCUSDT,ETHUSDT"
    assert len(info.symbols) == 2


def test_error_response_is_raised():
    body = {"code": "730002", "msg": "Parameter error"}
    client, _ = make_client({"/api/v3/avgPrice": httpx.Response(400, json=body)})
    with pytest.raises(ErrorResponse) as info:
        client.avg_price("BTCUSDT")
    assert info.value.code is ErrorCode.YOUR_INPUT_PARAM_IS_INVALID_OR_PARAMETER_ERROR


def test_rate_limit_status_without_json():
    client, _ = make_client({"/api/v3/time": httpx.Response(429, text="slow down")})
    with pytest.raises(RateLimitExceededError):
        client.time()


def test_close_keeps_borrowed_client_open():
    client, _ = make_client({})
    client.close()
    assert client.http_client.is_closed is False


def test_close_closes_owned_client():
    client = SpotClient("https://api.example.com")
    client.close()
    assert client.http_client.is_closed is True