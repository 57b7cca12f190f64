# mexc_api

A Python library for the MEXC exchange REST APIs. It provides a client for
the public market data endpoints of the spot API (version 3), models and
query builders for the spot account endpoints, the spot and futures error
codes, and the HMAC-SHA256 request signing used by the futures API
(version 1).

Prices, quantities and balances are `decimal.Decimal`. Times are
timezone-aware UTC `datetime` objects. Error responses from the exchange are
raised as exceptions that carry the exchange's error code.

## Installation

```
pip install .
```

The only runtime dependency is `httpx`. To run the test suite:

```
pip install ".[test]"
pytest
```

## Spot API

### `mexc_api.spot.client`

`SpotClient(base_url, http_client=None)` sends GET requests to the public
spot endpoints. If no `httpx.Client` is passed it creates one, and `close()`
(or leaving a `with` block) closes only a client it created itself.

- `ping()` sends a request to `/api/v3/ping`.
- `time()` returns the server time.
- `default_symbols()` returns a `DefaultSymbols`.
- `depth(symbol, limit=None)` returns the order book as a `Depth`.
- `avg_price(symbol)` returns an `AvgPrice`.
- `trades(symbol, limit=None)` returns a list of `Trade`.
- `klines(params)` takes a `KlinesParams` and returns a list of `Kline`.
- `exchange_information(symbols=None)` takes no symbol, one symbol as a
  string, or an iterable of symbols, and returns an `ExchangeInformation`
  holding an `ExchangeSymbol` per symbol.

An error body from the exchange is raised as `ErrorResponse`; otherwise an
HTTP failure status is raised through `error_for_status`, and a failed
request as `ApiError`.

```python
from mexc_api.spot.client import SpotClient
from mexc_api.spot.enums import KlineInterval
from mexc_api.spot.market import KlinesParams

with SpotClient("https://api.example.com") as client:
    book = client.depth("BTCUSDT", limit=10)
    klines = client.klines(
        KlinesParams(symbol="BTCUSDT", interval=KlineInterval.ONE_MINUTE, limit=100)
    )
    info = client.exchange_information(["BTCUSDT", "ETHUSDT"])
```

`exchange_information_query(symbols)` builds the query on its own:
`{}`, `{"symbol": ...}` or `{"symbols": "A,B"}`.

### `mexc_api.spot.market`

The models and parsers behind the market data endpoints. They take JSON
already decoded into Python objects:

- `KlinesParams` with `to_query()`; start and end times are sent in
  milliseconds and unset values are left out.
- `parse_klines(payload)` decodes the array-of-arrays kline response into
  `Kline` objects, raising `ErrorResponse` for an error body and
  `UnableToParseResponseError` for anything malformed.
- `Depth.from_dict`, `AvgPrice.from_dict`, `Trade.from_dict`,
  `DefaultSymbols.from_dict`, `PriceAndQuantity.from_value` and
  `parse_server_time(data)`.

### `mexc_api.spot.account`

Helpers for the signed account endpoints:

- `AccountInformation.from_dict` and `AccountBalance.from_dict`.
- `GetOrderParams(...).to_query(timestamp)` for fetching one order.
- `account_information_query(timestamp)`, `user_data_stream_query(timestamp)`
  and `keep_alive_query(listen_key, timestamp)` return the unsigned query
  of each request, with the timestamp in milliseconds.
- `parse_listen_key(data)` returns the listen key of a user data stream
  response, raising `ErrorResponse` for an error body.

### `mexc_api.spot.enums`

`OrderSide`, `OrderType`, `OrderStatus`, `KlineInterval`, `ChangedType` and
`TradeType`, each valued as it travels on the wire (for example
`KlineInterval.ONE_HOUR.value == "60m"`).

### `mexc_api.spot.errors`

- `ApiError` and its subclasses `MalformedRequestError` (HTTP 400),
  `WebApplicationFirewallViolatedError` (403), `RateLimitExceededError`
  (429), `InternalServerError` (500) and `UnableToParseResponseError`.
- `ErrorResponse`, with `code` (an `ErrorCode`), `msg` and `extend`.
- `error_for_status(status, message)` returns the error for an HTTP status.
- `parse_error_response(payload)` returns the `ErrorResponse` a body
  carries, or `None`. Codes sent as strings, such as
  `{"code": "730002", "msg": "Parameter error"}`, are recognised; a string
  code that is not a known number yields `ErrorCode.INVALID_RESPONSE`.
- `parse_api_response(payload)` returns the body unchanged or raises its
  `ErrorResponse`.

```python
from mexc_api.spot.errors import ErrorResponse, parse_api_response

try:
    parse_api_response({"code": "730002", "msg": "Parameter error"})
except ErrorResponse as exc:
    print(exc.code)  # YOUR_INPUT_PARAM_IS_INVALID_OR_PARAMETER_ERROR
```

## Futures API

### `mexc_api.futures.auth`

`sign_request(time, api_key, secret_key, params_kind, params)` returns the
hex HMAC-SHA256 signature of the API key, the request time in milliseconds
and the parameters, encoded as a URL query
(`SignRequestParamsKind.QUERY`, `None` values left out) or as compact JSON
(`SignRequestParamsKind.BODY`). Parameters that cannot be encoded raise
`SignRequestError`.

```python
from datetime import datetime, timezone

from mexc_api.futures.auth import SignRequestParamsKind, sign_request

signature = sign_request(
    time=datetime.now(timezone.utc),
    api_key="placeholder",
    secret_key="secret",
    params_kind=SignRequestParamsKind.QUERY,
    params={"page_num": 1, "page_size": 20},
)
```

### `mexc_api.futures.response`

`unwrap_response(payload)` returns the `data` of a decoded futures response.
An error body is raised as `ErrorApiResponse` with `code` (an `ErrorCode`)
and `message`; an unknown code or an unexpected shape as `ApiError`.

## What the package does not do

- It does not sign or send spot requests to private endpoints. The account
  module builds the unsigned queries and parses the responses; signing and
  sending them is left to the caller.
- It has no models or query builders for placing, cancelling or listing
  spot orders.
- On the futures side it has only request signing and the response
  envelope: no HTTP client, no endpoint calls, and no models for assets,
  positions, orders or klines.
- It has no command-line program.