"""Request signing for the futures private API."""

from __future__ import annotations

import enum
import hmac
import json
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from hashlib import sha256
from typing import Any
from urllib.parse import quote_plus

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class SignRequestParamsKind(enum.Enum):
    """Where the signed parameters travel: the query string or the JSON body."""

    QUERY = "query"
    BODY = "body"


class SignRequestError(Exception):
    """The parameters could not be serialised for signing."""


def _timestamp_millis(time: datetime) -> int:
    if time.tzinfo is None:
        time = time.replace(tzinfo=timezone.utc)
    return (time - _EPOCH) // timedelta(milliseconds=1)


def _query_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, enum.Enum):
        return _query_scalar(value.value)
    if isinstance(value, (str, int, float, Decimal)):
        return str(value)
    raise SignRequestError(f"cannot encode {type(value).__name__} in a query string")


def _quote(text: str) -> str:
    return quote_plus(text, safe="*").replace("~", "%7E")


def _encode_query(params: Any) -> str:
    if params is None:
        return ""
    if not isinstance(params, Mapping):
        raise SignRequestError("query parameters must be a mapping")
    return "&".join(
        f"{_quote(str(key))}={_quote(_query_scalar(value))}"
        for key, value in params.items()
        if value is not None
    )


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, enum.Enum):
        return value.value
    raise TypeError(f"{type(value).__name__} is not JSON serialisable")


def _encode_body(params: Any) -> str:
    try:
        return json.dumps(
            params, separators=(",", ":"), ensure_ascii=False, default=_json_default
        )
    except (TypeError, ValueError) as exc:
        raise SignRequestError(f"cannot encode body: {exc}") from exc


def sign_request(
    time: datetime,
    api_key: str,
    secret_key: str,
    params_kind: SignRequestParamsKind,
    params: Any,
) -> str:
    """Return the hex HMAC-SHA256 signature of api_key + millis + encoded params."""
    if params_kind is SignRequestParamsKind.QUERY:
        data = _encode_query(params)
    else:
        data = _encode_body(params)
    message = f"{api_key}{_timestamp_millis(time)}{data}"
    return hmac.new(secret_key.encode(), message.encode(), sha256).hexdigest()