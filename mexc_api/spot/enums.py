"""Enumerations of the spot API, valued as they travel on the wire."""

from __future__ import annotations

import enum


class _WireEnum(str, enum.Enum):
    def __str__(self) -> str:
        return self.value


class OrderSide(_WireEnum):
    BUY = "BUY"
    SELL = "SELL"


class OrderType(_WireEnum):
    LIMIT = "LIMIT"
    MARKET = "MARKET"
    LIMIT_MAKER = "LIMIT_MAKER"
    IMMEDIATE_OR_CANCEL = "IMMEDIATE_OR_CANCEL"
    FILL_OR_KILL = "FILL_OR_KILL"


class OrderStatus(_WireEnum):
    NEW = "NEW"
    FILLED = "FILLED"
    PARTIALLY_FILLED = "PARTIALLY_FILLED"
    CANCELED = "CANCELED"
    PARTIALLY_CANCELED = "PARTIALLY_CANCELED"


class KlineInterval(_WireEnum):
    """Kline intervals as the spot API names them."""

    ONE_MINUTE = "1m"
    FIVE_MINUTES = "5m"
    FIFTEEN_MINUTES = "15m"
    THIRTY_MINUTES = "30m"
    ONE_HOUR = "60m"
    FOUR_HOURS = "4h"
    ONE_DAY = "1d"
    ONE_WEEK = "1W"
    ONE_MONTH = "1M"


class ChangedType(_WireEnum):
    WITHDRAW = "WITHDRAW"
    WITHDRAW_FEE = "WITHDRAW_FEE"
    DEPOSIT = "DEPOSIT"
    DEPOSIT_FEE = "DEPOSIT_FEE"
    ENTRUST = "ENTRUST"
    ENTRUST_PLACE = "ENTRUST_PLACE"
    ENTRUST_CANCEL = "ENTRUST_CANCEL"
    TRADE_FEE = "TRADE_FEE"
    ENTRUST_UNFROZEN = "ENTRUST_UNFROZEN"
    SUGAR = "SUGAR"
    ETF_INDEX = "ETF_INDEX"


class TradeType(_WireEnum):
    ASK = "ASK"
    BID = "BID"