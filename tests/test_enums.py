import pytest

from mexc_api.spot.enums import (
    ChangedType,
    KlineInterval,
    OrderSide,
    OrderStatus,
    OrderType,
    TradeType,
)


def test_order_side_from_wire():
    assert OrderSide("BUY") is OrderSide.BUY
    assert OrderSide("SELL") is OrderSide.SELL
    assert str(OrderSide.SELL) == "SELL"


def test_order_type_from_wire():
    assert OrderType("LIMIT") is OrderType.LIMIT
    assert OrderType("MARKET") is OrderType.MARKET
    assert OrderType("LIMIT_MAKER") is OrderType.LIMIT_MAKER
    assert OrderType("IMMEDIATE_OR_CANCEL") is OrderType.IMMEDIATE_OR_CANCEL
    assert OrderType("FILL_OR_KILL") is OrderType.FILL_OR_KILL
    assert str(OrderType.LIMIT_MAKER) == "LIMIT_MAKER"


def test_order_status_from_wire():
    assert OrderStatus("NEW") is OrderStatus.NEW
    assert OrderStatus("FILLED") is OrderStatus.FILLED
    assert OrderStatus("PARTIALLY_FILLED") is OrderStatus.PARTIALLY_FILLED
    assert OrderStatus("CANCELED") is OrderStatus.CANCELED
    assert OrderStatus("PARTIALLY_CANCELED") is OrderStatus.PARTIALLY_CANCELED
    assert str(OrderStatus.PARTIALLY_FILLED) == "PARTIALLY_FILLED"


def test_changed_type_from_wire():
    assert ChangedType("WITHDRAW_FEE") is ChangedType.WITHDRAW_FEE
    assert ChangedType("ENTRUST_PLACE") is ChangedType.ENTRUST_PLACE
    assert ChangedType("ETF_INDEX") is ChangedType.ETF_INDEX
    assert str(ChangedType.SUGAR) == "SUGAR"


def test_trade_type_from_wire():
    assert TradeType("ASK") is TradeType.ASK
    assert TradeType("BID") is TradeType.BID
    assert str(TradeType.BID) == "BID"


@pytest.mark.parametrize("value", ["buy", "Limit", "not-a-value", ""])
def test_unknown_order_side_and_type_rejected(value):
    with pytest.raises(ValueError):
        OrderSide(value)
    with pytest.raises(ValueError):
        OrderType(value)


def test_unknown_values_rejected():
    with pytest.raises(ValueError):
        OrderStatus("DONE")
    with pytest.raises(ValueError):
        ChangedType("TRANSFER")
    with pytest.raises(ValueError):
        TradeType("SELL")
    with pytest.raises(ValueError):
        KlineInterval("1h")


def test_kline_interval_values():
    assert KlineInterval.ONE_MINUTE.value == "1m"
    assert KlineInterval.ONE_HOUR.value == "60m"
    assert KlineInterval("1W") is KlineInterval.ONE_WEEK
    assert KlineInterval("1M") is KlineInterval.ONE_MONTH


def test_kline_interval_from_wire():
    assert KlineInterval("5m") is KlineInterval.FIVE_MINUTES
    assert KlineInterval("15m") is KlineInterval.FIFTEEN_MINUTES
    assert KlineInterval("30m") is KlineInterval.THIRTY_MINUTES
    assert KlineInterval("4h") is KlineInterval.FOUR_HOURS
    assert KlineInterval("1d") is KlineInterval.ONE_DAY
    assert str(KlineInterval.FOUR_HOURS) == "4h"