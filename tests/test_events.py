import math

import pytest

from binance_trop.events import (
    AccountUpdateDataEvent,
    AccountUpdateEvent,
    AggrTradesEvent,
    BookTickerEvent,
    DepthOrderBookEvent,
    EventBalance,
    EventPosition,
    IndexKlineEvent,
    KlineEvent,
    LiquidationEvent,
    MarkPriceEvent,
    OrderTradeEvent,
    UserDataStreamExpiredEvent,
)
from binance_trop.model import Asks, Bids, ModelError

ACCOUNT_UPDATE_JSON = """
{
  "e": "ACCOUNT_UPDATE",
  "E": 1564745798939,
  "T": 1564745798938,
  "a": {
    "m": "ORDER",
    "B": [
      {"a": "USDT", "wb": "122624.12345678", "cw": "100.12345678", "bc": "50.12345678"},
      {"a": "BUSD", "wb": "1.00000000", "cw": "0.00000000", "bc": "-49.12345678"}
    ],
    "P": [
      {"s": "BTCUSDT", "pa": "0", "ep": "0.00000", "cr": "200", "up": "0",
       "mt": "isolated", "iw": "0.00000000", "ps": "BOTH"},
      {"s": "BTCUSDT", "pa": "20", "ep": "6563.66500", "cr": "0", "up": "2850.21200",
       "mt": "isolated", "iw": "13200.70726908", "ps": "LONG"},
      {"s": "BTCUSDT", "pa": "-10", "ep": "6563.86000", "cr": "-45.04000000",
       "up": "-1423.15600", "mt": "isolated", "iw": "6570.42511771", "ps": "SHORT"}
    ]
  }
}
"""


def test_account_update_event():
    expected = AccountUpdateEvent(
        event_type="ACCOUNT_UPDATE",
        event_time=1564745798939,
        data=AccountUpdateDataEvent(
            reason="ORDER",
            balances=[
                EventBalance(
                    asset="USDT",
                    wallet_balance="122624.12345678",
                    cross_wallet_balance="100.12345678",
                    balance_change="50.12345678",
                ),
                EventBalance(
                    asset="BUSD",
                    wallet_balance="1.00000000",
                    cross_wallet_balance="0.00000000",
                    balance_change="-49.12345678",
                ),
            ],
            positions=[
                EventPosition(
                    symbol="BTCUSDT",
                    position_amount="0",
                    entry_price="0.00000",
                    accumulated_realized="200",
                    unrealized_pnl="0",
                    margin_type="isolated",
                    isolated_wallet="0.00000000",
                    position_side="BOTH",
                ),
                EventPosition(
                    symbol="BTCUSDT",
                    position_amount="20",
                    entry_price="6563.66500",
                    accumulated_realized="0",
                    unrealized_pnl="2850.21200",
                    margin_type="isolated",
                    isolated_wallet="13200.70726908",
                    position_side="LONG",
                ),
                EventPosition(
                    symbol="BTCUSDT",
                    position_amount="-10",
                    entry_price="6563.86000",
                    accumulated_realized="-45.04000000",
                    unrealized_pnl="-1423.15600",
                    margin_type="isolated",
                    isolated_wallet="6570.42511771",
                    position_side="SHORT",
                ),
            ],
        ),
    )
    assert AccountUpdateEvent.from_json(ACCOUNT_UPDATE_JSON) == expected


def test_depth_event_reads_array_levels():
    event = DepthOrderBookEvent.from_dict(
        {
            "e": "depthUpdate",
            "E": 123456789,
            "s": "BNBBTC",
            "U": 157,
            "u": 160,
            "b": [["0.0024", "10"]],
            "a": [["0.0026", "100"], ["INF", "1"]],
        }
    )
    assert event.first_update_id == 157
    assert event.final_update_id == 160
    assert event.previous_final_update_id is None
    assert event.bids == [Bids(price=0.0024, qty=10.0)]
    assert event.asks[0] == Asks(price=0.0026, qty=100.0)
    assert math.isinf(event.asks[1].price)


def test_depth_event_previous_update_id():
    event = DepthOrderBookEvent.from_dict(
        {"e": "depthUpdate", "E": 1, "s": "X", "U": 1, "u": 2, "pu": 0,
         "b": [], "a": []}
    )
    assert event.previous_final_update_id == 0


def test_depth_event_rejects_bad_level_length():
    with pytest.raises(ModelError):
        DepthOrderBookEvent.from_dict(
            {"e": "depthUpdate", "E": 1, "s": "X", "U": 1, "u": 2,
             "b": [["1.0", "2.0", "3.0"]], "a": []}
        )


def test_kline_event():
    event = KlineEvent.from_dict(
        {
            "e": "kline",
            "E": 123456789,
            "s": "BNBBTC",
            "k": {
                "t": 123400000, "T": 123460000, "s": "BNBBTC", "i": "1m",
                "f": 100, "L": 200, "o": "0.0010", "c": "0.0020", "h": "0.0025",
                "l": "0.0015", "v": "1000", "n": 100, "x": False, "q": "1.0000",
                "V": "500", "Q": "0.500", "B": "123456",
            },
        }
    )
    assert event.kline.interval == "1m"
    assert event.kline.number_of_trades == 100
    assert event.kline.is_final_bar is False
    assert event.kline.taker_buy_quote_asset_volume == "0.500"
    assert event.kline.ignore_me == ""


def test_index_kline_event_skips_ignored_fields():
    event = IndexKlineEvent.from_dict(
        {
            "e": "indexPrice_kline", "E": 1591261542539, "ps": "BTCUSD",
            "k": {"t": 1591261500000, "T": 1591261559999, "s": "0", "i": "1m",
                  "f": 1591261500000, "L": 1591261559999, "o": "9542.21",
                  "c": "9542.50", "h": "9542.71", "l": "9539.70", "v": "0",
                  "n": 60, "x": False, "q": "0", "V": "0", "Q": "0", "B": "0"},
        }
    )
    assert event.pair == "BTCUSD"
    assert event.kline.close == "9542.50"
    assert event.kline.ignore_me == ""
    assert event.kline.ignore_me5 == ""


def test_mark_price_event_optional_index_price():
    data = {"e": "markPriceUpdate", "E": 1562305380000, "s": "BTCUSDT",
            "p": "11794.15000000", "P": "11784.62659091", "r": "0.00038167",
            "T": 1562306400000}
    event = MarkPriceEvent.from_dict(data)
    assert event.index_price is None
    assert event.funding_rate == "0.00038167"
    with_index = MarkPriceEvent.from_dict({**data, "i": "11784.6"})
    assert with_index.index_price == "11784.6"


def test_liquidation_event():
    event = LiquidationEvent.from_dict(
        {"E": 1626118018407, "e": "forceOrder",
         "o": {"S": "SELL", "T": 1626118018404, "X": "FILLED", "ap": "33028.07",
               "f": "IOC", "l": "0.010", "o": "LIMIT", "p": "32896.00",
               "q": "0.010", "s": "BTCUSDT", "z": "0.010"}}
    )
    order = event.liquidation_order
    assert order.average_price == "33028.07"
    assert order.side == "SELL"
    assert order.order_trade_time == 1626118018404


def test_order_trade_event_skipped_fields_default():
    event = OrderTradeEvent.from_dict(
        {"e": "executionReport", "E": 1499405658658, "s": "ETHBTC",
         "c": "mUvoqJxFIILMdfAW5iGSOW", "S": "BUY", "o": "LIMIT", "f": "GTC",
         "q": "1.00000000", "p": "0.10264410", "P": "0.00000000",
         "F": "0.00000000", "g": -1, "C": "", "x": "NEW", "X": "NEW",
         "r": "NONE", "i": 4293153, "l": "0.00000000", "z": "0.00000000",
         "L": "0.00000000", "n": "0", "N": None, "T": 1499405658657,
         "t": -1, "I": 8641984, "w": True, "m": False, "M": False}
    )
    assert event.order_id == 4293153
    assert event.trade_id == -1
    assert event.g == 0
    assert event.w is False
    assert event.asset_commisioned is None


def test_aggr_trades_and_book_ticker():
    trade = AggrTradesEvent.from_dict(
        {"e": "aggTrade", "E": 123456789, "s": "BNBBTC", "a": 12345,
         "p": "0.001", "q": "100", "f": 100, "l": 105, "T": 123456785,
         "m": True, "M": True}
    )
    assert trade.aggregated_trade_id == 12345
    assert trade.is_buyer_maker is True
    ticker = BookTickerEvent.from_dict(
        {"u": 400900217, "s": "BNBUSDT", "b": "25.35190000", "B": "31.21000000",
         "a": "25.36520000", "A": "40.66000000"}
    )
    assert ticker.update_id == 400900217
    assert ticker.best_ask_qty == "40.66000000"


def test_user_data_stream_expired_event():
    event = UserDataStreamExpiredEvent.from_json(
        '{"e": "listenKeyExpired", "E": 1576653824250}'
    )
    assert event == UserDataStreamExpiredEvent(
        event_type="listenKeyExpired", event_time=1576653824250
    )


def test_missing_field_raises():
    with pytest.raises(ModelError):
        UserDataStreamExpiredEvent.from_dict({"e": "listenKeyExpired"})


def test_negative_unsigned_rejected():
    with pytest.raises(ModelError):
        UserDataStreamExpiredEvent.from_dict({"e": "x", "E": -1})