"""Typed records for the events pushed over the exchange's streams."""

from __future__ import annotations

from dataclasses import field
from typing import Any, Callable

from binance_trop.model import (
    Asks,
    Bids,
    Model,
    ModelError,
    _boolean,
    _f,
    _I64,
    _list_of,
    _model,
    _record,
    _string,
    _U64,
    parse_string_or_float,
)


def _price_level(cls: type[Model]) -> Callable[[Any], Any]:
    """Read a book level sent either as [price, qty] or as an object."""

    def parse(value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            if len(value) != 2:
                raise ModelError(
                    f"expected 2 elements for a price level, got {len(value)}"
                )
            price, qty = value
            return cls(
                price=parse_string_or_float(price),
                qty=parse_string_or_float(qty),
            )
        return cls.from_dict(value)

    return parse


@_record
class UserDataStreamExpiredEvent(Model):
    event_type: str = _f(_string, "e")
    event_time: int = _f(_U64, "E")


@_record
class EventBalance(Model):
    asset: str = _f(_string, "a")
    wallet_balance: str = _f(_string, "wb")
    cross_wallet_balance: str = _f(_string, "cw")
    balance_change: str = _f(_string, "bc")


@_record
class EventPosition(Model):
    symbol: str = _f(_string, "s")
    position_amount: str = _f(_string, "pa")
    entry_price: str = _f(_string, "ep")
    accumulated_realized: str = _f(_string, "cr")
    unrealized_pnl: str = _f(_string, "up")
    margin_type: str = _f(_string, "mt")
    isolated_wallet: str = _f(_string, "iw")
    position_side: str = _f(_string, "ps")


@_record
class AccountUpdateDataEvent(Model):
    reason: str = _f(_string, "m")
    balances: list[EventBalance] = _f(_list_of(_model(EventBalance)), "B")
    positions: list[EventPosition] = _f(_list_of(_model(EventPosition)), "P")


@_record
class AccountUpdateEvent(Model):
    event_type: str = _f(_string, "e")
    event_time: int = _f(_U64, "E")
    data: AccountUpdateDataEvent = _f(_model(AccountUpdateDataEvent), "a")


@_record
class BalanceUpdateEvent(Model):
    balance: list[EventBalance] = _f(_list_of(_model(EventBalance)), "B")
    event_type: str = _f(_string, "e")
    event_time: int = _f(_U64, "E")
    last_account_update_time: int = _f(_U64, "u")


@_record
class OrderTradeEvent(Model):
    event_type: str = _f(_string, "e")
    event_time: int = _f(_U64, "E")
    symbol: str = _f(_string, "s")
    new_client_order_id: str = _f(_string, "c")
    side: str = _f(_string, "S")
    order_type: str = _f(_string, "o")
    time_in_force: str = _f(_string, "f")
    qty: str = _f(_string, "q")
    price: str = _f(_string, "p")
    p_ignore: str = field(default="")
    f_ignore: str = field(default="")
    g: int = field(default=0)
    c_ignore: str | None = field(default=None)
    execution_type: str = _f(_string, "x")
    order_status: str = _f(_string, "X")
    order_reject_reason: str = _f(_string, "r")
    order_id: int = _f(_U64, "i")
    qty_last_filled_trade: str = _f(_string, "l")
    accumulated_qty_filled_trades: str = _f(_string, "z")
    price_last_filled_trade: str = _f(_string, "L")
    commission: str = _f(_string, "n")
    asset_commisioned: str | None = field(default=None)
    trade_order_time: int = _f(_U64, "T")
    trade_id: int = _f(_I64, "t")
    i_ignore: int = field(default=0)
    w: bool = field(default=False)
    is_buyer_maker: bool = _f(_boolean, "m")
    m_ignore: bool = field(default=False)


@_record
class AggrTradesEvent(Model):
    """Trade information aggregated for a single taker order."""

    event_type: str = _f(_string, "e")
    event_time: int = _f(_U64, "E")
    symbol: str = _f(_string, "s")
    aggregated_trade_id: int = _f(_U64, "a")
    price: str = _f(_string, "p")
    qty: str = _f(_string, "q")
    first_break_trade_id: int = _f(_U64, "f")
    last_break_trade_id: int = _f(_U64, "l")
    trade_order_time: int = _f(_U64, "T")
    is_buyer_maker: bool = _f(_boolean, "m")
    m_ignore: bool = field(default=False)


@_record
class TradeEvent(Model):
    """A raw trade with a unique buyer and seller."""

    event_type: str = _f(_string, "e")
    event_time: int = _f(_U64, "E")
    symbol: str = _f(_string, "s")
    trade_id: int = _f(_U64, "t")
    price: str = _f(_string, "p")
    qty: str = _f(_string, "q")
    buyer_order_id: int = _f(_U64, "b")
    seller_order_id: int = _f(_U64, "a")
    trade_order_time: int = _f(_U64, "T")
    is_buyer_maker: bool = _f(_boolean, "m")
    m_ignore: bool = field(default=False)


@_record
class IndexPriceEvent(Model):
    event_type: str = _f(_string, "e")
    event_time: int = _f(_U64, "E")
    pair: str = _f(_string, "i")
    price: str = _f(_string, "p")


@_record
class MarkPriceEvent(Model):
    event_time: int = _f(_U64, "E")
    estimate_settle_price: str = _f(_string, "P")
    next_funding_time: int = _f(_U64, "T")
    event_type: str = _f(_string, "e")
    index_price: str | None = _f(_string, "i", optional=True)
    mark_price: str = _f(_string, "p")
    funding_rate: str = _f(_string, "r")
    symbol: str = _f(_string, "s")


@_record
class LiquidationOrder(Model):
    symbol: str = _f(_string, "s")
    side: str = _f(_string, "S")
    order_type: str = _f(_string, "o")
    time_in_force: str = _f(_string, "f")
    original_quantity: str = _f(_string, "q")
    price: str = _f(_string, "p")
    average_price: str = _f(_string, "ap")
    order_status: str = _f(_string, "X")
    order_last_filled_quantity: str = _f(_string, "l")
    order_filled_accumulated_quantity: str = _f(_string, "z")
    order_trade_time: int = _f(_U64, "T")


@_record
class LiquidationEvent(Model):
    event_type: str = _f(_string, "e")
    event_time: int = _f(_U64, "E")
    liquidation_order: LiquidationOrder = _f(_model(LiquidationOrder), "o")


@_record
class BookTickerEvent(Model):
    update_id: int = _f(_U64, "u")
    symbol: str = _f(_string, "s")
    best_bid: str = _f(_string, "b")
    best_bid_qty: str = _f(_string, "B")
    best_ask: str = _f(_string, "a")
    best_ask_qty: str = _f(_string, "A")


@_record
class DayTickerEvent(Model):
    event_type: str = _f(_string, "e")
    event_time: int = _f(_U64, "E")
    symbol: str = _f(_string, "s")
    price_change: str = _f(_string, "p")
    price_change_percent: str = _f(_string, "P")
    average_price: str = _f(_string, "w")
    prev_close: str = _f(_string, "x")
    current_close: str = _f(_string, "c")
    current_close_qty: str = _f(_string, "Q")
    best_bid: str = _f(_string, "b")
    best_bid_qty: str = _f(_string, "B")
    best_ask: str = _f(_string, "a")
    best_ask_qty: str = _f(_string, "A")
    open: str = _f(_string, "o")
    high: str = _f(_string, "h")
    low: str = _f(_string, "l")
    volume: str = _f(_string, "v")
    quote_volume: str = _f(_string, "q")
    open_time: int = _f(_U64, "O")
    close_time: int = _f(_U64, "C")
    first_trade_id: int = _f(_I64, "F")
    last_trade_id: int = _f(_I64, "L")
    num_trades: int = _f(_U64, "n")


@_record
class WindowTickerEvent(Model):
    event_type: str = _f(_string, "e")
    event_time: int = _f(_U64, "E")
    symbol: str = _f(_string, "s")
    price_change: str = _f(_string, "p")
    price_change_percent: str = _f(_string, "P")
    open: str = _f(_string, "o")
    high: str = _f(_string, "h")
    low: str = _f(_string, "l")
    current_close: str = _f(_string, "c")
    average_price: str = _f(_string, "w")
    volume: str = _f(_string, "v")
    quote_volume: str = _f(_string, "q")
    open_time: int = _f(_U64, "O")
    close_time: int = _f(_U64, "C")
    first_trade_id: int = _f(_I64, "F")
    last_trade_id: int = _f(_I64, "L")
    num_trades: int = _f(_U64, "n")


@_record
class MiniTickerEvent(Model):
    event_type: str = _f(_string, "e")
    event_time: int = _f(_U64, "E")
    symbol: str = _f(_string, "s")
    close: str = _f(_string, "c")
    open: str = _f(_string, "o")
    high: str = _f(_string, "h")
    low: str = _f(_string, "l")
    volume: str = _f(_string, "v")
    quote_volume: str = _f(_string, "q")


@_record
class Kline(Model):
    open_time: int = _f(_I64, "t")
    close_time: int = _f(_I64, "T")
    symbol: str = _f(_string, "s")
    interval: str = _f(_string, "i")
    first_trade_id: int = _f(_I64, "f")
    last_trade_id: int = _f(_I64, "L")
    open: str = _f(_string, "o")
    close: str = _f(_string, "c")
    high: str = _f(_string, "h")
    low: str = _f(_string, "l")
    volume: str = _f(_string, "v")
    number_of_trades: int = _f(_I64, "n")
    is_final_bar: bool = _f(_boolean, "x")
    quote_asset_volume: str = _f(_string, "q")
    taker_buy_base_asset_volume: str = _f(_string, "V")
    taker_buy_quote_asset_volume: str = _f(_string, "Q")
    ignore_me: str = field(default="")


@_record
class ContinuousKline(Model):
    start_time: int = _f(_I64, "t")
    end_time: int = _f(_I64, "T")
    interval: str = _f(_string, "i")
    first_trade_id: int = _f(_I64, "f")
    last_trade_id: int = _f(_I64, "L")
    open: str = _f(_string, "o")
    close: str = _f(_string, "c")
    high: str = _f(_string, "h")
    low: str = _f(_string, "l")
    volume: str = _f(_string, "v")
    number_of_trades: int = _f(_I64, "n")
    is_final_bar: bool = _f(_boolean, "x")
    quote_volume: str = _f(_string, "q")
    active_buy_volume: str = _f(_string, "V")
    active_volume_buy_quote: str = _f(_string, "Q")
    ignore_me: str = field(default="")


@_record
class IndexKline(Model):
    start_time: int = _f(_I64, "t")
    end_time: int = _f(_I64, "T")
    ignore_me: str = field(default="")
    interval: str = _f(_string, "i")
    first_trade_id: int = _f(_I64, "f")
    last_trade_id: int = _f(_I64, "L")
    open: str = _f(_string, "o")
    close: str = _f(_string, "c")
    high: str = _f(_string, "h")
    low: str = _f(_string, "l")
    volume: str = _f(_string, "v")
    number_of_trades: int = _f(_I64, "n")
    is_final_bar: bool = _f(_boolean, "x")
    ignore_me2: str = field(default="")
    ignore_me3: str = field(default="")
    ignore_me4: str = field(default="")
    ignore_me5: str = field(default="")


@_record
class KlineEvent(Model):
    event_type: str = _f(_string, "e")
    event_time: int = _f(_U64, "E")
    symbol: str = _f(_string, "s")
    kline: Kline = _f(_model(Kline), "k")


@_record
class ContinuousKlineEvent(Model):
    event_type: str = _f(_string, "e")
    event_time: int = _f(_U64, "E")
    pair: str = _f(_string, "ps")
    contract_type: str = _f(_string, "ct")
    kline: ContinuousKline = _f(_model(ContinuousKline), "k")


@_record
class IndexKlineEvent(Model):
    event_type: str = _f(_string, "e")
    event_time: int = _f(_U64, "E")
    pair: str = _f(_string, "ps")
    kline: IndexKline = _f(_model(IndexKline), "k")


@_record
class DepthOrderBookEvent(Model):
    event_type: str = _f(_string, "e")
    event_time: int = _f(_U64, "E")
    symbol: str = _f(_string, "s")
    first_update_id: int = _f(_U64, "U")
    final_update_id: int = _f(_U64, "u")
    previous_final_update_id: int | None = _f(_U64, "pu", optional=True)
    bids: list[Bids] = _f(_list_of(_price_level(Bids)), "b")
    asks: list[Asks] = _f(_list_of(_price_level(Asks)), "a")