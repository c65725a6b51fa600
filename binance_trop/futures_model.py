"""Typed records for the REST and stream payloads of the futures API."""

from __future__ import annotations

from dataclasses import field

from binance_trop.events import _price_level
from binance_trop.model import (
    Asks,
    Bids,
    KlineSummary,
    Model,
    RateLimit,
    ServerTime,
    SymbolPrice,
    Tickers,
    _boolean,
    _f,
    _I64,
    _integer,
    _list_of,
    _model,
    _record,
    _string,
    _U16,
    _U64,
    _U8,
    parse_filter,
    parse_optional_string_or_float,
    parse_string_or_bool,
    parse_string_or_float,
)

__all__ = [
    "AccountBalance",
    "AccountInformation",
    "AggTrade",
    "Asks",
    "Bids",
    "CanceledOrder",
    "ChangeLeverageResponse",
    "ExchangeInformation",
    "FuturesAsset",
    "FuturesPosition",
    "Income",
    "KlineSummary",
    "LiquidationOrder",
    "MarkPrice",
    "OpenInterest",
    "OpenInterestHist",
    "Order",
    "OrderBook",
    "OrderTradeEvent",
    "OrderUpdate",
    "PositionRisk",
    "PriceStats",
    "RateLimit",
    "ServerTime",
    "Symbol",
    "SymbolPrice",
    "Tickers",
    "Trade",
    "TradeHistory",
    "Transaction",
]

_U128 = _integer(0, 2**128 - 1)
_I32 = _integer(-(2**31), 2**31 - 1)
_float = parse_string_or_float
_strbool = parse_string_or_bool


def _opt_float(key: str | None = None):
    return _f(parse_optional_string_or_float, key, default=None)


@_record
class Symbol(Model):
    symbol: str = _f(_string)
    status: str = _f(_string)
    maint_margin_percent: str = _f(_string)
    required_margin_percent: str = _f(_string)
    base_asset: str = _f(_string)
    quote_asset: str = _f(_string)
    onboard_date: int = _f(_U128)
    price_precision: int = _f(_U16)
    quantity_precision: int = _f(_U16)
    base_asset_precision: int = _f(_U64)
    quote_precision: int = _f(_U64)
    filters: list[Model] = _f(_list_of(parse_filter))
    order_types: list[str] = _f(_list_of(_string))
    time_in_force: list[str] = _f(_list_of(_string))


@_record
class ExchangeInformation(Model):
    timezone: str = _f(_string)
    server_time: int = _f(_U64)
    rate_limits: list[RateLimit] = _f(_list_of(_model(RateLimit)))
    exchange_filters: list[str] = _f(_list_of(_string))
    symbols: list[Symbol] = _f(_list_of(_model(Symbol)))


@_record
class OrderBook(Model):
    last_update_id: int = _f(_U64)
    event_time: int = _f(_U64, "E")
    trade_order_time: int = _f(_U64, "T")
    bids: list[Bids] = _f(_list_of(_price_level(Bids)))
    asks: list[Asks] = _f(_list_of(_price_level(Asks)))


@_record
class PriceStats(Model):
    symbol: str = _f(_string)
    price_change: str = _f(_string)
    price_change_percent: str = _f(_string)
    weighted_avg_price: str = _f(_string)
    last_price: float = _f(_float)
    open_price: float = _f(_float)
    high_price: float = _f(_float)
    low_price: float = _f(_float)
    volume: float = _f(_float)
    quote_volume: float = _f(_float)
    last_qty: float = _f(_float)
    open_time: int = _f(_U64)
    close_time: int = _f(_U64)
    first_id: int = _f(_U64)
    last_id: int = _f(_U64)
    count: int = _f(_U64)


@_record
class TradeHistory(Model):
    buyer: bool = _f(_boolean)
    commission: float = _f(_float)
    commission_asset: str = _f(_string)
    id: int = _f(_U64)
    maker: bool = _f(_boolean)
    order_id: int = _f(_U64)
    price: float = _f(_float)
    qty: float = _f(_float)
    quote_qty: float = _f(_float)
    realized_pnl: float = _f(_float)
    side: str = _f(_string)
    position_side: str = _f(_string)
    symbol: str = _f(_string)
    time: int = _f(_U64)


@_record
class Trade(Model):
    id: int = _f(_U64)
    is_buyer_maker: bool = _f(_boolean)
    price: float = _f(_float)
    qty: float = _f(_float)
    quote_qty: float = _f(_float)
    time: int = _f(_U64)


@_record
class AggTrade(Model):
    time: int = _f(_U64, "T")
    agg_id: int = _f(_U64, "a")
    first_id: int = _f(_U64, "f")
    last_id: int = _f(_U64, "l")
    maker: bool = _f(_boolean, "m")
    price: float = _f(_float, "p")
    qty: float = _f(_float, "q")


@_record
class MarkPrice(Model):
    symbol: str = _f(_string)
    mark_price: float = _f(_float)
    last_funding_rate: float = _f(_float)
    next_funding_time: int = _f(_U64)
    time: int = _f(_U64)


@_record
class LiquidationOrder(Model):
    average_price: float = _f(_float)
    executed_qty: float = _f(_float)
    orig_qty: float = _f(_float)
    price: float = _f(_float)
    side: str = _f(_string)
    status: str = _f(_string)
    symbol: str = _f(_string)
    time: int = _f(_U64)
    time_in_force: str = _f(_string)
    order_type: str = _f(_string, "type")


@_record
class OpenInterest(Model):
    open_interest: float = _f(_float)
    symbol: str = _f(_string)


@_record
class OpenInterestHist(Model):
    symbol: str = _f(_string)
    sum_open_interest: str = _f(_string)
    sum_open_interest_value: str = _f(_string)
    timestamp: int = _f(_U64)


@_record
class Order(Model):
    client_order_id: str = _f(_string)
    cum_qty: float = _f(_float, default=0.0)
    cum_quote: float = _f(_float)
    executed_qty: float = _f(_float)
    order_id: int = _f(_U64)
    avg_price: float = _f(_float)
    orig_qty: float = _f(_float)
    price: float = _f(_float)
    side: str = _f(_string)
    reduce_only: bool = _f(_boolean)
    position_side: str = _f(_string)
    status: str = _f(_string)
    stop_price: float = _f(_float, default=0.0)
    close_position: bool = _f(_boolean)
    symbol: str = _f(_string)
    time_in_force: str = _f(_string)
    order_type: str = _f(_string, "type")
    orig_type: str = _f(_string)
    activation_price: float = _f(_float, default=0.0)
    price_rate: float = _f(_float, default=0.0)
    update_time: int = _f(_U64)
    working_type: str = _f(_string)
    price_protect: bool = _f(_boolean)


@_record
class Transaction(Model):
    client_order_id: str = _f(_string)
    cum_qty: float = _f(_float)
    cum_quote: float = _f(_float)
    executed_qty: float = _f(_float)
    order_id: int = _f(_U64)
    avg_price: float = _f(_float)
    orig_qty: float = _f(_float)
    reduce_only: bool = _f(_boolean)
    side: str = _f(_string)
    position_side: str = _f(_string)
    status: str = _f(_string)
    stop_price: float = _f(_float)
    close_position: bool = _f(_boolean)
    symbol: str = _f(_string)
    time_in_force: str = _f(_string)
    type_name: str = _f(_string, "type")
    orig_type: str = _f(_string)
    activate_price: float | None = _opt_float()
    price_rate: float | None = _opt_float()
    update_time: int = _f(_U64)
    working_type: str = _f(_string)
    price_protect: bool = _f(_boolean)


@_record
class CanceledOrder(Model):
    client_order_id: str = _f(_string)
    cum_qty: float = _f(_float)
    cum_quote: float = _f(_float)
    executed_qty: float = _f(_float)
    order_id: int = _f(_U64)
    orig_qty: float = _f(_float)
    orig_type: str = _f(_string)
    price: float = _f(_float)
    reduce_only: bool = _f(_boolean)
    side: str = _f(_string)
    position_side: str = _f(_string)
    status: str = _f(_string)
    stop_price: float = _f(_float)
    close_position: bool = _f(_boolean)
    symbol: str = _f(_string)
    time_in_force: str = _f(_string)
    type_name: str = _f(_string, "type")
    activate_price: float | None = _opt_float()
    price_rate: float | None = _opt_float()
    update_time: int = _f(_U64)
    working_type: str = _f(_string)
    price_protect: bool = _f(_boolean)


@_record
class PositionRisk(Model):
    entry_price: float = _f(_float)
    margin_type: str = _f(_string)
    is_auto_add_margin: bool = _f(_strbool)
    isolated_margin: float = _f(_float)
    leverage: str = _f(_string)
    liquidation_price: float = _f(_float)
    mark_price: float = _f(_float)
    max_notional_value: float = _f(_float)
    position_amount: float = _f(_float, "positionAmt")
    symbol: str = _f(_string)
    unrealized_profit: float = _f(_float, "unRealizedProfit")
    position_side: str = _f(_string)
    notional: float = _f(_float)
    isolated_wallet: float = _f(_float)
    update_time: int = _f(_U64)


@_record
class FuturesAsset(Model):
    asset: str = _f(_string)
    wallet_balance: float = _f(_float)
    unrealized_profit: float = _f(_float)
    margin_balance: float = _f(_float)
    maint_margin: float = _f(_float)
    initial_margin: float = _f(_float)
    position_initial_margin: float = _f(_float)
    open_order_initial_margin: float = _f(_float)
    max_withdraw_amount: float = _f(_float)
    cross_wallet_balance: float = _f(_float)
    cross_un_pnl: float = _f(_float)
    available_balance: float = _f(_float)
    margin_available: bool = _f(_strbool)
    update_time: int = _f(_U64)


@_record
class FuturesPosition(Model):
    symbol: str = _f(_string)
    initial_margin: float = _f(_float)
    maint_margin: float = _f(_float)
    unrealized_profit: float = _f(_float)
    position_initial_margin: float = _f(_float)
    open_order_initial_margin: float = _f(_float)
    leverage: str = _f(_string)
    isolated: bool = _f(_strbool)
    entry_price: float = _f(_float)
    max_notional: float = _f(_float)
    position_side: str = _f(_string)
    position_amount: float = _f(_float, "positionAmt")
    notional: float = _f(_float)
    isolated_wallet: float = _f(_float)
    update_time: int = _f(_U64)
    bid_notional: float = _f(_float)
    ask_notional: float = _f(_float)


@_record
class AccountInformation(Model):
    fee_tier: float = _f(_float)
    can_trade: bool = _f(_strbool)
    can_deposit: bool = _f(_strbool)
    can_withdraw: bool = _f(_strbool)
    update_time: float = _f(_float)
    total_initial_margin: float = _f(_float)
    total_maint_margin: float = _f(_float)
    total_wallet_balance: float = _f(_float)
    total_unrealized_profit: float = _f(_float)
    total_margin_balance: float = _f(_float)
    total_position_initial_margin: float = _f(_float)
    total_open_order_initial_margin: float = _f(_float)
    total_cross_wallet_balance: float = _f(_float)
    total_cross_un_pnl: float = _f(_float)
    available_balance: float = _f(_float)
    max_withdraw_amount: float = _f(_float)
    assets: list[FuturesAsset] = _f(_list_of(_model(FuturesAsset)))
    positions: list[FuturesPosition] = _f(_list_of(_model(FuturesPosition)))


@_record
class AccountBalance(Model):
    account_alias: str = _f(_string)
    asset: str = _f(_string)
    balance: float = _f(_float)
    cross_wallet_balance: float = _f(_float)
    cross_unrealized_pnl: float = _f(_float, "crossUnPnl")
    available_balance: float = _f(_float)
    max_withdraw_amount: float = _f(_float)
    margin_available: bool = _f(_boolean)
    update_time: int = _f(_U64)


@_record
class ChangeLeverageResponse(Model):
    leverage: int = _f(_U8)
    max_notional_value: float = _f(_float)
    symbol: str = _f(_string)


@_record
class OrderUpdate(Model):
    symbol: str = _f(_string, "s")
    new_client_order_id: str = _f(_string, "c")
    side: str = _f(_string, "S")
    order_type: str = _f(_string, "o")
    time_in_force: str = _f(_string, "f")
    qty: str = _f(_string, "q")
    price: str = _f(_string, "p")
    average_price: str = _f(_string, "ap")
    stop_price: str = _f(_string, "sp")
    execution_type: str = _f(_string, "x")
    order_status: str = _f(_string, "X")
    order_id: int = _f(_U64, "i")
    qty_last_filled_trade: str = _f(_string, "l")
    accumulated_qty_filled_trades: str = _f(_string, "z")
    price_last_filled_trade: str = _f(_string, "L")
    asset_commisioned: str | None = field(default=None)
    commission: str | None = _f(_string, "n", optional=True)
    trade_order_time: int = _f(_U64, "T")
    trade_id: int = _f(_I64, "t")
    bids_notional: str = _f(_string, "b")
    ask_notional: str = _f(_string, "a")
    is_buyer_maker: bool = _f(_boolean, "m")
    is_reduce_only: bool = _f(_boolean, "R")
    stop_price_working_type: str = _f(_string, "wt")
    original_order_type: str = _f(_string, "ot")
    position_side: str = _f(_string, "ps")
    close_all: bool | None = _f(_boolean, "cp", optional=True)
    activation_price: str | None = _f(_string, "AP", optional=True)
    callback_rate: str | None = _f(_string, "cr", optional=True)
    pp_ignore: bool = _f(_boolean, "pP")
    si_ignore: int = _f(_I32, "si")
    ss_ignore: int = _f(_I32, "ss")
    realized_profit: str = _f(_string, "rp")


@_record
class OrderTradeEvent(Model):
    event_type: str = _f(_string, "e")
    event_time: int = _f(_U64, "E")
    transaction_time: int = _f(_U64, "T")
    order: OrderUpdate = _f(_model(OrderUpdate), "o")


@_record
class Income(Model):
    symbol: str = _f(_string)
    income_type: str = _f(_string)
    income: float = _f(_float)
    asset: str = _f(_string)
    info: str = _f(_string)
    time: int = _f(_U64)
    tran_id: int = _f(_U64)
    trade_id: str = _f(_string)