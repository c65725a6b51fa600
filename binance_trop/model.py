"""Typed records for the REST responses of the exchange API."""

from __future__ import annotations

import json
import math
import re
from collections.abc import Callable, Mapping
from dataclasses import MISSING, dataclass, field, fields
from enum import IntEnum
from typing import Any, ClassVar, Generic, TypeVar


class ModelError(ValueError):
    """Raised when a payload does not match the expected shape."""


class KlineValueMissingError(ModelError):
    """Raised when a kline row is shorter than expected."""

    def __init__(self, index: int, name: str) -> None:
        super().__init__(f"missing kline value {name!r} at index {index}")
        self.index = index
        self.name = name


_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def parse_string_or_float(value: Any) -> float:
    """Read a number sent either as a JSON number or as a decimal string."""
    if isinstance(value, str):
        if value == "INF":
            return math.inf
        if not _FLOAT_RE.fullmatch(value):
            raise ModelError(f"invalid float literal {value!r}")
        return float(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    raise ModelError(f"expected a string or a number, got {value!r}")


def parse_optional_string_or_float(value: Any) -> float:
    """Read a value that is present in an optional numeric field.

    A missing field is left as None by the record; a present null is an error.
    """
    return parse_string_or_float(value)


def parse_string_or_bool(value: Any) -> bool:
    """Read a boolean sent either as a JSON boolean or as "true"/"false"."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        if value == "true":
            return True
        if value == "false":
            return False
        raise ModelError(f"invalid boolean literal {value!r}")
    raise ModelError(f"expected a string or a boolean, got {value!r}")


def _integer(low: int, high: int) -> Callable[[Any], int]:
    def parse(value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ModelError(f"expected an integer, got {value!r}")
        if not low <= value <= high:
            raise ModelError(f"integer {value} out of range [{low}, {high}]")
        return value

    return parse


_U8 = _integer(0, 2**8 - 1)
_U16 = _integer(0, 2**16 - 1)
_U32 = _integer(0, 2**32 - 1)
_U64 = _integer(0, 2**64 - 1)
_USIZE = _U64
_I64 = _integer(-(2**63), 2**63 - 1)


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise ModelError(f"expected a string, got {value!r}")
    return value


def _boolean(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ModelError(f"expected a boolean, got {value!r}")
    return value


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ModelError(f"expected a number, got {value!r}")
    return float(value)


def _list_of(parse: Callable[[Any], Any]) -> Callable[[Any], list]:
    def parse_list(value: Any) -> list:
        if not isinstance(value, list):
            raise ModelError(f"expected an array, got {value!r}")
        return [parse(item) for item in value]

    return parse_list


def _string_map(value: Any) -> dict[str, str]:
    if not isinstance(value, Mapping):
        raise ModelError(f"expected an object, got {value!r}")
    return {_string(k): _string(v) for k, v in value.items()}


def _model(cls: type[Model]) -> Callable[[Any], Any]:
    return cls.from_dict


def _f(
    parse: Callable[[Any], Any],
    key: str | None = None,
    *,
    optional: bool = False,
    default: Any = MISSING,
    default_factory: Any = MISSING,
) -> Any:
    """Declare a record field read from `key` with `parse`.

    An optional field may be missing or null and then becomes None.
    """
    if optional and default is MISSING and default_factory is MISSING:
        default = None
    return field(
        default=default,
        default_factory=default_factory,
        metadata={"parse": parse, "key": key, "nullable": optional},
    )


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


class Model:
    """Base for records read from decoded JSON objects."""

    _camel_case: ClassVar[bool] = True

    @classmethod
    def from_dict(cls, data: Any):
        """Build the record from a decoded JSON object; unknown keys are ignored."""
        if not isinstance(data, Mapping):
            raise ModelError(
                f"expected an object for {cls.__name__}, got {type(data).__name__}"
            )
        values: dict[str, Any] = {}
        for spec in fields(cls):  # type: ignore[arg-type]
            meta = spec.metadata
            if "parse" not in meta:
                continue
            key = meta["key"] or (_camel(spec.name) if cls._camel_case else spec.name)
            if key not in data:
                if spec.default is MISSING and spec.default_factory is MISSING:
                    raise ModelError(f"missing field {key!r} in {cls.__name__}")
                continue
            raw = data[key]
            if raw is None and meta["nullable"]:
                values[spec.name] = None
                continue
            try:
                values[spec.name] = meta["parse"](raw)
            except ModelError as exc:
                raise ModelError(
                    f"invalid field {key!r} in {cls.__name__}: {exc}"
                ) from exc
        return cls(**values)

    @classmethod
    def from_json(cls, text: str | bytes):
        """Build the record from JSON text."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ModelError(f"invalid JSON: {exc}") from exc
        return cls.from_dict(data)


_record = dataclass(kw_only=True)


@_record
class ServerTime(Model):
    server_time: int = _f(_U64)


@_record
class RateLimit(Model):
    rate_limit_type: str = _f(_string)
    interval: str = _f(_string)
    interval_num: int = _f(_U16)
    limit: int = _f(_U64)


# --- symbol filters -------------------------------------------------------


@_record
class PriceFilter(Model):
    FILTER_TYPE: ClassVar[str] = "PRICE_FILTER"
    min_price: str = _f(_string)
    max_price: str = _f(_string)
    tick_size: str = _f(_string)


@_record
class PercentPrice(Model):
    FILTER_TYPE: ClassVar[str] = "PERCENT_PRICE"
    multiplier_up: str = _f(_string)
    multiplier_down: str = _f(_string)
    avg_price_mins: float | None = _f(_number, optional=True)


@_record
class PercentPriceBySide(Model):
    FILTER_TYPE: ClassVar[str] = "PERCENT_PRICE_BY_SIDE"
    bid_multiplier_up: str = _f(_string)
    bid_multiplier_down: str = _f(_string)
    ask_multiplier_up: str = _f(_string)
    ask_multiplier_down: str = _f(_string)
    avg_price_mins: float | None = _f(_number, optional=True)


@_record
class LotSize(Model):
    FILTER_TYPE: ClassVar[str] = "LOT_SIZE"
    min_qty: str = _f(_string)
    max_qty: str = _f(_string)
    step_size: str = _f(_string)


@_record
class MinNotional(Model):
    FILTER_TYPE: ClassVar[str] = "MIN_NOTIONAL"
    notional: str | None = _f(_string, optional=True)
    min_notional: str | None = _f(_string, optional=True)
    apply_to_market: bool | None = _f(_boolean, optional=True)
    avg_price_mins: float | None = _f(_number, optional=True)


@_record
class Notional(Model):
    FILTER_TYPE: ClassVar[str] = "NOTIONAL"
    notional: str | None = _f(_string, optional=True)
    min_notional: str | None = _f(_string, optional=True)
    apply_to_market: bool | None = _f(_boolean, optional=True)
    avg_price_mins: float | None = _f(_number, optional=True)


@_record
class IcebergParts(Model):
    FILTER_TYPE: ClassVar[str] = "ICEBERG_PARTS"
    limit: int | None = _f(_U16, optional=True)


@_record
class MaxNumOrders(Model):
    FILTER_TYPE: ClassVar[str] = "MAX_NUM_ORDERS"
    max_num_orders: int | None = _f(_U16, optional=True)


@_record
class MaxNumAlgoOrders(Model):
    FILTER_TYPE: ClassVar[str] = "MAX_NUM_ALGO_ORDERS"
    max_num_algo_orders: int | None = _f(_U16, optional=True)


@_record
class MaxNumIcebergOrders(Model):
    FILTER_TYPE: ClassVar[str] = "MAX_NUM_ICEBERG_ORDERS"
    max_num_iceberg_orders: int = _f(_U16)


@_record
class MaxPosition(Model):
    FILTER_TYPE: ClassVar[str] = "MAX_POSITION"
    max_position: str = _f(_string)


@_record
class MarketLotSize(Model):
    FILTER_TYPE: ClassVar[str] = "MARKET_LOT_SIZE"
    min_qty: str = _f(_string)
    max_qty: str = _f(_string)
    step_size: str = _f(_string)


@_record
class TrailingDelta(Model):
    FILTER_TYPE: ClassVar[str] = "TRAILING_DELTA"
    min_trailing_above_delta: int | None = _f(_U16, optional=True)
    max_trailing_above_delta: int | None = _f(_U16, optional=True)
    min_trailing_below_delta: int | None = _f(_U16, optional=True)
    max_trailing_below_delta: int | None = _f(_U16, optional=True)


_FILTERS: dict[str, type[Model]] = {
    cls.FILTER_TYPE: cls
    for cls in (
        PriceFilter,
        PercentPrice,
        PercentPriceBySide,
        LotSize,
        MinNotional,
        Notional,
        IcebergParts,
        MaxNumOrders,
        MaxNumAlgoOrders,
        MaxNumIcebergOrders,
        MaxPosition,
        MarketLotSize,
        TrailingDelta,
    )
}


def parse_filter(data: Any) -> Model:
    """Build the filter record named by the object's "filterType" tag."""
    if not isinstance(data, Mapping):
        raise ModelError(f"expected an object for a filter, got {data!r}")
    if "filterType" not in data:
        raise ModelError("missing field 'filterType'")
    tag = data["filterType"]
    try:
        cls = _FILTERS[tag]
    except (KeyError, TypeError):
        raise ModelError(f"unknown filter type {tag!r}") from None
    return cls.from_dict(data)


@_record
class Symbol(Model):
    symbol: str = _f(_string)
    status: str = _f(_string)
    base_asset: str = _f(_string)
    base_asset_precision: int = _f(_U64)
    quote_asset: str = _f(_string)
    quote_precision: int = _f(_U64)
    order_types: list[str] = _f(_list_of(_string))
    iceberg_allowed: bool = _f(_boolean)
    is_spot_trading_allowed: bool = _f(_boolean)
    is_margin_trading_allowed: bool = _f(_boolean)
    filters: list[Model] = _f(_list_of(parse_filter))


@_record
class ExchangeInformation(Model):
    timezone: str = _f(_string)
    server_time: int = _f(_U64)
    rate_limits: list[RateLimit] = _f(_list_of(_model(RateLimit)))
    symbols: list[Symbol] = _f(_list_of(_model(Symbol)))


# --- account and orders ---------------------------------------------------


@_record
class Balance(Model):
    asset: str = _f(_string)
    free: str = _f(_string)
    locked: str = _f(_string)


@_record
class AccountInformation(Model):
    maker_commission: float = _f(_number)
    taker_commission: float = _f(_number)
    buyer_commission: float = _f(_number)
    seller_commission: float = _f(_number)
    can_trade: bool = _f(_boolean)
    can_withdraw: bool = _f(_boolean)
    can_deposit: bool = _f(_boolean)
    balances: list[Balance] = _f(_list_of(_model(Balance)))


@_record
class Order(Model):
    symbol: str = _f(_string)
    order_id: int = _f(_U64)
    order_list_id: int = _f(_I64)
    client_order_id: str = _f(_string)
    price: float = _f(parse_string_or_float)
    orig_qty: str = _f(_string)
    executed_qty: str = _f(_string)
    cummulative_quote_qty: str = _f(_string)
    status: str = _f(_string)
    time_in_force: str = _f(_string)
    type_name: str = _f(_string, "type")
    side: str = _f(_string)
    stop_price: float = _f(parse_string_or_float)
    iceberg_qty: str = _f(_string)
    time: int = _f(_U64)
    update_time: int = _f(_U64)
    is_working: bool = _f(_boolean)
    orig_quote_order_qty: str = _f(_string)


@_record
class OrderCanceled(Model):
    symbol: str = _f(_string)
    orig_client_order_id: str | None = _f(_string, optional=True)
    order_id: int | None = _f(_U64, optional=True)
    client_order_id: str | None = _f(_string, optional=True)


class SpotFuturesTransferType(IntEnum):
    """Direction of a transfer between the spot and futures wallets."""

    SPOT_TO_USDT_FUTURES = 1
    USDT_FUTURES_TO_SPOT = 2
    SPOT_TO_COIN_FUTURES = 3
    COIN_FUTURES_TO_SPOT = 4


@_record
class TransactionId(Model):
    tran_id: int = _f(_U64)


@_record
class FillInfo(Model):
    price: float = _f(parse_string_or_float)
    qty: float = _f(parse_string_or_float)
    commission: float = _f(parse_string_or_float)
    commission_asset: str = _f(_string)
    trade_id: int | None = _f(_U64, optional=True)


@_record
class Transaction(Model):
    symbol: str = _f(_string)
    order_id: int = _f(_U64)
    order_list_id: int | None = _f(_I64, optional=True)
    client_order_id: str = _f(_string)
    transact_time: int = _f(_U64)
    price: float = _f(parse_string_or_float)
    orig_qty: float = _f(parse_string_or_float)
    executed_qty: float = _f(parse_string_or_float)
    cummulative_quote_qty: float = _f(parse_string_or_float)
    stop_price: float = _f(parse_string_or_float, default=0.0)
    status: str = _f(_string)
    time_in_force: str = _f(_string)
    type_name: str = _f(_string, "type")
    side: str = _f(_string)
    fills: list[FillInfo] | None = _f(_list_of(_model(FillInfo)), optional=True)


@_record
class TestResponse(Model):
    """Reply to a test order; the API answers with an empty object."""

    __test__: ClassVar[bool] = False


@_record
class Bids(Model):
    _camel_case: ClassVar[bool] = False
    price: float = _f(parse_string_or_float)
    qty: float = _f(parse_string_or_float)


@_record
class Asks(Model):
    _camel_case: ClassVar[bool] = False
    price: float = _f(parse_string_or_float)
    qty: float = _f(parse_string_or_float)


@_record
class OrderBook(Model):
    last_update_id: int = _f(_U64)
    bids: list[Bids] = _f(_list_of(_model(Bids)))
    asks: list[Asks] = _f(_list_of(_model(Asks)))


@_record
class UserDataStream(Model):
    listen_key: str = _f(_string)


@_record
class Success(Model):
    """An empty acknowledgement."""


# --- market data ----------------------------------------------------------


@_record
class SymbolPrice(Model):
    _camel_case: ClassVar[bool] = False
    symbol: str = _f(_string)
    price: float = _f(parse_string_or_float)


@_record
class AveragePrice(Model):
    _camel_case: ClassVar[bool] = False
    mins: int = _f(_U64)
    price: float = _f(parse_string_or_float)


@_record
class Tickers(Model):
    symbol: str = _f(_string)
    bid_price: float = _f(parse_string_or_float)
    bid_qty: float = _f(parse_string_or_float)
    ask_price: float = _f(parse_string_or_float)
    ask_qty: float = _f(parse_string_or_float)


@_record
class TradeHistory(Model):
    id: int = _f(_U64)
    price: float = _f(parse_string_or_float)
    qty: float = _f(parse_string_or_float)
    commission: str = _f(_string)
    commission_asset: str = _f(_string)
    time: int = _f(_U64)
    is_buyer: bool = _f(_boolean)
    is_maker: bool = _f(_boolean)
    is_best_match: bool = _f(_boolean)


@_record
class PriceStats(Model):
    symbol: str = _f(_string)
    price_change: str = _f(_string)
    price_change_percent: str = _f(_string)
    weighted_avg_price: str = _f(_string)
    prev_close_price: float = _f(parse_string_or_float)
    last_price: float = _f(parse_string_or_float)
    bid_price: float = _f(parse_string_or_float)
    ask_price: float = _f(parse_string_or_float)
    open_price: float = _f(parse_string_or_float)
    high_price: float = _f(parse_string_or_float)
    low_price: float = _f(parse_string_or_float)
    volume: float = _f(parse_string_or_float)
    open_time: int = _f(_U64)
    close_time: int = _f(_U64)
    first_id: int = _f(_I64)
    last_id: int = _f(_I64)
    count: int = _f(_U64)


@_record
class AggTrade(Model):
    time: int = _f(_U64, "T")
    agg_id: int = _f(_U64, "a")
    first_id: int = _f(_U64, "f")
    last_id: int = _f(_U64, "l")
    maker: bool = _f(_boolean, "m")
    best_match: bool = _f(_boolean, "M")
    price: float = _f(parse_string_or_float, "p")
    qty: float = _f(parse_string_or_float, "q")


_KLINE_COLUMNS: tuple[tuple[str, Callable[[Any], Any]], ...] = (
    ("open_time", _I64),
    ("open", _string),
    ("high", _string),
    ("low", _string),
    ("close", _string),
    ("volume", _string),
    ("close_time", _I64),
    ("quote_asset_volume", _string),
    ("number_of_trades", _I64),
    ("taker_buy_base_asset_volume", _string),
    ("taker_buy_quote_asset_volume", _string),
)


@_record
class KlineSummary(Model):
    _camel_case: ClassVar[bool] = False
    open_time: int = _f(_I64)
    open: str = _f(_string)
    high: str = _f(_string)
    low: str = _f(_string)
    close: str = _f(_string)
    volume: str = _f(_string)
    close_time: int = _f(_I64)
    quote_asset_volume: str = _f(_string)
    number_of_trades: int = _f(_I64)
    taker_buy_base_asset_volume: str = _f(_string)
    taker_buy_quote_asset_volume: str = _f(_string)

    @classmethod
    def from_row(cls, row: Any) -> KlineSummary:
        """Build a summary from one positional row of the klines endpoint."""
        if not isinstance(row, (list, tuple)):
            raise ModelError(f"expected an array for a kline row, got {row!r}")
        values: dict[str, Any] = {}
        for index, (name, parse) in enumerate(_KLINE_COLUMNS):
            if index >= len(row):
                raise KlineValueMissingError(index, name)
            try:
                values[name] = parse(row[index])
            except ModelError as exc:
                raise ModelError(f"invalid kline value {name!r}: {exc}") from exc
        return cls(**values)


# --- wallet and savings ---------------------------------------------------


@_record
class Network(Model):
    address_regex: str = _f(_string)
    coin: str = _f(_string)
    deposit_desc: str | None = _f(_string, optional=True)
    deposit_enable: bool = _f(_boolean)
    is_default: bool = _f(_boolean)
    memo_regex: str = _f(_string)
    min_confirm: int = _f(_U32)
    name: str = _f(_string)
    network: str = _f(_string)
    reset_address_status: bool = _f(_boolean)
    special_tips: str | None = _f(_string, optional=True)
    un_lock_confirm: int = _f(_U32)
    withdraw_desc: str | None = _f(_string, optional=True)
    withdraw_enable: bool = _f(_boolean)
    withdraw_fee: float = _f(parse_string_or_float)
    withdraw_min: float = _f(parse_string_or_float)
    withdraw_integer_multiple: str | None = _f(_string, optional=True)


@_record
class CoinInfo(Model):
    coin: str = _f(_string)
    deposit_all_enable: bool = _f(_boolean)
    free: float = _f(parse_string_or_float)
    freeze: float = _f(parse_string_or_float)
    ipoable: float = _f(parse_string_or_float)
    ipoing: float = _f(parse_string_or_float)
    is_legal_money: bool = _f(_boolean)
    locked: float = _f(parse_string_or_float)
    name: str = _f(_string)
    network_list: list[Network] = _f(_list_of(_model(Network)))
    storage: float = _f(parse_string_or_float)
    trading: bool = _f(_boolean)
    withdraw_all_enable: bool = _f(_boolean)
    withdrawing: float = _f(parse_string_or_float)


@_record
class AssetDetail(Model):
    min_withdraw_amount: float = _f(parse_string_or_float)
    deposit_status: bool = _f(_boolean)
    withdraw_fee: float = _f(parse_string_or_float)
    withdraw_status: bool = _f(_boolean)
    deposit_tip: str | None = _f(_string, optional=True)


@_record
class DepositAddress(Model):
    _camel_case: ClassVar[bool] = False
    address: str = _f(_string)
    coin: str = _f(_string)
    tag: str = _f(_string)
    url: str = _f(_string)


T = TypeVar("T")


@dataclass
class PaginatedResponse(Generic[T]):
    """A page of rows together with the total row count."""

    data: list[T]
    total: int

    @classmethod
    def parse(cls, data: Any, item_type: type[Model]) -> PaginatedResponse:
        """Build a page whose "rows" are records of `item_type`."""
        if not isinstance(data, Mapping):
            raise ModelError(f"expected an object for a page, got {data!r}")
        for key in ("rows", "total"):
            if key not in data:
                raise ModelError(f"missing field {key!r} in PaginatedResponse")
        rows = _list_of(item_type.from_dict)(data["rows"])
        return cls(data=rows, total=_USIZE(data["total"]))


@_record
class FlexibleProductInfo(Model):
    total_amount: float = _f(parse_string_or_float)
    tier_annual_percentage_rate: dict[str, str] = _f(_string_map, default_factory=dict)
    latest_annual_percentage_rate: float = _f(parse_string_or_float)
    asset: str = _f(_string)
    can_redeem: bool = _f(_boolean)
    collateral_amount: float = _f(parse_string_or_float)
    product_id: str = _f(_string)
    yesterday_real_time_rewards: float = _f(parse_string_or_float)
    cumulative_bonus_rewards: float = _f(parse_string_or_float)
    cumulative_real_time_rewards: float = _f(parse_string_or_float)
    cumulative_total_rewards: float = _f(parse_string_or_float)
    auto_subscribe: bool = _f(_boolean)
    yesterday_airdrop_percentage_rate: float | None = _f(_number, optional=True)
    air_drop_asset: str | None = _f(_string, optional=True)


def _opt_float(key: str) -> Any:
    # Missing gives None; a present null is rejected like any other bad value.
    return _f(parse_optional_string_or_float, key, default=None)


@_record
class LockedProductInfo(Model):
    position_id: int = _f(_U64)
    parent_position_id: int | None = _f(_U64, optional=True)
    project_id: str = _f(_string)
    asset: str = _f(_string)
    amount: float = _f(parse_string_or_float)
    purchase_time: int = _f(_U64)
    duration: int = _f(_U64)
    accrual_days: int = _f(_U64)
    reward_asset: str = _f(_string)
    apy: float = _f(parse_string_or_float, "APY", default=0.0)
    reward_amt: float = _f(parse_string_or_float, "rewardAmt")
    extra_reward_asset: str | None = _f(_string, optional=True)
    extra_reward_apr: float | None = _opt_float("extraRewardAPR")
    est_extra_reward_amt: float | None = _opt_float("estExtraRewardAmt")
    boost_reward_asset: str | None = _f(_string, optional=True)
    boost_apr: float | None = _opt_float("boostApr")
    total_boost_reward_amt: float | None = _opt_float("totalBoostRewardAmt")
    next_pay: float | None = _opt_float("nextPay")
    next_pay_date: int | None = _f(_U64, optional=True)
    pay_period: int | None = _f(_U64, optional=True)
    redeem_amount_early: float | None = _opt_float("redeemAmountEarly")
    rewards_end_date: int | None = _f(_U64, optional=True)
    deliver_date: int | None = _f(_U64, optional=True)
    redeem_period: int | None = _f(_U64, optional=True)
    redeeming_amt: float | None = _opt_float("redeemingAmt")
    redeem_to: str | None = _f(_string, optional=True)
    partial_amt_deliver_date: int | None = _f(_U64, optional=True)
    can_redeem_early: bool | None = _f(_boolean, optional=True)
    can_fast_redemption: bool | None = _f(_boolean, optional=True)
    auto_subscribe: bool | None = _f(_boolean, optional=True)
    order_type: str = _f(_string, "type")
    status: str = _f(_string)
    can_re_stake: bool | None = _f(_boolean, optional=True)