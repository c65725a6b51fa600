"""Enumerations and request records used by the futures trading endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class _WireEnum(str, Enum):
    """An enumeration whose members print as the value sent on the wire."""

    def __str__(self) -> str:
        return self.value


class OrderSide(_WireEnum):
    BUY = "BUY"
    SELL = "SELL"


class ContractType(_WireEnum):
    PERPETUAL = "PERPETUAL"
    CURRENT_MONTH = "CURRENT_MONTH"
    NEXT_MONTH = "NEXT_MONTH"
    CURRENT_QUARTER = "CURRENT_QUARTER"
    NEXT_QUARTER = "NEXT_QUARTER"


class PositionSide(_WireEnum):
    BOTH = "BOTH"
    LONG = "LONG"
    SHORT = "SHORT"


class OrderType(_WireEnum):
    LIMIT = "LIMIT"
    MARKET = "MARKET"
    STOP = "STOP"
    STOP_MARKET = "STOP_MARKET"
    TAKE_PROFIT = "TAKE_PROFIT"
    TAKE_PROFIT_MARKET = "TAKE_PROFIT_MARKET"
    TRAILING_STOP_MARKET = "TRAILING_STOP_MARKET"


class WorkingType(_WireEnum):
    MARK_PRICE = "MARK_PRICE"
    CONTRACT_PRICE = "CONTRACT_PRICE"


class TimeInForce(_WireEnum):
    GTC = "GTC"
    IOC = "IOC"
    FOK = "FOK"
    GTX = "GTX"


class IncomeType(_WireEnum):
    TRANSFER = "TRANSFER"
    WELCOME_BONUS = "WELCOME_BONUS"
    REALIZED_PNL = "REALIZED_PNL"
    FUNDING_FEE = "FUNDING_FEE"
    COMMISSION = "COMMISSION"
    INSURANCE_CLEAR = "INSURANCE_CLEAR"
    REFERRAL_KICKBACK = "REFERRAL_KICKBACK"
    COMMISSION_REBATE = "COMMISSION_REBATE"
    API_REBATE = "API_REBATE"
    CONTEST_REWARD = "CONTEST_REWARD"
    CROSS_COLLATERAL_TRANSFER = "CROSS_COLLATERAL_TRANSFER"
    OPTIONS_PREMIUM_FEE = "OPTIONS_PREMIUM_FEE"
    OPTIONS_SETTLE_PROFIT = "OPTIONS_SETTLE_PROFIT"
    INTERNAL_TRANSFER = "INTERNAL_TRANSFER"
    AUTO_EXCHANGE = "AUTO_EXCHANGE"
    DELIVERED_SETTELMENT = "DELIVERED_SETTELMENT"
    COIN_SWAP_DEPOSIT = "COIN_SWAP_DEPOSIT"
    COIN_SWAP_WITHDRAW = "COIN_SWAP_WITHDRAW"
    POSITION_LIMIT_INCREASE_FEE = "POSITION_LIMIT_INCREASE_FEE"


@dataclass
class IncomeRequest:
    """Filters for the income history query; every filter is optional."""

    symbol: str | None = None
    income_type: IncomeType | None = None
    start_time: int | None = None
    end_time: int | None = None
    limit: int | None = None

    def to_parameters(self) -> dict[str, str]:
        """Return the query parameters for the filters that are set."""
        parameters: dict[str, str] = {}
        if self.symbol is not None:
            parameters["symbol"] = self.symbol
        if self.income_type is not None:
            parameters["incomeType"] = str(self.income_type)
        if self.start_time is not None:
            parameters["startTime"] = str(self.start_time)
        if self.end_time is not None:
            parameters["endTime"] = str(self.end_time)
        if self.limit is not None:
            parameters["limit"] = str(self.limit)
        return parameters