"""Order requests for the futures trading endpoints."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal

from binance_trop.futures_types import (
    OrderSide,
    OrderType,
    PositionSide,
    TimeInForce,
    WorkingType,
)
from binance_trop.util import build_signed_request


def _format_float(value: float) -> str:
    """Write a float the way the exchange expects: shortest form, no exponent."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


def _format_bool(value: bool) -> str:
    return "TRUE" if value else "FALSE"


@dataclass
class CustomOrderRequest:
    """A futures order with every optional setting open to the caller."""

    symbol: str
    side: OrderSide
    order_type: OrderType
    position_side: PositionSide | None = None
    time_in_force: TimeInForce | None = None
    qty: float | None = None
    reduce_only: bool | None = None
    price: float | None = None
    stop_price: float | None = None
    close_position: bool | None = None
    activation_price: float | None = None
    callback_rate: float | None = None
    working_type: WorkingType | None = None
    price_protect: float | None = None

    def to_parameters(self) -> dict[str, str]:
        """Return the query parameters for this order."""
        parameters: dict[str, str] = {
            "symbol": self.symbol,
            "side": str(self.side),
            "type": str(self.order_type),
        }
        if self.position_side is not None:
            parameters["positionSide"] = str(self.position_side)
        if self.time_in_force is not None:
            parameters["timeInForce"] = str(self.time_in_force)
        if self.qty is not None:
            parameters["quantity"] = _format_float(self.qty)
        if self.reduce_only is not None:
            parameters["reduceOnly"] = _format_bool(self.reduce_only)
        if self.price is not None:
            parameters["price"] = _format_float(self.price)
        if self.stop_price is not None:
            parameters["stopPrice"] = _format_float(self.stop_price)
        if self.close_position is not None:
            parameters["closePosition"] = _format_bool(self.close_position)
        if self.activation_price is not None:
            parameters["activationPrice"] = _format_float(self.activation_price)
        if self.callback_rate is not None:
            parameters["callbackRate"] = _format_float(self.callback_rate)
        if self.working_type is not None:
            parameters["workingType"] = str(self.working_type)
        if self.price_protect is not None:
            parameters["priceProtect"] = _format_float(self.price_protect).upper()
        return parameters


def limit_order(
    symbol: str,
    side: OrderSide,
    qty: float,
    price: float,
    time_in_force: TimeInForce,
) -> CustomOrderRequest:
    """A LIMIT order for `qty` at `price`."""
    return CustomOrderRequest(
        symbol=symbol,
        side=side,
        order_type=OrderType.LIMIT,
        time_in_force=time_in_force,
        qty=float(qty),
        price=float(price),
    )


def market_order(symbol: str, side: OrderSide, qty: float) -> CustomOrderRequest:
    """A MARKET order for `qty`."""
    return CustomOrderRequest(
        symbol=symbol,
        side=side,
        order_type=OrderType.MARKET,
        qty=float(qty),
    )


def stop_market_close_order(
    symbol: str, side: OrderSide, stop_price: float
) -> CustomOrderRequest:
    """A STOP_MARKET order that closes the whole position at `stop_price`."""
    return CustomOrderRequest(
        symbol=symbol,
        side=side,
        order_type=OrderType.STOP_MARKET,
        stop_price=float(stop_price),
        close_position=True,
    )


def signed_order_request(order: CustomOrderRequest, recv_window: int) -> str:
    """Return the timestamped query string that places `order`."""
    return build_signed_request(order.to_parameters(), recv_window)