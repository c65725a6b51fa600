"""Client for the spot market and user data streams."""

from __future__ import annotations

import json
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

import websocket

from binance_trop import events
from binance_trop.events import _price_level
from binance_trop.model import Asks, Bids, Model, ModelError, OrderBook, _list_of

_BASE_URL = "wss://stream.binance.com"


class WebsocketError(Exception):
    """Raised when a stream cannot be opened, read or closed."""


class EventKind(Enum):
    ACCOUNT_UPDATE = "AccountUpdate"
    BALANCE_UPDATE = "BalanceUpdate"
    ORDER_TRADE = "OrderTrade"
    AGGR_TRADES = "AggrTrades"
    TRADE = "Trade"
    ORDER_BOOK = "OrderBook"
    DAY_TICKER = "DayTicker"
    DAY_TICKER_ALL = "DayTickerAll"
    WINDOW_TICKER = "WindowTicker"
    WINDOW_TICKER_ALL = "WindowTickerAll"
    KLINE = "Kline"
    DEPTH_ORDER_BOOK = "DepthOrderBook"
    BOOK_TICKER = "BookTicker"


@dataclass(frozen=True)
class WebsocketEvent:
    """A decoded stream message and the kind it was recognised as."""

    kind: EventKind
    data: Any


def stream_url(subscription: str) -> str:
    """Return the address of a single raw stream."""
    return f"{_BASE_URL}/ws/{subscription}"


def multi_stream_url(subscriptions: list[str]) -> str:
    """Return the address of a combined stream over several subscriptions."""
    return f"{_BASE_URL}/stream?streams={'/'.join(subscriptions)}"


def _order_book(data: Any) -> OrderBook:
    if not isinstance(data, Mapping):
        raise ModelError(f"expected an object for OrderBook, got {data!r}")
    levels: dict[str, Any] = {}
    for key, cls in (("bids", Bids), ("asks", Asks)):
        if key not in data:
            raise ModelError(f"missing field {key!r} in OrderBook")
        levels[key] = _list_of(_price_level(cls))(data[key])
    head = OrderBook.from_dict({**data, "bids": [], "asks": []})
    return OrderBook(last_update_id=head.last_update_id, **levels)


def _record(cls: type[Model]) -> Callable[[Any], Any]:
    return cls.from_dict


# Tried in this order; the first that fits wins.
_PARSERS: tuple[tuple[EventKind, Callable[[Any], Any]], ...] = (
    (EventKind.DAY_TICKER_ALL, _list_of(_record(events.DayTickerEvent))),
    (EventKind.WINDOW_TICKER_ALL, _list_of(_record(events.WindowTickerEvent))),
    (EventKind.BALANCE_UPDATE, _record(events.BalanceUpdateEvent)),
    (EventKind.DAY_TICKER, _record(events.DayTickerEvent)),
    (EventKind.WINDOW_TICKER, _record(events.WindowTickerEvent)),
    (EventKind.BOOK_TICKER, _record(events.BookTickerEvent)),
    (EventKind.ACCOUNT_UPDATE, _record(events.AccountUpdateEvent)),
    (EventKind.ORDER_TRADE, _record(events.OrderTradeEvent)),
    (EventKind.AGGR_TRADES, _record(events.AggrTradesEvent)),
    (EventKind.TRADE, _record(events.TradeEvent)),
    (EventKind.KLINE, _record(events.KlineEvent)),
    (EventKind.ORDER_BOOK, _order_book),
    (EventKind.DEPTH_ORDER_BOOK, _record(events.DepthOrderBookEvent)),
)


def _recognise(value: Any) -> WebsocketEvent | None:
    for kind, parse in _PARSERS:
        try:
            return WebsocketEvent(kind, parse(value))
        except ModelError:
            continue
    return None


class WebSockets:
    """Reads a market stream and hands each recognised event to a handler."""

    def __init__(self, handler: Callable[[WebsocketEvent], Any]) -> None:
        self.socket: websocket.WebSocket | None = None
        self._handler = handler

    def connect(self, subscription: str) -> None:
        """Open a single raw stream."""
        self._connect_wss(stream_url(subscription))

    def connect_multiple_streams(self, endpoints: list[str]) -> None:
        """Open a combined stream over several subscriptions."""
        self._connect_wss(multi_stream_url(endpoints))

    def _connect_wss(self, url: str) -> None:
        try:
            self.socket = websocket.create_connection(url)
        except (websocket.WebSocketException, OSError) as exc:
            raise WebsocketError(f"Error during handshake {exc}") from exc

    def disconnect(self) -> None:
        """Close the open stream."""
        if self.socket is None:
            raise WebsocketError("Not able to close the connection")
        try:
            self.socket.close()
        except (websocket.WebSocketException, OSError) as exc:
            raise WebsocketError(str(exc)) from exc
        self.socket = None

    def handle_msg(self, msg: str | bytes) -> None:
        """Decode one text message and pass it to the handler if it is recognised.

        Combined-stream envelopes are unwrapped; messages of no known kind are ignored.
        """
        try:
            value = json.loads(msg)
        except json.JSONDecodeError as exc:
            raise WebsocketError(f"invalid JSON: {exc}") from exc
        self._dispatch(value)

    def _dispatch(self, value: Any) -> None:
        if isinstance(value, Mapping) and "data" in value:
            self._dispatch(value["data"])
            return
        event = _recognise(value)
        if event is not None:
            self._handler(event)

    def event_loop(self, running: threading.Event) -> None:
        """Read messages while `running` is set."""
        while running.is_set():
            if self.socket is None:
                raise WebsocketError("Not connected")
            try:
                opcode, payload = self.socket.recv_data()
            except (websocket.WebSocketException, OSError) as exc:
                raise WebsocketError(str(exc)) from exc
            if opcode == websocket.ABNF.OPCODE_TEXT:
                text = payload.decode("utf-8") if isinstance(payload, bytes) else payload
                try:
                    self.handle_msg(text)
                except Exception as exc:
                    raise WebsocketError(
                        f"Error on handling stream message: {exc}"
                    ) from exc
            elif opcode == websocket.ABNF.OPCODE_CLOSE:
                raise WebsocketError(f"Disconnected {payload!r}")