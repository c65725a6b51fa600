# binance_trop

Typed data models, query-string builders and a spot market stream client
for the Binance spot and futures APIs.

The test suite runs under pytest; the `test` extra installs it.

## What is inside

| Module | Contents |
| --- | --- |
| `binance_trop.model` | Spot REST response models (`OrderBook`, `SymbolPrice`, `KlineSummary`, `Symbol` and its filters, `CoinInfo`, `FlexibleProductInfo`, `LockedProductInfo`, ...) and the `ModelError` exception |
| `binance_trop.events` | Stream event models (`TradeEvent`, `KlineEvent`, `DepthOrderBookEvent`, `AccountUpdateEvent`, `MarkPriceEvent`, ...) |
| `binance_trop.futures_model` | Futures REST and user-stream models (`PositionRisk`, `AccountInformation`, `Order`, `OrderTradeEvent`, `Income`, ...) |
| `binance_trop.futures_types` | Enumerations for futures orders (`OrderSide`, `OrderType`, `TimeInForce`, `PositionSide`, `WorkingType`, `ContractType`, `IncomeType`) and the `IncomeRequest` query |
| `binance_trop.futures_orders` | `CustomOrderRequest` and the helpers `limit_order`, `market_order`, `stop_market_close_order`, `signed_order_request` |
| `binance_trop.util` | `build_request`, `build_signed_request`, `build_signed_request_custom`, `to_i64`, `to_f64`, `is_start_time_valid` |
| `binance_trop.websockets` | Spot stream client `WebSockets`, `WebsocketEvent`, `EventKind`, `stream_url`, `multi_stream_url` |

## Parsing responses

Every model is built from decoded JSON with `from_dict`, or from JSON text
with `from_json`. Unknown keys are ignored; missing or mistyped fields raise
`binance_trop.model.ModelError`. Numeric fields that the API sends as strings
are read as floats (`"INF"` becomes infinity).

```python
from binance_trop.model import KlineSummary, SymbolPrice

price = SymbolPrice.from_json('{"symbol": "BTCUSDT", "price": "64000.10"}')
print(price.price)  # 64000.1

row = [1499040000000, "0.01634790", "0.80000000", "0.01575800", "0.01577100",
       "148976.11427815", 1499644799999, "2434.19055334", 308,
       "1756.87402397", "28.46694368"]
kline = KlineSummary.from_row(row)
```

A kline row that is too short raises `KlineValueMissingError`, naming the
missing column. Symbol filters are read by their `"filterType"` tag with
`parse_filter`, and paged replies with `PaginatedResponse.parse(data, item_type)`.

## Building requests

Parameters are joined in key order:

```python
from binance_trop.util import build_request, build_signed_request

build_request({"symbol": "BTCUSDT", "limit": "5"})
# 'limit=5&symbol=BTCUSDT'

build_signed_request({"symbol": "BTCUSDT"}, 5000)
# 'recvWindow=5000&symbol=BTCUSDT&timestamp=...'
```

`recvWindow` is only added when it is positive; `timestamp` is the current
time in milliseconds. `build_signed_request_custom` takes the time to stamp
with as a datetime or as seconds since the epoch.

Futures orders:

```python
from binance_trop.futures_orders import limit_order, signed_order_request
from binance_trop.futures_types import OrderSide, TimeInForce

order = limit_order("BTCUSDT", OrderSide.BUY, 0.01, 60000.0, TimeInForce.GTC)
order.to_parameters()
# {'symbol': 'BTCUSDT', 'side': 'BUY', 'type': 'LIMIT',
#  'timeInForce': 'GTC', 'quantity': '0.01', 'price': '60000'}
query = signed_order_request(order, 5000)
```

## Streaming spot market data

```python
import threading
from binance_trop.websockets import EventKind, WebSockets

def on_event(event):
    if event.kind is EventKind.TRADE:
        print(event.data.symbol, event.data.price)

running = threading.Event()
running.set()

ws = WebSockets(on_event)
ws.connect("btcusdt@trade")
ws.event_loop(running)   # reads until `running` is cleared
ws.disconnect()
```

`connect_multiple_streams(["btcusdt@trade", "ethusdt@trade"])` opens a
combined stream; its envelopes are unwrapped before the handler sees them.
Messages can also be fed in directly, which is handy for testing handlers:

```python
ws.handle_msg('{"u": 400900217, "s": "BNBUSDT", "b": "25.35", "B": "31.21", "a": "25.36", "A": "40.66"}')
# the handler receives WebsocketEvent(kind=EventKind.BOOK_TICKER, data=BookTickerEvent(...))
```

Messages of no known kind are ignored. Connection, read and close failures,
invalid JSON and errors raised while handling a message in `event_loop` are
raised as `binance_trop.websockets.WebsocketError`.

## What this package does not do

- It sends no REST requests: it builds the query strings and reads the
  replies, but performing the HTTP call, and signing the query with an API
  key, is left to the caller.
- It has no stream client for the futures markets. The futures event models
  are here, but only the spot `WebSockets` client opens connections.