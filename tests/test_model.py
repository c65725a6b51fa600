import json
import math

import pytest

from binance_trop.model import (
    AggTrade,
    Bids,
    CoinInfo,
    ExchangeInformation,
    FlexibleProductInfo,
    KlineSummary,
    KlineValueMissingError,
    LockedProductInfo,
    LotSize,
    MaxNumIcebergOrders,
    ModelError,
    Order,
    OrderBook,
    PaginatedResponse,
    PriceFilter,
    ServerTime,
    SpotFuturesTransferType,
    Symbol,
    SymbolPrice,
    TestResponse,
    Transaction,
    TrailingDelta,
    parse_filter,
    parse_optional_string_or_float,
    parse_string_or_bool,
    parse_string_or_float,
)


def _symbol_dict(filters):
    return {
        "symbol": "ETHBTC",
        "status": "TRADING",
        "baseAsset": "ETH",
        "baseAssetPrecision": 8,
        "quoteAsset": "BTC",
        "quotePrecision": 8,
        "orderTypes": ["LIMIT", "MARKET"],
        "icebergAllowed": True,
        "isSpotTradingAllowed": True,
        "isMarginTradingAllowed": False,
        "filters": filters,
    }


def _kline_row():
    return [
        1499040000000,
        "0.01634790",
        "0.80000000",
        "0.01575800",
        "0.01577100",
        "148976.11427815",
        1499644799999,
        "2434.19055334",
        308,
        "1756.87402397",
        "28.46694368",
    ]


def test_string_or_float_inf_literal():
    assert parse_string_or_float("INF") == math.inf


@pytest.mark.parametrize("value", ["1.5", "-0.25", "3", ".5", "1e3"])
def test_string_or_float_matches_float_of_string(value):
    assert parse_string_or_float(value) == float(value)


def test_string_or_float_accepts_numbers():
    assert parse_string_or_float(7) == 7.0
    assert parse_string_or_float(2.5) == 2.5


@pytest.mark.parametrize("value", ["abc", " 1", "1_000", "", True, None, [1]])
def test_string_or_float_rejects(value):
    with pytest.raises(ModelError):
        parse_string_or_float(value)


def test_optional_string_or_float_present_and_null():
    assert parse_optional_string_or_float("4.75") == 4.75
    with pytest.raises(ModelError):
        parse_optional_string_or_float(None)


def test_string_or_bool():
    assert parse_string_or_bool("true") is True
    assert parse_string_or_bool("false") is False
    assert parse_string_or_bool(False) is False
    for bad in ("True", "yes", 1):
        with pytest.raises(ModelError):
            parse_string_or_bool(bad)


def test_server_time_from_json():
    assert ServerTime.from_json('{"serverTime": 1499827319559}').server_time == 1499827319559


def test_from_json_rejects_bad_json():
    with pytest.raises(ModelError):
        ServerTime.from_json("{not json")


def test_from_dict_rejects_non_object_and_missing_field():
    with pytest.raises(ModelError):
        ServerTime.from_dict([1])
    with pytest.raises(ModelError, match="serverTime"):
        ServerTime.from_dict({})


def test_integer_range_and_type_checked():
    with pytest.raises(ModelError):
        ServerTime.from_dict({"serverTime": -1})
    with pytest.raises(ModelError):
        ServerTime.from_dict({"serverTime": "12"})
    with pytest.raises(ModelError):
        MaxNumIcebergOrders.from_dict({"maxNumIcebergOrders": 70000})


def test_parse_filter_dispatches_on_tag():
    price = parse_filter(
        {"filterType": "PRICE_FILTER", "minPrice": "0.1", "maxPrice": "100", "tickSize": "0.1"}
    )
    assert price == PriceFilter(min_price="0.1", max_price="100", tick_size="0.1")
    delta = parse_filter({"filterType": "TRAILING_DELTA", "minTrailingAboveDelta": 10})
    assert delta == TrailingDelta(min_trailing_above_delta=10)


def test_parse_filter_errors():
    with pytest.raises(ModelError, match="filterType"):
        parse_filter({"minQty": "1"})
    with pytest.raises(ModelError, match="unknown filter"):
        parse_filter({"filterType": "NOT_A_FILTER"})


def test_exchange_information_nested():
    data = {
        "timezone": "UTC",
        "serverTime": 1508631584636,
        "rateLimits": [
            {"rateLimitType": "REQUEST_WEIGHT", "interval": "MINUTE", "intervalNum": 1, "limit": 1200}
        ],
        "symbols": [
            _symbol_dict(
                [{"filterType": "LOT_SIZE", "minQty": "0.001", "maxQty": "100000", "stepSize": "0.001"}]
            )
        ],
        "extra": "ignored",
    }
    info = ExchangeInformation.from_dict(data)
    assert info.rate_limits[0].interval_num == 1
    assert info.symbols[0].base_asset == "ETH"
    assert info.symbols[0].filters == [LotSize(min_qty="0.001", max_qty="100000", step_size="0.001")]


def test_symbol_with_bad_filter_fails():
    with pytest.raises(ModelError):
        Symbol.from_dict(_symbol_dict([{"filterType": "LOT_SIZE"}]))


def test_order_reads_type_key_and_string_prices():
    data = {
        "symbol": "LTCBTC",
        "orderId": 1,
        "orderListId": -1,
        "clientOrderId": "myOrder1",
        "price": "0.1",
        "origQty": "1.0",
        "executedQty": "0.0",
        "cummulativeQuoteQty": "0.0",
        "status": "NEW",
        "timeInForce": "GTC",
        "type": "LIMIT",
        "side": "BUY",
        "stopPrice": 0,
        "icebergQty": "0.0",
        "time": 1499827319559,
        "updateTime": 1499827319559,
        "isWorking": True,
        "origQuoteOrderQty": "0.000000",
    }
    order = Order.from_dict(data)
    assert order.type_name == "LIMIT"
    assert order.price == 0.1
    assert order.stop_price == 0.0
    assert order.order_list_id == -1


def test_transaction_defaults():
    data = {
        "symbol": "BTCUSDT",
        "orderId": 28,
        "clientOrderId": "abc",
        "transactTime": 1507725176595,
        "price": "0.00000000",
        "origQty": "10.00000000",
        "executedQty": "10.00000000",
        "cummulativeQuoteQty": "10.00000000",
        "status": "FILLED",
        "timeInForce": "GTC",
        "type": "MARKET",
        "side": "SELL",
    }
    tx = Transaction.from_dict(data)
    assert tx.stop_price == 0.0
    assert tx.fills is None
    assert tx.order_list_id is None
    assert tx.orig_qty == 10.0

    data["fills"] = [{"price": "4000", "qty": "1", "commission": "4", "commissionAsset": "USDT"}]
    filled = Transaction.from_dict(data)
    assert filled.fills[0].commission_asset == "USDT"
    assert filled.fills[0].trade_id is None


def test_order_book_and_bids():
    book = OrderBook.from_dict(
        {"lastUpdateId": 1027024, "bids": [{"price": "4.0", "qty": "431.0"}], "asks": []}
    )
    assert book.bids == [Bids(price=4.0, qty=431.0)]
    assert book.asks == []


def test_empty_response_accepts_any_object():
    assert TestResponse.from_dict({"whatever": 1}) == TestResponse()
    with pytest.raises(ModelError):
        TestResponse.from_dict("{}")


def test_symbol_price_uses_plain_keys():
    price = SymbolPrice.from_json(json.dumps({"symbol": "LTCBTC", "price": "4.00000200"}))
    assert price.symbol == "LTCBTC"
    assert price.price == float("4.00000200")


def test_agg_trade_short_keys():
    trade = AggTrade.from_dict(
        {"a": 26129, "p": "0.01633102", "q": "4.70443515", "f": 27781, "l": 27781,
         "T": 1498793709153, "m": True, "M": True}
    )
    assert trade.agg_id == 26129
    assert trade.time == 1498793709153
    assert trade.maker is True and trade.best_match is True


def test_kline_from_row():
    row = _kline_row()
    kline = KlineSummary.from_row(row)
    assert kline.open_time == row[0]
    assert kline.close == row[4]
    assert kline.number_of_trades == row[8]
    assert kline.taker_buy_quote_asset_volume == row[10]


def test_kline_missing_value():
    row = _kline_row()[:9]
    with pytest.raises(KlineValueMissingError) as info:
        KlineSummary.from_row(row)
    assert info.value.index == 9
    assert info.value.name == "taker_buy_base_asset_volume"


def test_kline_wrong_type():
    row = _kline_row()
    row[1] = 1.5
    with pytest.raises(ModelError):
        KlineSummary.from_row(row)


def test_paginated_response():
    page = PaginatedResponse.parse(
        {"rows": [{"serverTime": 1}, {"serverTime": 2}], "total": 2}, ServerTime
    )
    assert [row.server_time for row in page.data] == [1, 2]
    assert page.total == 2
    with pytest.raises(ModelError):
        PaginatedResponse.parse({"rows": []}, ServerTime)


def _locked_dict():
    return {
        "positionId": 123123,
        "projectId": "Axs*90",
        "asset": "AXS",
        "amount": "122.09202928",
        "purchaseTime": 1646182276000,
        "duration": 60,
        "accrualDays": 4,
        "rewardAsset": "AXS",
        "rewardAmt": "5.17181528",
        "type": "NORMAL",
        "status": "HOLDING",
    }


def test_locked_product_defaults():
    product = LockedProductInfo.from_dict(_locked_dict())
    assert product.apy == 0.0
    assert product.extra_reward_apr is None
    assert product.order_type == "NORMAL"
    assert product.amount == float("122.09202928")


def test_locked_product_optional_floats():
    data = _locked_dict()
    data["APY"] = "0.2032"
    data["nextPay"] = "1.29295450"
    product = LockedProductInfo.from_dict(data)
    assert product.apy == float("0.2032")
    assert product.next_pay == float("1.29295450")
    data["extraRewardAPR"] = None
    with pytest.raises(ModelError):
        LockedProductInfo.from_dict(data)


def test_flexible_product_tier_default():
    data = {
        "totalAmount": "75.46000000",
        "latestAnnualPercentageRate": "0.02599895",
        "asset": "USDT",
        "canRedeem": True,
        "collateralAmount": "232.23123213",
        "productId": "USDT001",
        "yesterdayRealTimeRewards": "0.10293829",
        "cumulativeBonusRewards": "0.22759183",
        "cumulativeRealTimeRewards": "0.22759183",
        "cumulativeTotalRewards": "0.45459183",
        "autoSubscribe": True,
    }
    product = FlexibleProductInfo.from_dict(data)
    assert product.tier_annual_percentage_rate == {}
    assert product.air_drop_asset is None
    data["tierAnnualPercentageRate"] = {"0-5BTC": "0.05"}
    assert FlexibleProductInfo.from_dict(data).tier_annual_percentage_rate == {"0-5BTC": "0.05"}


def test_coin_info_with_network():
    network = {
        "addressRegex": "^(bnb1)[0-9a-z]{38}$",
        "coin": "BTC",
        "depositEnable": True,
        "isDefault": False,
        "memoRegex": "^[0-9A-Za-z\\-_]{1,120}$",
        "minConfirm": 1,
        "name": "BEP2",
        "network": "BNB",
        "resetAddressStatus": False,
        "unLockConfirm": 0,
        "withdrawEnable": True,
        "withdrawFee": "0.00000220",
        "withdrawMin": "0.00000440",
    }
    coin = {
        "coin": "BTC",
        "depositAllEnable": True,
        "free": "0.08074558",
        "freeze": "0",
        "ipoable": "0",
        "ipoing": "0",
        "isLegalMoney": False,
        "locked": "0",
        "name": "Bitcoin",
        "networkList": [network],
        "storage": "0",
        "trading": True,
        "withdrawAllEnable": True,
        "withdrawing": "0",
    }
    info = CoinInfo.from_dict(coin)
    assert info.free == float("0.08074558")
    assert info.network_list[0].withdraw_fee == float("0.00000220")
    assert info.network_list[0].deposit_desc is None


def test_transfer_type_lookup_by_code():
    assert SpotFuturesTransferType(3) is SpotFuturesTransferType.SPOT_TO_COIN_FUTURES
    assert int(SpotFuturesTransferType.COIN_FUTURES_TO_SPOT) == 4