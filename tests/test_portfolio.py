import pytest

from tradesim.orders import TradeOrder, TradeType
from tradesim.portfolio import Portfolio


def test_credit_negative_raises():
    with pytest.raises(ValueError, match="Cannot credit a negative amount."):
        Portfolio().credit("BTC", -1.0)


def test_credit_accumulates():
    p = Portfolio()
    p.credit("BTC", 1.5)
    p.credit("BTC", 0.5)
    assert p.holdings["BTC"] == 1.5 + 0.5


def test_sufficient_funds():
    p = Portfolio()
    p.credit("USDT", 100.0)
    assert p.has_sufficient_funds("USDT", 100.0)
    assert not p.has_sufficient_funds("USDT", 100.5)
    assert not p.has_sufficient_funds("BTC", 0.0)


def test_debit():
    p = Portfolio()
    p.credit("USDT", 100.0)
    assert not p.debit("USDT", 200.0)
    assert p.holdings["USDT"] == 100.0
    assert p.debit("USDT", 40.0)
    assert p.holdings["USDT"] == 100.0 - 40.0


def test_summary_format():
    p = Portfolio()
    p.credit("USDT", 20000.0)
    p.credit("BTC", 2.0)
    assert p.summary() == "Portfolio Holdings:\n  BTC: 2\n  USDT: 20000\n"


def test_summary_empty():
    assert Portfolio().summary() == "Portfolio Holdings:\n"


def funded():
    p = Portfolio()
    p.credit("USDT", 20000.0)
    p.credit("BTC", 2.0)
    return p


def test_can_cover_sell():
    p = funded()
    assert p.can_cover_trade(TradeOrder(6000.0, 2.0, "t", "BTC/USDT", TradeType.SELL))
    assert not p.can_cover_trade(TradeOrder(6000.0, 2.5, "t", "BTC/USDT", TradeType.SELL))


def test_can_cover_buy():
    p = funded()
    assert p.can_cover_trade(TradeOrder(5000.0, 4.0, "t", "BTC/USDT", TradeType.BUY))
    assert not p.can_cover_trade(TradeOrder(5000.0, 4.5, "t", "BTC/USDT", TradeType.BUY))


def test_cannot_cover_bad_pair_or_type():
    p = funded()
    assert not p.can_cover_trade(TradeOrder(1.0, 0.1, "t", "BTCUSDT", TradeType.SELL))
    assert not p.can_cover_trade(TradeOrder(1.0, 0.1, "t", "BTC/USDT", TradeType.UNKNOWN))


def test_finalize_sell_sale():
    p = funded()
    rate, qty = 6000.0, 0.5
    p.finalize_transaction(TradeOrder(rate, qty, "t", "BTC/USDT", TradeType.SELLSALE))
    assert p.holdings["BTC"] == 2.0 - qty
    assert p.holdings["USDT"] == 20000.0 + qty * rate


def test_finalize_buy_sale():
    p = funded()
    rate, qty = 5000.0, 0.5
    p.finalize_transaction(TradeOrder(rate, qty, "t", "BTC/USDT", TradeType.BUYSALE))
    assert p.holdings["BTC"] == 2.0 + qty
    assert p.holdings["USDT"] == 20000.0 - qty * rate


def test_finalize_ignores_other_types_and_bad_pairs():
    p = funded()
    before = p.holdings
    p.finalize_transaction(TradeOrder(1.0, 1.0, "t", "BTC/USDT", TradeType.BUY))
    p.finalize_transaction(TradeOrder(1.0, 1.0, "t", "BTCUSDT", TradeType.BUYSALE))
    assert p.holdings == before