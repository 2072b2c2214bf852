"""The market's order book and trade matching."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Sequence

from .csv_parser import parse_csv
from .orders import TradeOrder, TradeType

SIM_USER = "simuser"


def highest_rate(orders: Sequence[TradeOrder]) -> float:
    """Highest rate among ``orders``, or 0.0 when there are none."""
    return max((order.rate for order in orders), default=0.0)


def lowest_rate(orders: Sequence[TradeOrder]) -> float:
    """Lowest rate among ``orders``, or 0.0 when there are none."""
    return min((order.rate for order in orders), default=0.0)


class MarketLedger:
    """All known orders, in the order they were loaded or submitted."""

    def __init__(self, orders: Iterable[TradeOrder] | None = None) -> None:
        self._orders: list[TradeOrder] = list(orders) if orders is not None else []

    @classmethod
    def from_csv(cls, filename: str) -> "MarketLedger":
        return cls(parse_csv(filename))

    @property
    def orders(self) -> tuple[TradeOrder, ...]:
        return tuple(self._orders)

    def available_pairs(self) -> list[str]:
        """Distinct currency pairs, sorted."""
        return sorted({order.pair for order in self._orders})

    def filter_orders(self, type: TradeType, pair: str, timestamp: str) -> list[TradeOrder]:
        """Copies of the orders matching type, pair and timestamp exactly."""
        return [
            replace(order)
            for order in self._orders
            if order.type == type and order.pair == pair and order.timestamp == timestamp
        ]

    def initial_timestamp(self) -> str:
        return self._orders[0].timestamp if self._orders else ""

    def advance_timestamp(self, timestamp: str) -> str:
        """The first later timestamp in the log, wrapping to the first one."""
        return next(
            (order.timestamp for order in self._orders if order.timestamp > timestamp),
            self.initial_timestamp(),
        )

    def submit_order(self, order: TradeOrder) -> None:
        self._orders.append(order)
        self._orders.sort(key=lambda o: o.timestamp)

    def execute_trades(self, pair: str, timestamp: str) -> list[TradeOrder]:
        """Match bids against asks for one pair and time; return the sales."""
        asks = sorted(self.filter_orders(TradeType.SELL, pair, timestamp), key=lambda o: o.rate)
        bids = sorted(
            self.filter_orders(TradeType.BUY, pair, timestamp),
            key=lambda o: o.rate,
            reverse=True,
        )
        sales: list[TradeOrder] = []
        for bid in bids:
            for ask in asks:
                if bid.quantity == 0 or ask.quantity == 0:
                    continue
                if bid.rate >= ask.rate:
                    amount = min(bid.quantity, ask.quantity)
                    sale_type = TradeType.UNKNOWN
                    if bid.user == SIM_USER:
                        sale_type = TradeType.BUYSALE
                    if ask.user == SIM_USER:
                        sale_type = TradeType.SELLSALE
                    sales.append(TradeOrder(ask.rate, amount, timestamp, pair, sale_type, SIM_USER))
                    bid.quantity -= amount
                    ask.quantity -= amount
        return sales