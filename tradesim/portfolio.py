"""Currency holdings of the simulated trader."""

from __future__ import annotations

from .orders import TradeOrder, TradeType


def _split_pair(pair: str) -> tuple[str, str] | None:
    base, sep, quote = pair.partition("/")
    if not sep:
        return None
    return base, quote


class Portfolio:
    """Amounts held per currency."""

    def __init__(self) -> None:
        self._holdings: dict[str, float] = {}

    @property
    def holdings(self) -> dict[str, float]:
        return dict(self._holdings)

    def _add(self, currency: str, amount: float) -> None:
        self._holdings[currency] = self._holdings.get(currency, 0.0) + amount

    def credit(self, currency: str, amount: float) -> None:
        if amount < 0:
            raise ValueError("Cannot credit a negative amount.")
        self._add(currency, amount)

    def debit(self, currency: str, amount: float) -> bool:
        """Remove ``amount`` if it is held; report whether it was."""
        if not self.has_sufficient_funds(currency, amount):
            return False
        self._add(currency, -amount)
        return True

    def has_sufficient_funds(self, currency: str, amount: float) -> bool:
        if currency not in self._holdings:
            return False
        return self._holdings[currency] >= amount

    def can_cover_trade(self, order: TradeOrder) -> bool:
        """Whether the holdings could pay for a sell or buy order."""
        parts = _split_pair(order.pair)
        if parts is None:
            return False
        base, quote = parts
        if order.type is TradeType.SELL:
            return self.has_sufficient_funds(base, order.quantity)
        if order.type is TradeType.BUY:
            return self.has_sufficient_funds(quote, order.quantity * order.rate)
        return False

    def finalize_transaction(self, transaction: TradeOrder) -> None:
        """Apply a completed sale to the holdings."""
        parts = _split_pair(transaction.pair)
        if parts is None:
            return
        base, quote = parts
        if transaction.type is TradeType.SELLSALE:
            self._add(base, -transaction.quantity)
            self._add(quote, transaction.quantity * transaction.rate)
        if transaction.type is TradeType.BUYSALE:
            self._add(base, transaction.quantity)
            self._add(quote, -transaction.quantity * transaction.rate)

    def summary(self) -> str:
        lines = ["Portfolio Holdings:\n"]
        lines.extend(f"  {currency}: {amount:g}\n" for currency, amount in sorted(self._holdings.items()))
        return "".join(lines)