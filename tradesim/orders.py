"""Trade order records and their types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TradeType(Enum):
    """Kind of entry in the order book or of a completed sale."""

    BUY = "buy"
    SELL = "sell"
    BUYSALE = "buysale"
    SELLSALE = "sellsale"
    UNKNOWN = "unknown"

    @classmethod
    def from_string(cls, s: str) -> "TradeType":
        """Map the order-book words ``ask``/``sell`` and ``bid``/``buy`` to a type."""
        if s in ("ask", "sell"):
            return cls.SELL
        if s in ("bid", "buy"):
            return cls.BUY
        return cls.UNKNOWN


@dataclass
class TradeOrder:
    """One order or completed sale for a currency pair at a timestamp."""

    rate: float
    quantity: float
    timestamp: str
    pair: str
    type: TradeType
    user: str = "sim_user"