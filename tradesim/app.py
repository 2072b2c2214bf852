"""Interactive menu-driven trading simulation."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Callable, TextIO

from .csv_parser import _to_float, split_string
from .ledger import SIM_USER, MarketLedger, highest_rate, lowest_rate
from .orders import TradeOrder, TradeType
from .portfolio import Portfolio

DEFAULT_DATA_FILE = "data.csv"

_CHOICE = re.compile(r"\s*([+-]?\d+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1

MENU = (
    "\n1: Display Help\n"
    "2: Display Market Overview\n"
    "3: Place a Sell Order (Ask)\n"
    "4: Place a Buy Order (Bid)\n"
    "5: Display Portfolio\n"
    "6: Advance to Next Time Step\n"
    "============================\n"
)


def _parse_choice(line: str) -> int:
    match = _CHOICE.match(line)
    if match is None:
        return 0
    value = int(match.group(1))
    return value if _INT_MIN <= value <= _INT_MAX else 0


class TradingApp:
    """The simulation: a market, the trader's portfolio and the current time."""

    def __init__(
        self,
        market: MarketLedger | None = None,
        portfolio: Portfolio | None = None,
        *,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.market = market if market is not None else MarketLedger.from_csv(DEFAULT_DATA_FILE)
        self.portfolio = portfolio if portfolio is not None else Portfolio()
        self.current_timestamp = ""
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _prompt(self, text: str) -> str | None:
        self._write(text)
        self._out.flush()
        line = self._in.readline()
        if line == "":
            return None
        return line.rstrip("\n")

    def run(self) -> None:
        """Set up, then serve the menu until input runs out."""
        self.setup()
        while True:
            self._write(MENU)
            self._write(f"Current Time: {self.current_timestamp}\n")
            line = self._prompt("Enter your choice (1-6): ")
            if line is None:
                break
            self.handle_choice(_parse_choice(line))

    def setup(self) -> None:
        self.current_timestamp = self.market.initial_timestamp()
        self.portfolio.credit("USDT", 20000.0)
        self.portfolio.credit("BTC", 2.0)

    def handle_choice(self, choice: int) -> None:
        actions: dict[int, Callable[[], object]] = {
            1: self.show_help,
            2: self.display_market_overview,
            3: lambda: self.place_sell_order(
                self._prompt("Place Sell Order (Format: pair,rate,quantity e.g. BTC/USDT,6000,0.5): ") or ""
            ),
            4: lambda: self.place_buy_order(
                self._prompt("Place Buy Order (Format: pair,rate,quantity e.g. BTC/USDT,5000,0.5): ") or ""
            ),
            5: self.display_portfolio,
            6: self.advance_to_next_step,
        }
        action = actions.get(choice)
        if action is None:
            self._write("Invalid choice. Please try again.\n")
        else:
            action()

    def show_help(self) -> None:
        self._write(
            "This is a trading simulation. Your goal is to make profitable trades "
            "by analyzing the market.\n"
        )

    def display_market_overview(self) -> None:
        self._write(f"--- Market Overview for {self.current_timestamp} ---\n")
        for pair in self.market.available_pairs():
            asks = self.market.filter_orders(TradeType.SELL, pair, self.current_timestamp)
            self._write(f"Pair: {pair}\n")
            self._write(
                f"  Asks: {len(asks)} | Lowest Ask: {lowest_rate(asks):g}"
                f" | Highest Ask: {highest_rate(asks):g}\n"
            )

    def _place_order(self, line: str, trade_type: TradeType, word: str) -> bool:
        tokens = split_string(line, ",")
        if len(tokens) != 3:
            self._write("Invalid format. Please try again.\n")
            return False
        try:
            rate = _to_float(tokens[1])
            quantity = _to_float(tokens[2])
        except ValueError:
            self._write("Invalid input. Please ensure rate and quantity are numbers.\n")
            return False
        order = TradeOrder(rate, quantity, self.current_timestamp, tokens[0], trade_type, SIM_USER)
        if not self.portfolio.can_cover_trade(order):
            self._write(f"Insufficient funds to place this {word} order.\n")
            return False
        self.market.submit_order(order)
        self._write(f"{word.capitalize()} order placed successfully.\n")
        return True

    def place_sell_order(self, line: str) -> bool:
        """Submit an ask given as ``pair,rate,quantity``; report whether it was placed."""
        return self._place_order(line, TradeType.SELL, "sell")

    def place_buy_order(self, line: str) -> bool:
        """Submit a bid given as ``pair,rate,quantity``; report whether it was placed."""
        return self._place_order(line, TradeType.BUY, "buy")

    def display_portfolio(self) -> None:
        self._write(self.portfolio.summary())

    def advance_to_next_step(self) -> None:
        self._write("--- Advancing Time Step & Processing Trades ---\n")
        for pair in self.market.available_pairs():
            for sale in self.market.execute_trades(pair, self.current_timestamp):
                self.portfolio.finalize_transaction(sale)
        self.current_timestamp = self.market.advance_timestamp(self.current_timestamp)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tradesim", description="Run the trading simulation.")
    parser.add_argument("csv", nargs="?", default=DEFAULT_DATA_FILE, help="order book CSV file")
    args = parser.parse_args(argv)
    TradingApp(MarketLedger.from_csv(args.csv)).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())