# tradesim

A small console trading simulator. It loads a history of buy and sell
orders from a CSV file and lets you step through it one time slot at a time.
You can place your own asks and bids, see them matched against the market
orders, and follow how your portfolio changes.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
tradesim [CSV]
```

`CSV` is the order book file to load. It defaults to `data.csv` in the
current directory. If the file cannot be opened, a message is printed and
the simulation starts with an empty market.

The menu offers:

1. Display help
2. Market overview: for each pair, the number of asks and the lowest and
   highest ask at the current time (0 when there are none)
3. Place a sell order (ask)
4. Place a buy order (bid)
5. Display portfolio
6. Advance to the next time step, first matching the bids and asks of
   every pair at the current time

Anything other than a number from 1 to 6 prints "Invalid choice". The
program ends when its input runs out (for example Ctrl-D).

Orders are typed as `pair,rate,quantity`, for example `BTC/USDT,6000,0.5`.
Your portfolio starts with 20000 USDT and 2 BTC. A sell order is accepted
only if you hold the quantity of the base currency; a buy order only if you
hold `rate * quantity` of the quote currency. Funds are not set aside when an
order is placed: the portfolio changes only when a trade is matched on
advancing the time step.

When advancing, the current time moves to the next later timestamp in the
order book, and wraps back to the first one after the last.

## Data format

Each line of the CSV file holds five fields:

```
timestamp,pair,type,rate,quantity
2020/03/17 17:01:24.884492,BTC/USDT,bid,5319.45,0.001
```

`type` is `ask` or `sell` for sell orders and `bid` or `buy` for buy orders;
any other word is kept as `TradeType.UNKNOWN`. Lines with a different number
of fields, or with a rate or quantity that does not start with a number, are
skipped. Timestamps are compared as plain strings, so they must sort
correctly as text.

## Using it as a library

```python
from tradesim.csv_parser import parse_csv
from tradesim.ledger import MarketLedger, lowest_rate
from tradesim.orders import TradeOrder, TradeType
from tradesim.portfolio import Portfolio

ledger = MarketLedger.from_csv("data.csv")   # or MarketLedger(parse_csv("data.csv"))
now = ledger.initial_timestamp()

for pair in ledger.available_pairs():
    asks = ledger.filter_orders(TradeType.SELL, pair, now)
    print(pair, lowest_rate(asks))

wallet = Portfolio()
wallet.credit("USDT", 20000.0)
order = TradeOrder(5000.0, 0.5, now, "BTC/USDT", TradeType.BUY, "simuser")
if wallet.can_cover_trade(order):
    ledger.submit_order(order)

for sale in ledger.execute_trades("BTC/USDT", now):
    wallet.finalize_transaction(sale)
print(wallet.summary())
```

`execute_trades` works on copies of the matching orders, so the quantities
in the ledger itself are not reduced by a match. Sales against an order of
user `simuser` are marked `BUYSALE` or `SELLSALE`; only those change a
portfolio in `finalize_transaction`.

`TradingApp` in `tradesim.app` accepts its own `market`, `portfolio`,
`stdin` and `stdout`, so a session can be driven from any text streams.

## What it does not do

The simulation keeps everything in memory: placed orders and the portfolio
are not saved anywhere and are lost when the program exits. There is no
connection to a real exchange.