"""Reading order-book entries from CSV files."""

from __future__ import annotations

import math
import re

from .orders import TradeOrder, TradeType

_NUMBER = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _to_float(text: str) -> float:
    """Parse the leading number of ``text``, ignoring whatever follows it."""
    match = _NUMBER.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    literal = match.group(1)
    value = float(literal)
    if math.isinf(value) and "inf" not in literal.lower():
        raise ValueError(f"number out of range: {text!r}")
    return value


def split_string(line: str, separator: str) -> list[str]:
    """Split ``line`` on ``separator``; a trailing empty field is dropped."""
    tokens = line.split(separator)
    if tokens[-1] == "":
        tokens.pop()
    return tokens


def parse_csv(filename: str) -> list[TradeOrder]:
    """Load orders from a ``timestamp,pair,type,rate,quantity`` file.

    Lines with the wrong number of fields or unreadable numbers are skipped.
    A file that cannot be opened yields an empty list.
    """
    entries: list[TradeOrder] = []
    try:
        handle = open(filename, encoding="utf-8")
    except OSError:
        print(f"Error: DataParser could not open file {filename}")
        return entries

    with handle:
        for raw in handle:
            tokens = split_string(raw.rstrip("\n"), ",")
            if len(tokens) != 5:
                continue
            try:
                rate = _to_float(tokens[3])
                quantity = _to_float(tokens[4])
            except ValueError:
                continue
            entries.append(
                TradeOrder(
                    rate,
                    quantity,
                    tokens[0],
                    tokens[1],
                    TradeType.from_string(tokens[2]),
                )
            )

    print(f"DataParser: Loaded {len(entries)} entries from {filename}")
    return entries