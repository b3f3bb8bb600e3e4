"""Spread and overlap classification of parsed strategies."""

import math

from .constants import DECIMAL_PRECISION, SPREAD_DECIMAL_PLACES
from .errors import ParseError
from .types import ParsedStrategy
from .utils import decimal_context, parse_decimal


def _parse_float(value: str, field_name: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ParseError(f"invalid decimal {value!r}", field=field_name, stage="spread_percent") from e


def format_spread(value: float) -> str:
    """Format a spread with two fractional digits.

    Rounds the exact binary value of the double, ties to even:
    0.125 -> "0.12", 0.375 -> "0.38", 2.675 -> "2.67" (stored below 2.675).
    NaN renders as "NaN" and infinity as "inf".
    """
    if math.isnan(value):
        return "NaN"
    return format(value, f".{SPREAD_DECIMAL_PLACES}f")


def spread_percent(buy_price_high: str, sell_price_high: str) -> str:
    """Percentage spread between the top sell price and the top buy price.

    Computed in double precision: (sell / buy - 1) * 100. A zero buy price
    yields "inf" (or "NaN" when the sell price is zero too).
    """
    buy_max = _parse_float(buy_price_high, "buy_price_high")
    sell_max = _parse_float(sell_price_high, "sell_price_high")

    if buy_max == 0.0:
        spread = math.inf if sell_max > 0.0 else math.nan
    else:
        spread = (sell_max / buy_max - 1.0) * 100.0
    return format_spread(spread)


def is_overlapping_strategy(strategy: ParsedStrategy) -> bool:
    """Check if the buy range reaches into the sell range.

    A zero bound means it is not set, so the strategy is not overlapping.

    Raises:
        ParseError: If either price is not a decimal string
    """
    context = decimal_context(DECIMAL_PRECISION)
    buy_max = parse_decimal(strategy.buy_price_high, context, "buy_price_high", stage="is_overlapping")
    sell_min = parse_decimal(strategy.sell_price_low, context, "sell_price_low", stage="is_overlapping")

    if sell_min.is_zero():
        return False
    if buy_max.is_zero():
        return False
    return buy_max >= sell_min
