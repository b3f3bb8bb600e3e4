"""Rate and budget scaling for the Graphene SDK.

Decoded rates are raw token-unit ratios. Normalizing applies the token
decimal counts so prices read as "quote token per base token", with
token0 as base and token1 as quote.
"""

from decimal import Overflow, Underflow

from .classify import spread_percent
from .constants import DECIMAL_PRECISION, MAX_U256
from .errors import ConversionError
from .types import DecodedStrategy, ParsedStrategy
from .utils import (
    decimal_context,
    format_decimal,
    parse_decimal,
    parse_uint,
    validate_token_decimals,
)


def normalize_rate(
    amount: str,
    amount_token_decimals: int,
    other_token_decimals: int,
    field_name: str = "amount",
    precision: int = DECIMAL_PRECISION,
) -> str:
    """Scale a rate by 10^(amount_token_decimals - other_token_decimals).

    Raises:
        ParseError: If amount is not a decimal string
        ConversionError: If decimals are out of range or the result overflows
    """
    validate_token_decimals(amount_token_decimals, "amount_token_decimals")
    validate_token_decimals(other_token_decimals, "other_token_decimals")

    context = decimal_context(precision)
    amount_d = parse_decimal(amount, context, field_name, stage="normalize_rate")
    try:
        scaled = context.scaleb(amount_d, amount_token_decimals - other_token_decimals)
    except (Overflow, Underflow) as e:
        raise ConversionError(
            f"scaled rate out of decimal range: {amount}",
            field=field_name,
            stage="normalize_rate",
        ) from e
    return format_decimal(scaled, context)


def normalize_inverted_rate(
    amount: str,
    amount_token_decimals: int,
    other_token_decimals: int,
    field_name: str = "amount",
    precision: int = DECIMAL_PRECISION,
) -> str:
    """Invert a rate and scale it by 10^(other_token_decimals - amount_token_decimals).

    A zero rate means the bound is not set and is returned as "0".

    Raises:
        ParseError: If amount is not a decimal string
        ConversionError: If decimals are out of range or the result overflows
    """
    validate_token_decimals(amount_token_decimals, "amount_token_decimals")
    validate_token_decimals(other_token_decimals, "other_token_decimals")

    context = decimal_context(precision)
    amount_d = parse_decimal(amount, context, field_name, stage="normalize_inverted_rate")
    if amount_d.is_zero():
        return "0"

    try:
        inverted = context.divide(1, amount_d)
        scaled = context.scaleb(inverted, other_token_decimals - amount_token_decimals)
    except (Overflow, Underflow) as e:
        raise ConversionError(
            f"inverted rate out of decimal range: {amount}",
            field=field_name,
            stage="normalize_inverted_rate",
        ) from e
    return format_decimal(scaled, context)


def format_units(
    amount: str,
    decimals: int,
    field_name: str = "amount",
    precision: int = DECIMAL_PRECISION,
) -> str:
    """Convert a raw integer token amount to a decimal string.

    The result always carries exactly `decimals` fractional digits,
    e.g. format_units("1500000", 6) == "1.500000".

    Raises:
        ParseError: If amount is not an integer string
        ConversionError: If amount exceeds u256 or decimals are out of range
    """
    validate_token_decimals(decimals, "decimals")
    raw = parse_uint(amount, MAX_U256, field_name, stage="format_units")

    context = decimal_context(precision)
    return format(context.scaleb(raw, -decimals), "f")


def normalize(
    decoded: DecodedStrategy,
    decimals0: int,
    decimals1: int,
    precision: int = DECIMAL_PRECISION,
) -> ParsedStrategy:
    """Apply token decimals to a decoded strategy.

    Buy prices come from order1 directly. Sell prices come from order0
    inverted, so order0's highest rate becomes the lowest sell price and
    its lowest rate the highest sell price.
    """
    validate_token_decimals(decimals0, "decimals0")
    validate_token_decimals(decimals1, "decimals1")

    order0 = decoded.order0
    order1 = decoded.order1

    buy_price_low = normalize_rate(
        order1.lowest_rate, decimals0, decimals1, "order1.lowest_rate", precision
    )
    buy_price_marginal = normalize_rate(
        order1.marginal_rate, decimals0, decimals1, "order1.marginal_rate", precision
    )
    buy_price_high = normalize_rate(
        order1.highest_rate, decimals0, decimals1, "order1.highest_rate", precision
    )
    sell_price_low = normalize_inverted_rate(
        order0.highest_rate, decimals1, decimals0, "order0.highest_rate", precision
    )
    sell_price_marginal = normalize_inverted_rate(
        order0.marginal_rate, decimals1, decimals0, "order0.marginal_rate", precision
    )
    sell_price_high = normalize_inverted_rate(
        order0.lowest_rate, decimals1, decimals0, "order0.lowest_rate", precision
    )

    sell_budget = format_units(order0.liquidity, decimals0, "order0.liquidity", precision)
    buy_budget = format_units(order1.liquidity, decimals1, "order1.liquidity", precision)

    return ParsedStrategy(
        id=decoded.id,
        base_token=decoded.token0,
        quote_token=decoded.token1,
        buy_price_low=buy_price_low,
        buy_price_marginal=buy_price_marginal,
        buy_price_high=buy_price_high,
        buy_budget=buy_budget,
        sell_price_low=sell_price_low,
        sell_price_marginal=sell_price_marginal,
        sell_price_high=sell_price_high,
        sell_budget=sell_budget,
        spread_ppm=spread_percent(buy_price_high, sell_price_high),
        encoded=decoded.encoded,
    )
