"""Decoding of compressed on-chain strategy records.

Rates are stored on-chain as the square root of the real rate, scaled by
2^48 and packed into a 64-bit "compressed float": the low 48 bits are the
mantissa and the remaining bits are a left-shift exponent. Decoding works
entirely in unbounded integers and decimals so no precision is lost before
token decimals are applied.
"""

import json
import logging
from decimal import Decimal, Overflow, Underflow

from .constants import DECIMAL_PRECISION, MAX_U64, ONE, ONE_DECIMAL
from .errors import ConversionError, SerializationError
from .types import DecodedOrder, DecodedStrategy, RawOrder, RawStrategy
from .utils import check_uint, decimal_context, format_decimal

logger = logging.getLogger(__name__)


def decode_float(value: int, field_name: str = "value") -> int:
    """Decode a compressed float into an unbounded integer.

    result = (value mod 2^48) << (value div 2^48)

    Raises:
        ConversionError: If value is not a u64
    """
    check_uint(value, MAX_U64, field_name, stage="decode_float")
    exponent, mantissa = divmod(value, ONE)
    return mantissa << exponent


def decode_rate(value: int, precision: int = DECIMAL_PRECISION) -> str:
    """Square a 2^48-scaled square-root rate back into a decimal rate string.

    Raises:
        ConversionError: If the squared rate exceeds the decimal exponent range
    """
    context = decimal_context(precision)
    try:
        rate = context.divide(Decimal(value), ONE_DECIMAL)
        return format_decimal(context.power(rate, 2), context)
    except (Overflow, Underflow) as e:
        raise ConversionError(f"rate out of decimal range: {value}", stage="decode_rate") from e


def decode_order(order: RawOrder, precision: int = DECIMAL_PRECISION) -> DecodedOrder:
    """Decode one order into its lowest, highest and marginal rates.

    The marginal rate is interpolated between the lowest and highest rate by
    the fraction y/z of liquidity still available. A fully available order
    (y == z) sits at its highest rate, an empty one (y == 0) at its lowest.
    """
    y = order.y
    z = order.z
    a = decode_float(order.A, "A")
    b = decode_float(order.B, "B")

    if y > z:
        logger.warning("Order liquidity exceeds capacity: y=%s, z=%s", y, z)
        if z == 0:
            raise ConversionError(f"capacity is zero but liquidity is {y}", field="z", stage="decode_order")

    if y == z:
        marginal = b + a
    else:
        marginal = b + a * y // z

    return DecodedOrder(
        liquidity=str(y),
        lowest_rate=decode_rate(b, precision),
        highest_rate=decode_rate(b + a, precision),
        marginal_rate=decode_rate(marginal, precision),
    )


def encode_strategy_snapshot(strategy: RawStrategy) -> str:
    """Render the raw strategy as compact JSON with a stable field order.

    Raises:
        SerializationError: If the strategy cannot be serialized
    """
    try:
        return json.dumps(strategy.to_dict(), separators=(",", ":"))
    except (TypeError, ValueError, AttributeError) as e:
        raise SerializationError(str(e), stage="encode_strategy_snapshot") from e


def decode_strategy(strategy: RawStrategy, precision: int = DECIMAL_PRECISION) -> DecodedStrategy:
    """Decode both orders of a strategy and attach its canonical snapshot."""
    encoded = encode_strategy_snapshot(strategy)
    logger.debug("Decoding strategy %s", strategy.id)

    return DecodedStrategy(
        id=str(strategy.id),
        token0=strategy.token0,
        token1=strategy.token1,
        order0=_decode_slot(strategy.order0, "order0", precision),
        order1=_decode_slot(strategy.order1, "order1", precision),
        encoded=encoded,
    )


def _decode_slot(order: RawOrder, slot: str, precision: int) -> DecodedOrder:
    try:
        return decode_order(order, precision)
    except ConversionError as e:
        field = f"{slot}.{e.field}" if e.field else slot
        raise ConversionError(e.message, field=field, stage=e.stage) from e
