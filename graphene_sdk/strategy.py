"""Top-level strategy parsing for the Graphene SDK."""

import logging
from typing import Sequence

from .constants import DECIMAL_PRECISION, STRATEGY_SLOTS
from .encoders import decode_strategy
from .errors import ConversionError
from .normalize import normalize
from .types import ParsedStrategy, RawStrategy

logger = logging.getLogger(__name__)


def parse_strategy(
    strategy: RawStrategy,
    token_decimals: Sequence[int],
    precision: int = DECIMAL_PRECISION,
) -> ParsedStrategy:
    """Decode and normalize a raw strategy.

    Args:
        strategy: Raw on-chain strategy
        token_decimals: Decimal counts of (token0, token1)
        precision: Significant digits for the decimal pipeline

    Returns:
        ParsedStrategy with prices in token1 per token0

    Raises:
        ParseError: If a decoded value cannot be parsed
        ConversionError: If a value is out of range
        SerializationError: If the strategy snapshot cannot be produced
    """
    if len(token_decimals) != STRATEGY_SLOTS:
        raise ConversionError(
            f"expected {STRATEGY_SLOTS} token decimals, got {len(token_decimals)}",
            field="token_decimals",
            stage="parse_strategy",
        )
    decimals0, decimals1 = token_decimals

    decoded = decode_strategy(strategy, precision)
    parsed = normalize(decoded, decimals0, decimals1, precision)

    logger.debug(
        "Parsed strategy %s: buy_high=%s, sell_high=%s, spread=%s%%",
        parsed.id,
        parsed.buy_price_high,
        parsed.sell_price_high,
        parsed.spread_ppm,
    )
    return parsed
