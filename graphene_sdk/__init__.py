"""Graphene SDK - strategy decoding for the Graphene order-book protocol.

Turns raw on-chain strategy records into human-readable prices, budgets
and spread metrics.

Example:
    from graphene_sdk import RawOrder, RawStrategy, parse_strategy, is_overlapping_strategy

    strategy = RawStrategy(id=..., owner=..., token0=..., token1=...,
                           order0=RawOrder(...), order1=RawOrder(...))
    parsed = parse_strategy(strategy, [18, 6])
    print(parsed.buy_price_high, parsed.sell_price_low, parsed.spread_ppm)
    print(is_overlapping_strategy(parsed))
"""

__version__ = "0.1.0"

# ============================================================================
# CONSTANTS
# ============================================================================

from .constants import (
    ONE,
    MANTISSA_BITS,
    MAX_U8,
    MAX_U64,
    MAX_U128,
    MAX_U256,
    DECIMAL_PRECISION,
    SPREAD_DECIMAL_PLACES,
)

# ============================================================================
# TYPES AND ERRORS
# ============================================================================

from .types import (
    RawOrder,
    RawStrategy,
    DecodedOrder,
    DecodedStrategy,
    ParsedStrategy,
)
from .errors import (
    GrapheneError,
    DecodeError,
    ParseError,
    ConversionError,
    SerializationError,
)

# ============================================================================
# PIPELINE
# ============================================================================

from .encoders import (
    decode_float,
    decode_rate,
    decode_order,
    decode_strategy,
    encode_strategy_snapshot,
)
from .normalize import (
    normalize_rate,
    normalize_inverted_rate,
    format_units,
    normalize,
)
from .classify import (
    format_spread,
    spread_percent,
    is_overlapping_strategy,
)
from .strategy import parse_strategy
from .utils import (
    keccak256,
    to_checksum_address,
    is_checksum_address,
)

__all__ = [
    "__version__",
    # Constants
    "ONE",
    "MANTISSA_BITS",
    "MAX_U8",
    "MAX_U64",
    "MAX_U128",
    "MAX_U256",
    "DECIMAL_PRECISION",
    "SPREAD_DECIMAL_PLACES",
    # Types
    "RawOrder",
    "RawStrategy",
    "DecodedOrder",
    "DecodedStrategy",
    "ParsedStrategy",
    # Errors
    "GrapheneError",
    "DecodeError",
    "ParseError",
    "ConversionError",
    "SerializationError",
    # Decoding
    "decode_float",
    "decode_rate",
    "decode_order",
    "decode_strategy",
    "encode_strategy_snapshot",
    # Normalization
    "normalize_rate",
    "normalize_inverted_rate",
    "format_units",
    "normalize",
    # Classification
    "format_spread",
    "spread_percent",
    "is_overlapping_strategy",
    "parse_strategy",
    # Utility Functions
    "keccak256",
    "to_checksum_address",
    "is_checksum_address",
]
