"""Constants for the Graphene strategy encoding."""

from decimal import Decimal

# Compressed-float mantissa width: the low 48 bits hold the mantissa,
# the remaining high bits hold the left-shift exponent.
MANTISSA_BITS = 48
ONE = 2**MANTISSA_BITS
ONE_DECIMAL = Decimal(ONE)

# Maximum value for a u8 integer (token decimals)
MAX_U8 = 2**8 - 1
# Maximum value for a u64 integer (order A/B fields)
MAX_U64 = 2**64 - 1
# Maximum value for a u128 integer (order y/z fields)
MAX_U128 = 2**128 - 1
# Maximum value for a u256 integer (strategy id)
MAX_U256 = 2**256 - 1

# EVM address size in bytes
ADDRESS_SIZE = 20

# Number of orders (and tokens) in a strategy
STRATEGY_SLOTS = 2

# Significant digits used by the decimal pipeline. 78 digits hold any
# 256-bit unsigned integer exactly.
DECIMAL_PRECISION = 78

# Fractional digits of the spread percentage
SPREAD_DECIMAL_PLACES = 2
