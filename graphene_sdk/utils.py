"""Utility functions for the Graphene SDK."""

import re
from decimal import (
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    ROUND_HALF_EVEN,
    Underflow,
)
from typing import Optional, Union

import eth_utils
from Crypto.Hash import keccak

from .constants import ADDRESS_SIZE, DECIMAL_PRECISION, MAX_U8
from .errors import ConversionError, ParseError

# 0x-prefixed 20-byte hex address
ADDRESS_PATTERN = re.compile("^0x[0-9a-fA-F]{%d}$" % (ADDRESS_SIZE * 2))


def keccak256(data: bytes) -> bytes:
    """Compute keccak256 hash of data."""
    k = keccak.new(digest_bits=256)
    k.update(data)
    return k.digest()


def to_checksum_address(address: str, field_name: str = "address") -> str:
    """Convert a hex address to its EIP-55 mixed-case checksum form.

    All-lowercase and all-uppercase inputs are accepted as-is. A mixed-case
    input is treated as a checksummed address and must already be valid.

    Raises:
        ParseError: If the address is malformed or fails its checksum
    """
    if not isinstance(address, str) or not ADDRESS_PATTERN.match(address):
        raise ParseError(f"Not a 0x-prefixed {ADDRESS_SIZE}-byte hex address: {address!r}", field=field_name)

    body = address[2:]
    checksummed = eth_utils.to_checksum_address(address)

    if body != body.lower() and body != body.upper() and address != checksummed:
        raise ParseError(f"Invalid EIP-55 checksum: {address}", field=field_name)
    return checksummed


def is_checksum_address(address: str) -> bool:
    """Check if a string is a valid address in EIP-55 checksum form."""
    if not isinstance(address, str) or not ADDRESS_PATTERN.match(address):
        return False
    return eth_utils.is_checksum_address(address)


def check_uint(value: int, max_value: int, field_name: str, stage: Optional[str] = None) -> int:
    """Validate that value is an unsigned integer no larger than max_value.

    Raises:
        ConversionError: If value is not an int or is out of range
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConversionError(
            f"expected an unsigned integer, got {type(value).__name__}",
            field=field_name,
            stage=stage,
        )
    if not 0 <= value <= max_value:
        raise ConversionError(
            f"value out of range: {value} (must be 0-{max_value})",
            field=field_name,
            stage=stage,
        )
    return value


def parse_uint(
    value: Union[int, str],
    max_value: int,
    field_name: str,
    stage: Optional[str] = None,
) -> int:
    """Parse an unsigned integer from an int, a decimal string or a 0x hex string.

    Raises:
        ParseError: If a string is not a valid integer literal
        ConversionError: If the value is out of range
    """
    if isinstance(value, str):
        text = value.strip()
        try:
            if text[:2].lower() == "0x":
                value = int(text[2:], 16)
            else:
                value = int(text, 10)
        except ValueError as e:
            raise ParseError(f"invalid integer {value!r}", field=field_name, stage=stage) from e
    return check_uint(value, max_value, field_name, stage)


def validate_token_decimals(decimals: int, field_name: str) -> int:
    """Validate that a token decimal count fits in a u8.

    Raises:
        ConversionError: If decimals is out of range [0, 255]
    """
    return check_uint(decimals, MAX_U8, field_name, stage="normalize")


def decimal_context(precision: int = DECIMAL_PRECISION) -> Context:
    """Build the decimal context used by the decoding pipeline.

    Invalid operations, division by zero and exponent overflow/underflow
    all raise instead of producing NaN, Infinity or silent zeros.
    """
    return Context(
        prec=precision,
        rounding=ROUND_HALF_EVEN,
        traps=[InvalidOperation, DivisionByZero, Overflow, Underflow],
    )


def parse_decimal(
    value: str,
    context: Context,
    field_name: str,
    stage: Optional[str] = None,
) -> Decimal:
    """Parse a finite decimal from a string.

    Raises:
        ParseError: If the string is not a finite decimal number
    """
    try:
        result = context.create_decimal(value)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise ParseError(f"invalid decimal {value!r}", field=field_name, stage=stage) from e
    if not result.is_finite():
        raise ParseError(f"non-finite decimal {value!r}", field=field_name, stage=stage)
    return result


def format_decimal(value: Decimal, context: Context) -> str:
    """Render a decimal in plain notation without trailing fractional zeros."""
    if value.is_zero():
        return "0"
    return format(value.normalize(context), "f")
