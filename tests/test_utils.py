"""Tests for utility functions."""

from decimal import Decimal, DivisionByZero, Overflow

import eth_utils
import pytest

from graphene_sdk import (
    ConversionError,
    ParseError,
    is_checksum_address,
    keccak256,
    to_checksum_address,
)
from graphene_sdk.utils import (
    check_uint,
    decimal_context,
    format_decimal,
    parse_decimal,
    parse_uint,
    validate_token_decimals,
)

# Test vectors from EIP-55
CHECKSUM_ADDRESSES = [
    "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
    "0xfB6916095ca1df60bB79Ce92cE3Ea74c37c5d359",
    "0xdbF03B407c01E7cD3CBea99509d93f8DDDC8C6FB",
    "0xD1220A0cf47c7B9Be7A2E6BA89F429762e7b9aDb",
]


class TestKeccak256:
    def test_empty_input(self):
        assert keccak256(b"").hex() == "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"

    def test_produces_32_bytes(self):
        assert len(keccak256(b"graphene")) == 32


class TestChecksumAddress:
    @pytest.mark.parametrize("address", CHECKSUM_ADDRESSES)
    def test_lowercase_to_checksum(self, address):
        assert to_checksum_address(address.lower()) == address

    @pytest.mark.parametrize("address", CHECKSUM_ADDRESSES)
    def test_uppercase_to_checksum(self, address):
        assert to_checksum_address("0x" + address[2:].upper()) == address

    @pytest.mark.parametrize("address", CHECKSUM_ADDRESSES)
    def test_is_checksum_address(self, address):
        assert is_checksum_address(address) is True
        assert is_checksum_address(address.lower()) is False

    def test_digits_only_address(self):
        address = "0x4200000000000000000000000000000000000006"
        assert to_checksum_address(address) == address

    def test_invalid_checksum_raises(self):
        with pytest.raises(ParseError):
            to_checksum_address("0xD1220A0cf47c7B9Be7A2E6BA89F429762e7b9adb")

    @pytest.mark.parametrize("address", CHECKSUM_ADDRESSES)
    def test_matches_eth_utils(self, address):
        assert to_checksum_address(address.lower()) == eth_utils.to_checksum_address(address.lower())

    def test_is_checksum_address_requires_prefix(self):
        assert is_checksum_address(CHECKSUM_ADDRESSES[0][2:]) is False
        assert is_checksum_address(None) is False

    @pytest.mark.parametrize(
        "address",
        [
            "5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
            "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAe",
            "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAedd",
            "0xZaAeb6053F3E94C9b9A09f33669435E7Ef1BeAed",
            None,
        ],
    )
    def test_malformed_address_raises(self, address):
        with pytest.raises(ParseError):
            to_checksum_address(address)


class TestCheckUint:
    def test_in_range(self):
        assert check_uint(255, 255, "decimals") == 255

    def test_above_max(self):
        with pytest.raises(ConversionError, match="out of range"):
            check_uint(256, 255, "decimals")

    def test_bool_rejected(self):
        with pytest.raises(ConversionError):
            check_uint(True, 255, "decimals")


class TestParseUint:
    def test_decimal_string(self):
        assert parse_uint("340282366920938463463374607431768211534", 2**256 - 1, "id") == 2**128 + 78

    def test_hex_string(self):
        assert parse_uint("0xFF", 255, "value") == 255

    def test_int_passthrough(self):
        assert parse_uint(7, 255, "value") == 7

    @pytest.mark.parametrize("value", ["", "0x", "1e3", "12.0"])
    def test_invalid_string(self, value):
        with pytest.raises(ParseError):
            parse_uint(value, 2**64 - 1, "value")


class TestValidateTokenDecimals:
    @pytest.mark.parametrize("decimals", [0, 6, 18, 255])
    def test_valid(self, decimals):
        assert validate_token_decimals(decimals, "decimals0") == decimals

    @pytest.mark.parametrize("decimals", [-1, 256, "18"])
    def test_invalid(self, decimals):
        with pytest.raises(ConversionError) as exc_info:
            validate_token_decimals(decimals, "decimals0")

        assert exc_info.value.field == "decimals0"


class TestDecimalContext:
    def test_precision(self):
        assert decimal_context().prec == 78
        assert decimal_context(30).prec == 30

    def test_division_by_zero_raises(self):
        with pytest.raises(DivisionByZero):
            decimal_context().divide(Decimal(1), Decimal(0))

    def test_overflow_raises(self):
        with pytest.raises(Overflow):
            decimal_context().scaleb(Decimal("9E+999999"), 1)

    def test_exact_256_bit_integers(self):
        context = decimal_context()
        value = 2**256 - 1
        assert int(context.create_decimal(value)) == value


class TestParseDecimal:
    def test_parses(self):
        assert parse_decimal("1.25", decimal_context(), "price") == Decimal("1.25")

    @pytest.mark.parametrize("value", ["abc", "NaN", "-Infinity", "", None])
    def test_invalid(self, value):
        with pytest.raises(ParseError) as exc_info:
            parse_decimal(value, decimal_context(), "price", stage="test")

        assert exc_info.value.field == "price"
        assert exc_info.value.stage == "test"


class TestFormatDecimal:
    def test_strips_trailing_zeros(self):
        assert format_decimal(Decimal("1.2500"), decimal_context()) == "1.25"

    def test_plain_notation(self):
        context = decimal_context()
        assert format_decimal(Decimal("1E+5"), context) == "100000"
        assert format_decimal(Decimal("1E-7"), context) == "0.0000001"

    def test_zero(self):
        assert format_decimal(Decimal("0E-18"), decimal_context()) == "0"
