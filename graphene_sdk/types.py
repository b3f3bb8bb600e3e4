"""Type definitions for the Graphene SDK."""

from dataclasses import dataclass

from .constants import MAX_U64, MAX_U128, MAX_U256, STRATEGY_SLOTS
from .errors import ParseError
from .utils import check_uint, parse_uint, to_checksum_address


@dataclass(frozen=True)
class RawOrder:
    """One side of an on-chain strategy.

    y: current liquidity (u128)
    z: total capacity (u128)
    A: compressed-float span between the lowest and highest rate (u64)
    B: compressed-float lowest rate (u64)
    """

    y: int
    z: int
    A: int
    B: int

    def __post_init__(self):
        check_uint(self.y, MAX_U128, "y")
        check_uint(self.z, MAX_U128, "z")
        check_uint(self.A, MAX_U64, "A")
        check_uint(self.B, MAX_U64, "B")

    @classmethod
    def from_dict(cls, data: dict) -> "RawOrder":
        if not isinstance(data, dict):
            raise ParseError(f"RawOrder must be an object, got {type(data).__name__}")
        try:
            return cls(
                y=parse_uint(data["y"], MAX_U128, "y"),
                z=parse_uint(data["z"], MAX_U128, "z"),
                A=parse_uint(data["A"], MAX_U64, "A"),
                B=parse_uint(data["B"], MAX_U64, "B"),
            )
        except KeyError as e:
            raise ParseError(f"Missing required field in RawOrder: {e}")

    def to_dict(self) -> dict:
        return {"y": self.y, "z": self.z, "A": self.A, "B": self.B}


@dataclass(frozen=True)
class RawStrategy:
    """On-chain strategy record.

    order0 sells token0 for token1; order1 sells token1 for token0.
    Addresses are stored in EIP-55 checksum form.
    """

    id: int
    owner: str
    token0: str
    token1: str
    order0: RawOrder
    order1: RawOrder

    def __post_init__(self):
        check_uint(self.id, MAX_U256, "id")
        object.__setattr__(self, "owner", to_checksum_address(self.owner, "owner"))
        object.__setattr__(self, "token0", to_checksum_address(self.token0, "tokens[0]"))
        object.__setattr__(self, "token1", to_checksum_address(self.token1, "tokens[1]"))

    @classmethod
    def from_dict(cls, data: dict) -> "RawStrategy":
        """Create from the canonical object shape (id, owner, tokens, orders)."""
        if not isinstance(data, dict):
            raise ParseError(f"RawStrategy must be an object, got {type(data).__name__}")
        try:
            tokens = data["tokens"]
            orders = data["orders"]
            if not isinstance(tokens, (list, tuple)):
                raise ParseError(f"expected a list, got {type(tokens).__name__}", field="tokens")
            if not isinstance(orders, (list, tuple)):
                raise ParseError(f"expected a list, got {type(orders).__name__}", field="orders")
            if len(tokens) != STRATEGY_SLOTS:
                raise ParseError(f"expected {STRATEGY_SLOTS} tokens, got {len(tokens)}", field="tokens")
            if len(orders) != STRATEGY_SLOTS:
                raise ParseError(f"expected {STRATEGY_SLOTS} orders, got {len(orders)}", field="orders")
            return cls(
                id=parse_uint(data["id"], MAX_U256, "id"),
                owner=data["owner"],
                token0=tokens[0],
                token1=tokens[1],
                order0=_order_from_dict(orders[0], "orders[0]"),
                order1=_order_from_dict(orders[1], "orders[1]"),
            )
        except KeyError as e:
            raise ParseError(f"Missing required field in RawStrategy: {e}")

    def to_dict(self) -> dict:
        """Canonical field order: id, owner, tokens, orders. The id is a 0x hex quantity."""
        return {
            "id": hex(self.id),
            "owner": self.owner,
            "tokens": [self.token0, self.token1],
            "orders": [self.order0.to_dict(), self.order1.to_dict()],
        }


def _order_from_dict(data: dict, field_name: str) -> RawOrder:
    if not isinstance(data, dict):
        raise ParseError(f"expected an object, got {type(data).__name__}", field=field_name)
    return RawOrder.from_dict(data)


@dataclass(frozen=True)
class DecodedOrder:
    """Order rates in the encoded unit, before token decimals are applied."""

    liquidity: str
    lowest_rate: str
    highest_rate: str
    marginal_rate: str


@dataclass(frozen=True)
class DecodedStrategy:
    """Both decoded orders of a strategy plus its canonical snapshot."""

    id: str
    token0: str
    token1: str
    order0: DecodedOrder
    order1: DecodedOrder
    encoded: str


@dataclass(frozen=True)
class ParsedStrategy:
    """Human-readable strategy with prices quoted as token1 per token0."""

    id: str
    base_token: str
    quote_token: str
    buy_price_low: str
    buy_price_marginal: str
    buy_price_high: str
    buy_budget: str
    sell_price_low: str
    sell_price_marginal: str
    sell_price_high: str
    sell_budget: str
    # Percentage, not parts per million
    spread_ppm: str
    encoded: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "base_token": self.base_token,
            "quote_token": self.quote_token,
            "buy_price_low": self.buy_price_low,
            "buy_price_marginal": self.buy_price_marginal,
            "buy_price_high": self.buy_price_high,
            "buy_budget": self.buy_budget,
            "sell_price_low": self.sell_price_low,
            "sell_price_marginal": self.sell_price_marginal,
            "sell_price_high": self.sell_price_high,
            "sell_budget": self.sell_budget,
            "spread_ppm": self.spread_ppm,
            "encoded": self.encoded,
        }

