"""Custom exceptions for the Graphene SDK."""

from typing import Optional


class GrapheneError(Exception):
    """Base exception for all Graphene SDK errors."""

    pass


class DecodeError(GrapheneError):
    """Base exception for errors raised while decoding a strategy.

    Attributes:
        message: Human-readable description of the failure
        field: Name of the offending field (e.g. "order0.B"), if known
        stage: Pipeline stage that failed (e.g. "decode_float"), if known
    """

    label = "Decode error"

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        stage: Optional[str] = None,
    ):
        self.message = message
        self.field = field
        self.stage = stage
        super().__init__(f"{self.label}{self._location()}: {message}")

    def _location(self) -> str:
        if self.stage and self.field:
            return f" in {self.stage} ({self.field})"
        if self.stage:
            return f" in {self.stage}"
        if self.field:
            return f" ({self.field})"
        return ""


class ParseError(DecodeError):
    """Raised when a numeric string or address cannot be parsed."""

    label = "Parse error"


class ConversionError(DecodeError):
    """Raised when a value does not fit the target numeric range."""

    label = "Conversion error"


class SerializationError(DecodeError):
    """Raised when the canonical strategy snapshot cannot be produced."""

    label = "Serialization error"
