"""Exceptions raised by the Frontline client model."""

from __future__ import annotations


class FrontlineError(Exception):
    """Base class for every error raised by the client model."""


class CellValidationError(FrontlineError, ValueError):
    """Raised when a cell attribute is written or read with an out-of-domain value."""

    def __init__(self, attribute: str, value: object, message: str) -> None:
        super().__init__(f"invalid value {value!r} for attribute {attribute!r}: {message}")
        self.attribute = attribute
        self.value = value


class DecodeError(FrontlineError, ValueError):
    """Raised by the enumeration codecs for unknown codes or variants."""


class InvalidIndexError(FrontlineError, IndexError):
    """Raised when a cell index falls outside ``[0, length)``."""

    def __init__(self, index: object, length: int) -> None:
        super().__init__(f"invalid index {index!r} (grid length {length})")
        self.index = index
        self.length = length


class InvalidUpdate(FrontlineError):
    """Raised when an inbound update envelope does not match the wire schema."""

    def __init__(self, detail: str | None = None) -> None:
        super().__init__("invalid update" if detail is None else f"invalid update: {detail}")
        self.detail = detail
