"""Marketplace data exceptions for gigmatch."""


class MarketplaceDataError(Exception):
    """Base exception for marketplace data problems."""

    pass


class InvalidRecordError(MarketplaceDataError):
    """Raised when a record in a marketplace file fails validation."""

    def __init__(self, kind: str, index: int, reason: str):
        self.kind = kind
        self.index = index
        self.reason = reason
        super().__init__(f"Invalid {kind} record #{index}: {reason}")


class UnknownRecordError(MarketplaceDataError):
    """Raised when looking up a record id that is not loaded."""

    def __init__(self, kind: str, record_id: str):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"Unknown {kind}: {record_id}")
