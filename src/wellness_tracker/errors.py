"""Error types shared across the wellness tracker."""


class WellnessTrackerError(Exception):
    """Base error for the wellness tracker."""


class ValidationError(WellnessTrackerError, ValueError):
    """Raised when input is rejected before any write is attempted."""


class BackendError(WellnessTrackerError):
    """Raised when a call to the data backend fails."""


class EntryNotFoundError(WellnessTrackerError):
    """Raised when an update or delete matches no stored row."""

    def __init__(self, table: str, entry_id: object) -> None:
        self.table = table
        self.entry_id = entry_id
        super().__init__(f"No row {entry_id} in {table}")
