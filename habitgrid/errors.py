# habitgrid/errors.py


class HabitTrackerError(Exception):
    """Base class for every error the tracker surfaces to its callers."""

    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class NotFound(HabitTrackerError):
    status_code = 404


class InvalidInput(HabitTrackerError):
    status_code = 400


class StorageError(HabitTrackerError):
    """The database failed; carries the driver's message, never the URL."""

    status_code = 500

    @classmethod
    def from_exception(cls, action: str, exc: Exception) -> "StorageError":
        detail = getattr(exc, "orig", None) or exc
        return cls(f"failed to {action}: {detail}")


class Internal(HabitTrackerError):
    status_code = 500
