"""Error taxonomy. Handlers map these to HTTP status codes."""

INVALID_INPUT = "Invalid input"
COUNT_OUT_OF_RANGE = "Lunch and dinner counts must be between 0 and 2"
DUPLICATE_DATE = "An entry for this date already exists"


class MealTrackerError(Exception):
    """Base class for application errors."""


class ValidationError(MealTrackerError):
    """Request payload has the wrong shape or values. Message is shown to the client."""

    def __init__(self, message: str = INVALID_INPUT) -> None:
        super().__init__(message)
        self.message = message


class DuplicateDateError(ValidationError):
    """An entry for the same date is already stored."""

    def __init__(self, date: str) -> None:
        super().__init__(DUPLICATE_DATE)
        self.date = date


class StoreError(MealTrackerError):
    """Backing store could not be reached or understood."""


class StoreWriteError(StoreError):
    """A submission was rejected or never left the process."""


class StoreReadError(StoreError):
    """The export could not be fetched or parsed."""
