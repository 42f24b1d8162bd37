class BookingError(Exception):
    """Base class for booking errors that carry a user-facing message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BookingValidationError(BookingError):
    """A required field is missing or a value is not bookable."""


class ExternalCallError(BookingError):
    """The bookings store could not be queried or written."""


class SlotUnavailableError(ExternalCallError):
    """The store rejected the write because the slot is already booked."""
