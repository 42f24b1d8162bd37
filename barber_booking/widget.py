"""
Client-side booking controller.

``BookingWidget`` holds the form state of the appointment picker: the chosen
day, the chosen half-hour slot, the contact fields and the booked-slots view
for the chosen day. Event handlers (``select_date``, ``select_time``,
``update_contact``, ``submit``, ``reset``) are the only things that mutate it,
and ``render`` turns it into the view model the page draws.
"""
from typing import Any, Callable, Dict, Iterable, List, Optional
from datetime import date, datetime
from enum import Enum
import logging

from barber_booking.core.exceptions import BookingValidationError, ExternalCallError
from barber_booking.schemas.booking import ContactInfo
from barber_booking.services.booking_service import BookingService
from barber_booking.services.slots import TIME_SLOTS

logger = logging.getLogger(__name__)

CONTACT_FIELDS = ("name", "email", "phone")

MISSING_FIELDS_MESSAGE = "Please fill in all fields"
PAST_DATE_MESSAGE = "Please select a date from today onwards"
CONFIRMED_TITLE = "Booking Confirmed!"
CONFIRMED_MESSAGE = "We'll see you at your appointment."

class WidgetState(str, Enum):
    NO_DATE_SELECTED = "noDateSelected"
    DATE_SELECTED = "dateSelected"
    DATE_AND_TIME_SELECTED = "dateAndTimeSelected"
    SUBMITTING = "submitting"
    CONFIRMED = "confirmed"

class BookingWidget:

    def __init__(
        self,
        booking_service: BookingService,
        time_slots: Optional[Iterable[str]] = None,
        today: Callable[[], date] = date.today,
    ):
        self.booking_service = booking_service
        self.time_slots = list(time_slots) if time_slots is not None else list(TIME_SLOTS)
        self._today = today

        self.selected_date: Optional[date] = None
        self.selected_time: Optional[str] = None
        self.booked_slots: List[str] = []
        self.contact = ContactInfo()
        self.is_submitting = False
        self.booking_success = False
        self.error: Optional[str] = None

        # Bumped on every date change; only the newest lookup may update booked_slots
        self._fetch_generation = 0

    @property
    def state(self) -> WidgetState:
        if self.booking_success:
            return WidgetState.CONFIRMED
        if self.is_submitting:
            return WidgetState.SUBMITTING
        if self.selected_date is None:
            return WidgetState.NO_DATE_SELECTED
        if self.selected_time is None:
            return WidgetState.DATE_SELECTED
        return WidgetState.DATE_AND_TIME_SELECTED

    def is_slot_booked(self, label: str) -> bool:
        return label in self.booked_slots

    async def select_date(self, day: Optional[date]) -> None:
        """
        Pick a calendar day, dropping any chosen time, and load its bookings.

        Passing None clears the date without a lookup.
        """
        if self.booking_success or self.is_submitting:
            logger.debug("Ignoring date selection while the form is locked")
            return

        if isinstance(day, datetime):
            day = day.date()
        if day is not None and day < self._today():
            raise BookingValidationError(PAST_DATE_MESSAGE)

        self._fetch_generation += 1
        self.selected_date = day
        self.selected_time = None
        self.error = None

        if day is not None:
            await self.fetch_booked_slots()

    async def fetch_booked_slots(self) -> None:
        """
        Refresh the booked-slots view for the selected day.

        A failed lookup is logged and reported through ``error`` while the
        previous view is kept, so slots stay selectable even though their
        availability is unknown.
        """
        if self.selected_date is None:
            return

        generation = self._fetch_generation
        day = self.selected_date

        try:
            booked = await self.booking_service.fetch_booked_slots(day)
        except ExternalCallError as e:
            logger.error(f"Error fetching booked slots: {e}")
            if generation == self._fetch_generation:
                self.error = e.message
            return

        if generation != self._fetch_generation:
            logger.debug(f"Discarding booked slots for {day}, a newer date was selected")
            return

        self.booked_slots = booked

    def select_time(self, label: str) -> bool:
        """
        Pick a time label. Returns False, leaving state unchanged, when the
        label is booked, unknown, or there is nothing to pick it for.
        """
        if self.selected_date is None or self.is_submitting or self.booking_success:
            return False
        if label not in self.time_slots or self.is_slot_booked(label):
            return False

        self.selected_time = label
        return True

    def update_contact(self, **fields: str) -> None:
        if self.is_submitting:
            logger.debug("Ignoring contact change while submitting")
            return

        unknown = set(fields) - set(CONTACT_FIELDS)
        if unknown:
            raise BookingValidationError(f"Unknown contact field(s): {', '.join(sorted(unknown))}")

        self.contact = ContactInfo(**{**self.contact.model_dump(), **fields})

    async def submit(self) -> Optional[Dict[str, Any]]:
        """
        Write the booking. Returns the stored record, or None when the write
        failed and the form is back to editable with ``error`` set.

        Raises BookingValidationError without touching the store if any field
        is missing.
        """
        if self.is_submitting:
            logger.debug("Submission already in progress")
            return None

        if not (self.selected_date and self.selected_time and self.contact.is_complete()):
            raise BookingValidationError(MISSING_FIELDS_MESSAGE)

        self.is_submitting = True
        self.error = None

        try:
            booking = await self.booking_service.create_booking(
                self.selected_date, self.selected_time, self.contact
            )
        except ExternalCallError as e:
            logger.error(f"Error creating booking: {e}")
            self.error = e.message
            return None
        finally:
            self.is_submitting = False

        self.booking_success = True
        self._clear_form()
        return booking

    def reset(self) -> None:
        """Leave the confirmation panel and start a new booking."""
        if self.is_submitting:
            return
        self.booking_success = False
        self._clear_form()

    def _clear_form(self) -> None:
        self._fetch_generation += 1
        self.selected_date = None
        self.selected_time = None
        self.booked_slots = []
        self.contact = ContactInfo()
        self.error = None

    def render(self) -> Dict[str, Any]:
        """
        Build the view model for the current state.
        """
        if self.booking_success:
            return {
                "state": self.state.value,
                "confirmed": True,
                "title": CONFIRMED_TITLE,
                "message": CONFIRMED_MESSAGE,
                "resetLabel": "Book Another Appointment",
            }

        slots = [
            {
                "time": label,
                "disabled": self.is_slot_booked(label),
                "selected": label == self.selected_time,
            }
            for label in self.time_slots
        ]
        submit_disabled = self.is_submitting or self.selected_date is None or self.selected_time is None

        return {
            "state": self.state.value,
            "confirmed": False,
            "minDate": self._today(),
            "selectedDate": self.selected_date,
            "slots": slots,
            "contact": self.contact.model_dump(),
            "submitDisabled": submit_disabled,
            "submitLabel": "Booking..." if self.is_submitting else "Book Appointment",
            "error": self.error,
        }
