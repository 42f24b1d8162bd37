from typing import Dict, Any, List, Optional
from datetime import date, datetime
import logging
from pymongo.errors import DuplicateKeyError, PyMongoError
from barber_booking.core.config import settings
from barber_booking.core.exceptions import BookingValidationError, ExternalCallError, SlotUnavailableError
from barber_booking.schemas.booking import BookingStatus, ContactInfo
from barber_booking.services.slots import combine_slot, day_bounds

logger = logging.getLogger(__name__)

class BookingService:
    """
    Reads and writes booking records in a single MongoDB collection.
    
    Availability is only ever checked by ``fetch_booked_slots``; ``create_booking``
    writes without re-checking, so a slot can still be taken between the two
    calls. The unique ``(date, time)`` index turns that case into a
    ``SlotUnavailableError``.
    """

    def __init__(self, collection, barber_email: Optional[str] = None):
        self.collection = collection
        self.barber_email = barber_email or settings.BARBER_EMAIL

    async def fetch_booked_slots(self, day: Optional[date]) -> List[str]:
        """
        Get the time labels already booked on ``day``.
        
        Duplicates are kept as stored.
        """
        if day is None:
            raise BookingValidationError("Please select a date")
        
        start_of_day, end_of_day = day_bounds(day)
        query = {"date": {"$gte": start_of_day, "$lte": end_of_day}}
        
        try:
            cursor = self.collection.find(query, {"time": 1})
            records = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error(f"Error fetching booked slots for {day}: {e}")
            raise ExternalCallError("Could not load booked times. Please try again.") from e
        
        return [record["time"] for record in records if record.get("time")]

    async def create_booking(self, day: date, time_label: str, contact: ContactInfo) -> Dict[str, Any]:
        """
        Write one confirmed booking for ``day`` at ``time_label``.
        
        Returns the stored document with its ``_id`` also exposed as ``id``.
        """
        booking_data = {
            "date": combine_slot(day, time_label),
            "time": time_label,
            "name": contact.name,
            "email": contact.email,
            "phone": contact.phone,
            "barberEmail": self.barber_email,
            "status": BookingStatus.CONFIRMED.value,
            "createdAt": datetime.utcnow(),
        }
        
        try:
            result = await self.collection.insert_one(booking_data)
        except DuplicateKeyError as e:
            logger.warning(f"Slot {day} {time_label} was booked by someone else")
            raise SlotUnavailableError("That time was just booked. Please pick another slot.") from e
        except PyMongoError as e:
            logger.error(f"Error creating booking: {e}")
            raise ExternalCallError("Failed to create booking. Please try again.") from e
        
        booking_data["_id"] = result.inserted_id
        booking_data["id"] = str(result.inserted_id)
        logger.info(f"Booking {booking_data['id']} confirmed for {day} {time_label}")
        
        return booking_data
