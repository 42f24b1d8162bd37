from barber_booking.db.mongodb import get_bookings_collection
from barber_booking.services.booking_service import BookingService

async def get_booking_service() -> BookingService:
    """
    Dependency that provides a BookingService bound to the bookings collection
    """
    return BookingService(get_bookings_collection())
