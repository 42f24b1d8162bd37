from fastapi import APIRouter, Depends, HTTPException, Query, status
from datetime import date

from barber_booking.core.deps import get_booking_service
from barber_booking.core.exceptions import ExternalCallError
from barber_booking.schemas.booking import DayAvailability, SlotAvailability
from barber_booking.services.booking_service import BookingService
from barber_booking.services.slots import TIME_SLOTS

router = APIRouter()

@router.get("/", response_model=DayAvailability)
async def get_day_slots(
    day: date = Query(..., alias="date", description="Date in YYYY-MM-DD format"),
    booking_service: BookingService = Depends(get_booking_service)
):
    """
    Get every bookable slot for a date, marking the ones already taken
    """
    try:
        booked = await booking_service.fetch_booked_slots(day)
    except ExternalCallError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=e.message
        )
    
    slots = [
        SlotAvailability(time=label, available=label not in booked)
        for label in TIME_SLOTS
    ]
    return DayAvailability(date=day, slots=slots, bookedSlots=booked)
