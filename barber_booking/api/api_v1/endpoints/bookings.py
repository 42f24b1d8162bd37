from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import List
from datetime import date
import logging

from barber_booking.core.deps import get_booking_service
from barber_booking.core.exceptions import ExternalCallError, SlotUnavailableError
from barber_booking.schemas.booking import BookingCreate, BookingResponse, ContactInfo
from barber_booking.services.booking_service import BookingService
from barber_booking.services.slots import TIME_SLOTS

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("/booked", response_model=List[str])
async def get_booked_slots(
    day: date = Query(..., alias="date", description="Date in YYYY-MM-DD format"),
    booking_service: BookingService = Depends(get_booking_service)
):
    """
    Get the time labels already booked on a date
    """
    try:
        return await booking_service.fetch_booked_slots(day)
    except ExternalCallError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=e.message
        )

@router.post("/", response_model=BookingResponse)
async def create_new_booking(
    booking_in: BookingCreate,
    booking_service: BookingService = Depends(get_booking_service)
):
    """
    Book a slot. Availability is not re-checked here; the store's unique
    index rejects a slot that is already taken.
    """
    if booking_in.time not in TIME_SLOTS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid time. Must be one of: {', '.join(TIME_SLOTS)}"
        )
    
    if booking_in.date < date.today():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot book a date in the past"
        )
    
    contact = ContactInfo(name=booking_in.name, email=booking_in.email, phone=booking_in.phone)
    
    try:
        booking = await booking_service.create_booking(booking_in.date, booking_in.time, contact)
    except SlotUnavailableError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=e.message
        )
    except ExternalCallError as e:
        logger.error(f"Error in create_new_booking: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=e.message
        )
    
    return booking
