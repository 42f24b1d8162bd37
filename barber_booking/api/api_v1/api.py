from fastapi import APIRouter
from barber_booking.api.api_v1.endpoints import bookings, slots

router = APIRouter()

# Include all routers
router.include_router(slots.router, prefix="/slots", tags=["Slots"])
router.include_router(bookings.router, prefix="/bookings", tags=["Bookings"])
