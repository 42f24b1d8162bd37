from datetime import date, datetime
import pytest
from pymongo.errors import PyMongoError, ServerSelectionTimeoutError

from barber_booking.core.exceptions import BookingValidationError, ExternalCallError, SlotUnavailableError

DAY = date(2024, 6, 1)

@pytest.mark.asyncio
async def test_fetch_booked_slots_returns_times_for_that_day(booking_service, bookings_collection):
    bookings_collection.add_booking(DAY, "09:00")
    bookings_collection.add_booking(DAY, "16:30")
    bookings_collection.add_booking(date(2024, 6, 2), "10:00")
    bookings_collection.add_booking(date(2024, 5, 31), "17:00")

    booked = await booking_service.fetch_booked_slots(DAY)

    assert sorted(booked) == ["09:00", "16:30"]

@pytest.mark.asyncio
async def test_fetch_booked_slots_queries_local_day_range(booking_service, bookings_collection):
    await booking_service.fetch_booked_slots(DAY)

    assert bookings_collection.queries == [
        {"date": {"$gte": datetime(2024, 6, 1, 0, 0), "$lte": datetime(2024, 6, 1, 23, 59, 59, 999999)}}
    ]

@pytest.mark.asyncio
async def test_fetch_booked_slots_keeps_duplicates(booking_service, bookings_collection):
    bookings_collection.add_booking(DAY, "10:00")
    bookings_collection.add_booking(DAY, "10:00")

    assert await booking_service.fetch_booked_slots(DAY) == ["10:00", "10:00"]

@pytest.mark.asyncio
async def test_fetch_booked_slots_requires_a_date(booking_service, bookings_collection):
    with pytest.raises(BookingValidationError):
        await booking_service.fetch_booked_slots(None)
    assert bookings_collection.queries == []

@pytest.mark.asyncio
async def test_fetch_booked_slots_wraps_store_errors(booking_service, bookings_collection):
    bookings_collection.find_error = ServerSelectionTimeoutError("no servers")

    with pytest.raises(ExternalCallError):
        await booking_service.fetch_booked_slots(DAY)

@pytest.mark.asyncio
async def test_create_booking_writes_confirmed_record(booking_service, bookings_collection, contact):
    booking = await booking_service.create_booking(DAY, "14:30", contact)

    assert bookings_collection.insert_calls == 1
    stored = bookings_collection.documents[0]
    assert stored["date"] == datetime(2024, 6, 1, 14, 30)
    assert stored["time"] == "14:30"
    assert stored["name"] == "Jane Doe"
    assert stored["email"] == "jane@example.com"
    assert stored["phone"] == "555-0100"
    assert stored["barberEmail"] == "barber@example.com"
    assert stored["status"] == "confirmed"
    assert isinstance(stored["createdAt"], datetime)
    assert booking["id"] == str(stored["_id"])

@pytest.mark.asyncio
async def test_create_booking_time_of_day_matches_label(booking_service, contact):
    booking = await booking_service.create_booking(DAY, "09:30", contact)

    assert booking["time"] == "09:30"
    assert (booking["date"].hour, booking["date"].minute) == (9, 30)

@pytest.mark.asyncio
async def test_create_booking_does_not_recheck_availability(booking_service, bookings_collection, contact):
    await booking_service.create_booking(DAY, "11:00", contact)

    assert bookings_collection.queries == []

@pytest.mark.asyncio
async def test_create_booking_reports_taken_slot(booking_service, bookings_collection, contact):
    bookings_collection.add_booking(DAY, "11:00")

    with pytest.raises(SlotUnavailableError):
        await booking_service.create_booking(DAY, "11:00", contact)
    assert len(bookings_collection.documents) == 1

@pytest.mark.asyncio
async def test_create_booking_wraps_store_errors(booking_service, bookings_collection, contact):
    bookings_collection.insert_error = PyMongoError("write failed")

    with pytest.raises(ExternalCallError) as exc_info:
        await booking_service.create_booking(DAY, "11:00", contact)
    assert not isinstance(exc_info.value, SlotUnavailableError)
    assert exc_info.value.message == "Failed to create booking. Please try again."
