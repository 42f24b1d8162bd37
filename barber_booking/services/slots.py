"""
Half-hour slot grid shared by the widget and the HTTP API.

Labels are zero-padded ``HH:MM`` strings. Label ``i`` falls on hour
``(i + base_offset) // 2``, on the half hour when ``i + base_offset`` is odd,
so the default offset of 18 with 17 labels covers 09:00 through 17:00.
"""
from typing import List, Tuple
from datetime import date, datetime, time
from barber_booking.core.config import settings

def generate_time_slots(base_offset: int = None, count: int = None) -> List[str]:
    """
    Build the ordered list of bookable time labels.
    """
    if base_offset is None:
        base_offset = settings.SLOT_BASE_OFFSET
    if count is None:
        count = settings.SLOT_COUNT
    
    slots = []
    for i in range(count):
        half_hours = i + base_offset
        hour = half_hours // 2
        minute = "00" if half_hours % 2 == 0 else "30"
        slots.append(f"{hour:02d}:{minute}")
    return slots

TIME_SLOTS = generate_time_slots()

def slot_time(label: str) -> time:
    """Parse an ``HH:MM`` label into a time of day."""
    try:
        hour, minute = label.split(":")
        return time(int(hour), int(minute))
    except (AttributeError, ValueError) as e:
        raise ValueError(f"Invalid time label: {label!r}") from e

def combine_slot(day: date, label: str) -> datetime:
    """Timestamp for ``day`` at the label's hour and minute."""
    return datetime.combine(day, slot_time(label))

def day_bounds(day: date) -> Tuple[datetime, datetime]:
    """First and last instant of ``day``, for inclusive range queries."""
    start_of_day = datetime.combine(day, time.min)
    end_of_day = datetime.combine(day, time.max)
    return start_of_day, end_of_day
