from types import SimpleNamespace
from datetime import date
import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from barber_booking.schemas.booking import ContactInfo
from barber_booking.services.booking_service import BookingService
from barber_booking.services.slots import combine_slot

class FakeCursor:
    def __init__(self, documents):
        self._documents = documents

    async def to_list(self, length=None):
        if length is None:
            return list(self._documents)
        return list(self._documents[:length])

class FakeCollection:
    """In-memory stand-in for the motor bookings collection."""

    def __init__(self):
        self.documents = []
        self.queries = []
        self.insert_calls = 0
        self.find_error = None
        self.insert_error = None
        self.indexes = []

    def find(self, query, projection=None):
        self.queries.append(query)
        if self.find_error:
            raise self.find_error
        date_range = query.get("date", {})
        matches = [
            dict(doc) for doc in self.documents
            if date_range.get("$gte", doc["date"]) <= doc["date"] <= date_range.get("$lte", doc["date"])
        ]
        return FakeCursor(matches)

    async def create_index(self, keys, **kwargs):
        self.indexes.append((keys, kwargs))
        return "index"

    async def insert_one(self, document):
        self.insert_calls += 1
        if self.insert_error:
            raise self.insert_error
        for doc in self.documents:
            if doc["date"] == document["date"] and doc["time"] == document["time"]:
                raise DuplicateKeyError("E11000 duplicate key error collection: bookings index: date_1_time_1")
        document["_id"] = ObjectId()
        self.documents.append(dict(document))
        return SimpleNamespace(inserted_id=document["_id"])

    def add_booking(self, day: date, label: str, **extra):
        doc = {"_id": ObjectId(), "date": combine_slot(day, label), "time": label, "status": "confirmed"}
        doc.update(extra)
        self.documents.append(doc)
        return doc

@pytest.fixture
def bookings_collection():
    return FakeCollection()

@pytest.fixture
def booking_service(bookings_collection):
    return BookingService(bookings_collection, barber_email="barber@example.com")

@pytest.fixture
def contact():
    return ContactInfo(name="Jane Doe", email="jane@example.com", phone="555-0100")
