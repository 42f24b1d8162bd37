from motor.motor_asyncio import AsyncIOMotorClient
from barber_booking.core.config import settings
import logging

logger = logging.getLogger(__name__)

class Database:
    client: AsyncIOMotorClient = None
    db = None

db = Database()

async def connect_to_mongo():
    """Connect to MongoDB."""
    try:
        logger.info("Connecting to MongoDB...")
        db.client = AsyncIOMotorClient(settings.MONGO_URI)
        db.db = db.client[settings.DB_NAME]
        logger.info("Connected to MongoDB.")
        
        await create_indexes()
        
    except Exception as e:
        logger.error(f"Could not connect to MongoDB: {e}")
        raise e

async def close_mongo_connection():
    """Close MongoDB connection."""
    if db.client:
        logger.info("Closing MongoDB connection...")
        db.client.close()
        logger.info("MongoDB connection closed.")

def get_bookings_collection():
    """Get the collection booking records are read from and written to."""
    return db.db[settings.BOOKINGS_COLLECTION]

async def create_indexes():
    """Create indexes for the bookings collection."""
    try:
        bookings = get_bookings_collection()
        
        # One booking per slot; a concurrent second write fails with DuplicateKeyError.
        # The date prefix also serves the single-day range query.
        await bookings.create_index([("date", 1), ("time", 1)], unique=True)
        
        logger.info("MongoDB indexes created successfully.")
    except Exception as e:
        logger.error(f"Failed to create MongoDB indexes: {e}")
