from pydantic_settings import BaseSettings
from typing import List
import os
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    # App Settings
    APP_NAME: str = os.getenv("APP_NAME", "Soup Barber Booking")
    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://localhost:3000")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    
    # MongoDB Settings
    MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
    DB_NAME: str = os.getenv("DB_NAME", "soupbarber_db")
    BOOKINGS_COLLECTION: str = os.getenv("BOOKINGS_COLLECTION", "bookings")
    
    # Operator every booking is written for
    BARBER_EMAIL: str = os.getenv("BARBER_EMAIL", "devin@soupbarber.com")
    
    # Slot grid: label i is hour (i + offset) // 2, so offset 18 starts at 09:00
    SLOT_BASE_OFFSET: int = int(os.getenv("SLOT_BASE_OFFSET", "18"))
    SLOT_COUNT: int = int(os.getenv("SLOT_COUNT", "17"))
    
    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",  # React frontend
        "http://localhost:5173",  # Vite dev server
    ]
    
    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
