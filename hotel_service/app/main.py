import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from shared.core.config import settings
from shared.core.database import Base, hotel_engine
from shared.helpers.exception_handler import setup_exception_handlers
from shared.wrappers.response_wrapper import JsonResponseMiddleware
from .models import hotel  # noqa: F401  registers the hotel tables
from .router.hotel import (
    bills_router,
    bookings_router,
    feedback_router,
    gallery_router,
    guests_router,
    rooms_router,
)
from .router.overview import dashboard_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

app = FastAPI(title="Hotel Front Desk API")

# Create all tables
Base.metadata.create_all(bind=hotel_engine)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(JsonResponseMiddleware)

setup_exception_handlers(app)

# Include routers
app.include_router(guests_router.router)
app.include_router(rooms_router.router)
app.include_router(rooms_router.room_types_router)
app.include_router(bookings_router.router)
app.include_router(bills_router.router)
app.include_router(feedback_router.router)
app.include_router(gallery_router.router)
app.include_router(dashboard_router.router)

# Uploaded gallery images
os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
app.mount(settings.UPLOAD_BASE_URL, StaticFiles(directory=settings.UPLOAD_DIR), name="uploads")


@app.get("/api/health")
def health():
    return {"status": "healthy"}
