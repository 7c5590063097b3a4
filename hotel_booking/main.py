"""
Application entry point
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from hotel_booking import __version__
from hotel_booking.config import settings
from hotel_booking.database import init_db
from hotel_booking.routers import auth, booking

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and create tables on startup"""
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    init_db()
    logger.info(f"{settings.APP_NAME} {__version__} started")

    yield


app = FastAPI(
    title=settings.APP_NAME,
    description="Hotel room booking for event participants",
    version=__version__,
    lifespan=lifespan
)

app.include_router(auth.router)
app.include_router(booking.router)


@app.get("/")
def root():
    return {
        "name": settings.APP_NAME,
        "version": __version__
    }


@app.get("/health")
def health_check():
    """Health check"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("hotel_booking.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)
