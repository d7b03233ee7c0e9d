"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cinepair.api.routes import daily, health, pairings, schedules, travel, venues
from cinepair.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create FastAPI app
app = FastAPI(
    title="CinePair API",
    description="Plans back-to-back movie showings across theaters",
    version="0.1.0",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:5173",
    ],  # Frontend development servers
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(pairings.router, prefix="/api", tags=["pairings"])
app.include_router(schedules.router, prefix="/api", tags=["schedules"])
app.include_router(daily.router, prefix="/api", tags=["daily"])
app.include_router(venues.router, prefix="/api", tags=["venues"])
app.include_router(travel.router, prefix="/api", tags=["travel"])


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    uvicorn.run("cinepair.main:app", host=settings.api_host, port=settings.api_port)
