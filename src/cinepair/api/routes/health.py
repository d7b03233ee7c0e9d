"""Health check endpoint."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """Liveness probe; does not touch the database or travel APIs."""
    return {"status": "ok"}
