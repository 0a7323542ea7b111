"""Health check route."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
def health_check() -> dict[str, str]:
    """Report that the service is up."""
    return {"status": "healthy", "service": "rentalhaven"}
