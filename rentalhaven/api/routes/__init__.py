"""API routes package."""

from fastapi import APIRouter

from rentalhaven.api.routes import auth, bookings, files, health, properties, seed

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(auth.router)
api_router.include_router(properties.router)
api_router.include_router(seed.router)
api_router.include_router(bookings.router)
api_router.include_router(files.router)
