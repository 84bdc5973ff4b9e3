"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter

from app.api.routes import booking
from app.core.config import get_settings

api_router = APIRouter(prefix=get_settings().API_PREFIX)
api_router.include_router(booking.router)
