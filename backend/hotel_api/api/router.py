"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter
from hotel_api.api.routes import hotels
from hotel_api.core.config import get_settings

api_router = APIRouter(prefix=get_settings().API_PREFIX)
api_router.include_router(hotels.router)
