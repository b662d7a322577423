"""Main API router aggregation."""

from fastapi import APIRouter

from journal_api.api.journals import router as journals_router
from journal_api.api.relationships import router as relationships_router
from journal_api.api.users import router as users_router

# Main API router
api_router = APIRouter(prefix="/api")

# Include all sub-routers
api_router.include_router(journals_router)
api_router.include_router(users_router)
api_router.include_router(relationships_router)
