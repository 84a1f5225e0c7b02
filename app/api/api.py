"""
API Router Module - Aggregates all endpoint routers
"""
from fastapi import APIRouter

from app.api.endpoints import comments, health, movies, theaters

# Create the main API router
api_router = APIRouter()

# Include all endpoint routers with appropriate prefixes and tags
api_router.include_router(health.router, prefix="/health", tags=["Health"])
api_router.include_router(movies.router, prefix="/movies", tags=["Movies"])
api_router.include_router(comments.router, prefix="/movies", tags=["Comments"])
api_router.include_router(theaters.router, prefix="/theaters", tags=["Theaters"])
