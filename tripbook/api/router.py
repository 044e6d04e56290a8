"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter

from tripbook.api.routes import admin, auth, bookings, catalog, posts, users

api_router = APIRouter(prefix="/api")
api_router.include_router(auth.router)
api_router.include_router(bookings.router)
api_router.include_router(posts.router)
api_router.include_router(catalog.router)
api_router.include_router(users.router)
api_router.include_router(admin.router)
