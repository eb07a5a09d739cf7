"""API routers package."""

from fastapi import APIRouter

from src.paging.api.routers.articles import router as articles_router

api_router = APIRouter()

# Paginated article listings
api_router.include_router(articles_router)
