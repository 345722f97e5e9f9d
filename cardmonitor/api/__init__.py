"""API routers."""

from fastapi import APIRouter

from . import cards, system

api_router = APIRouter()
api_router.include_router(system.router)
api_router.include_router(cards.router, tags=["cards"])
