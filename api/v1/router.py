# api/v1/router.py
from fastapi import APIRouter

from . import diets, foods, recs

api_router = APIRouter()

api_router.include_router(recs.router, tags=["Recommendations"])
api_router.include_router(diets.router, prefix="/diets", tags=["Diets"])
api_router.include_router(foods.router, prefix="/foods", tags=["Foods"])
