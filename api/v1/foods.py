# api/v1/foods.py
from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from core.catalog import all_foods, foods_by_category
from core.errors import UnknownFoodCategory
from core.models import FoodItem

router = APIRouter()


@router.get(
    "",
    response_model=dict[str, list[FoodItem]],
    status_code=status.HTTP_200_OK,
    summary="Reference foods grouped by category",
)
def list_foods() -> dict[str, list[FoodItem]]:
    return {cat.value: list(items) for cat, items in all_foods().items()}


@router.get(
    "/{category}",
    response_model=list[FoodItem],
    summary="Reference foods in one category (proteins, carbs, fats)",
)
def get_foods(category: str) -> list[FoodItem]:
    try:
        return list(foods_by_category(category))
    except UnknownFoodCategory:
        raise HTTPException(status_code=404, detail="Food category not found") from None
