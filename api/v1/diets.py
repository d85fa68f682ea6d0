# api/v1/diets.py
from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from core.catalog import all_plans, plan_for
from core.models import DietPlan, Goal

router = APIRouter()


@router.get(
    "",
    response_model=dict[str, DietPlan],
    status_code=status.HTTP_200_OK,
    summary="All diet plans keyed by goal",
)
def list_diets() -> dict[str, DietPlan]:
    return {goal.value: plan for goal, plan in all_plans().items()}


@router.get(
    "/{goal}",
    response_model=DietPlan,
    summary="The diet plan for one goal",
)
def get_diet(goal: str) -> DietPlan:
    # plan_for() would silently fall back to maintenance; a URL should not
    try:
        known = Goal(goal)
    except ValueError:
        raise HTTPException(status_code=404, detail="Diet plan not found") from None
    return plan_for(known)
