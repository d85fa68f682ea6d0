# api/v1/recs.py
from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from core.errors import NutritionError
from core.nutrition_calc import RecommendationCalculator
from api.v1.schemas import RecRequest, RecResponse

_LOG = logging.getLogger(__name__)

router = APIRouter()
_calc = RecommendationCalculator()


@router.post(
    "/calculate",
    response_model=RecResponse,
    status_code=status.HTTP_200_OK,
    summary="BMI, BMR, target calories, macros and a diet plan for one profile",
)
def calculate(body: RecRequest) -> RecResponse:
    try:
        rec = _calc.compute(body.to_input())
    except NutritionError as exc:
        _LOG.warning("calculation rejected: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return RecResponse.from_recommendation(rec)
