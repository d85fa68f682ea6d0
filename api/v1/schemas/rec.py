# api/v1/schemas/rec.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from core.models import ActivityLevel, DietPlan
from core.nutrition_calc import (
    MAX_AGE,
    MAX_HEIGHT_CM,
    MAX_WEIGHT_KG,
    BiometricInput,
    Recommendation,
)

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecRequest(BaseModel):
    weight:         float = Field(..., gt=0, le=MAX_WEIGHT_KG, allow_inf_nan=False, description="kg")
    height:         float = Field(..., gt=0, le=MAX_HEIGHT_CM, allow_inf_nan=False, description="cm")
    age:            int = Field(..., gt=0, le=MAX_AGE)
    gender:         str = Field(..., min_length=1, examples=["male", "female"])
    activity_level: ActivityLevel
    # unknown goals are accepted and fall back to the maintenance plan
    goal:           str = Field(..., min_length=1, examples=["weightLoss", "muscleGain", "maintenance"])

    model_config = _CAMEL

    def to_input(self) -> BiometricInput:
        return BiometricInput.from_raw(
            weight=self.weight,
            height=self.height,
            age=self.age,
            gender=self.gender,
            activity_level=self.activity_level,
            goal=self.goal,
        )


class MacrosOut(BaseModel):
    protein: int
    carbs:   int
    fat:     int


class RecResponse(BaseModel):
    bmi:            float
    bmr:            int
    daily_calories: int
    bmi_category:   str
    diet_plan:      DietPlan
    macros:         MacrosOut

    model_config = _CAMEL

    @classmethod
    def from_recommendation(cls, rec: Recommendation) -> RecResponse:
        return cls(
            bmi=rec.bmi,
            bmr=rec.bmr,
            daily_calories=rec.daily_calories,
            bmi_category=rec.bmi_category,
            diet_plan=rec.diet_plan,
            macros=MacrosOut(
                protein=rec.macros.protein,
                carbs=rec.macros.carbs,
                fat=rec.macros.fat,
            ),
        )
