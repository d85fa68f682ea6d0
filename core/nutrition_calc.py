"""
core/nutrition_calc.py
────────────────────────────────────────────────────────────────────────
Turns a validated biometric profile into a diet recommendation:

1. BMI  (kg/m², one decimal)
2. BMR  (Mifflin–St Jeor, whole kcal)
3. TDEE (activity multiplier)
4. Goal adjustment (−500 / +300 / ±0) + diet-plan choice
5. Macro split (25 % protein · 45 % carbs · 30 % fat)

Precondition: weight, height and age are positive. The HTTP layer and the
CLI reject anything else before calling `compute`; nothing in here
re-checks them.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from core.catalog import plan_for
from core.errors import UnknownActivityLevel
from core.models import ActivityLevel, DietPlan, Gender, Goal

Logger = logging.getLogger(__name__)

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.sedentary: 1.2,
    ActivityLevel.lightly_active: 1.375,
    ActivityLevel.moderately_active: 1.55,
    ActivityLevel.very_active: 1.725,
    ActivityLevel.extremely_active: 1.9,
}

# Upper bounds the callers enforce before compute(); beyond them the
# arithmetic overflows.
MAX_WEIGHT_KG = 1000.0
MAX_HEIGHT_CM = 300.0
MAX_AGE = 150

GOAL_ADJUSTMENT: dict[Goal, int] = {
    Goal.weight_loss: -500,
    Goal.muscle_gain: 300,
    Goal.maintenance: 0,
}

# (share of daily kcal, kcal per gram)
MACRO_SPLIT: dict[str, tuple[float, int]] = {
    "protein": (0.25, 4),
    "carbs": (0.45, 4),
    "fat": (0.30, 9),
}


def round_half_up(value: float) -> int:
    """Nearest integer, .5 rounds up (not Python's banker's rounding)."""
    return math.floor(value + 0.5)


def round_one_decimal(value: float) -> float:
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def bmi_category(bmi: float) -> str:
    if bmi < 18.5:
        return "Underweight"
    if bmi < 25:
        return "Normal"
    if bmi < 30:
        return "Overweight"
    return "Obese"


# ──────────────────────────────────────────────────────────────────────
#  Input / output records
# ──────────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class BiometricInput:
    weight: float                   # kg
    height: float                   # cm
    age: int                        # years
    gender: Gender
    activity_level: ActivityLevel
    goal: Goal = Goal.maintenance

    @classmethod
    def from_raw(
        cls,
        weight: float,
        height: float,
        age: int,
        gender: str,
        activity_level: str,
        goal: str | None,
    ) -> BiometricInput:
        """Resolve free-form gender/goal strings; activity must be a known level."""
        try:
            level = ActivityLevel(activity_level)
        except ValueError:
            raise UnknownActivityLevel(activity_level) from None
        return cls(
            weight=weight,
            height=height,
            age=age,
            gender=Gender.resolve(gender),
            activity_level=level,
            goal=Goal.resolve(goal),
        )


@dataclass(frozen=True)
class Macros:
    protein: int
    carbs: int
    fat: int

    @property
    def kcal(self) -> int:
        return self.protein * 4 + self.carbs * 4 + self.fat * 9


@dataclass(frozen=True)
class Recommendation:
    bmi: float
    bmr: int
    daily_calories: int
    macros: Macros
    diet_plan_ref: Goal
    diet_plan: DietPlan

    @property
    def bmi_category(self) -> str:
        return bmi_category(self.bmi)


# ──────────────────────────────────────────────────────────────────────
#  Calculator
# ──────────────────────────────────────────────────────────────────────
class RecommendationCalculator:
    """Pure, stateless: the same input always yields an equal Recommendation."""

    # --------------- public entrypoint --------------------------------
    def compute(self, u: BiometricInput) -> Recommendation:
        bmi = self.bmi(u.weight, u.height)
        bmr = self.bmr(u)
        tdee = self.tdee(bmr, u.activity_level)
        goal = Goal.resolve(u.goal)
        kcal = self.adjust_for_goal(tdee, goal)
        macros = self.macros(kcal)

        Logger.debug(
            "recommendation: bmi=%s bmr=%s tdee=%s goal=%s kcal=%s",
            bmi, bmr, tdee, goal.value, kcal,
        )
        return Recommendation(
            bmi=bmi,
            bmr=bmr,
            daily_calories=kcal,
            macros=macros,
            diet_plan_ref=goal,
            diet_plan=plan_for(goal),
        )

    # --------------- BMI / BMR / TDEE ---------------------------------
    def bmi(self, weight_kg: float, height_cm: float) -> float:
        height_m = height_cm / 100
        return round_one_decimal(weight_kg / (height_m * height_m))

    def bmr(self, u: BiometricInput) -> int:
        base = 10 * u.weight + 6.25 * u.height - 5 * u.age
        offset = 5 if Gender.resolve(u.gender) is Gender.male else -161
        return round_half_up(base + offset)

    def tdee(self, bmr: int, activity_level: ActivityLevel | str) -> int:
        try:
            level = ActivityLevel(activity_level)
        except ValueError:
            raise UnknownActivityLevel(activity_level) from None
        return round_half_up(bmr * ACTIVITY_MULTIPLIERS[level])

    # --------------- Calories / macros --------------------------------
    def adjust_for_goal(self, tdee: int, goal: Goal | str) -> int:
        return tdee + GOAL_ADJUSTMENT[Goal.resolve(goal)]

    def macros(self, kcal: int) -> Macros:
        grams = {
            name: round_half_up(kcal * share / per_gram)
            for name, (share, per_gram) in MACRO_SPLIT.items()
        }
        return Macros(**grams)
