# tests/test_nutrition_calc.py
from __future__ import annotations

import math
import pytest

from core.errors import UnknownActivityLevel
from core.models import ActivityLevel, Gender, Goal
from core.nutrition_calc import (
    BiometricInput,
    RecommendationCalculator,
    bmi_category,
    round_half_up,
)

calc = RecommendationCalculator()

MALE_70KG = BiometricInput(
    weight=70,
    height=175,
    age=25,
    gender=Gender.male,
    activity_level=ActivityLevel.sedentary,
    goal=Goal.maintenance,
)

FEMALE_60KG = BiometricInput(
    weight=60,
    height=165,
    age=30,
    gender=Gender.female,
    activity_level=ActivityLevel.sedentary,
)


def _with(goal: str) -> BiometricInput:
    return BiometricInput.from_raw(70, 175, 25, "male", "sedentary", goal)


# ── BMI ──────────────────────────────────────────────────────────────
def test_bmi_one_decimal():
    assert calc.bmi(70, 175) == 22.9


def test_bmi_rounds_half_up():
    # 89 / 2.0² is exactly 22.25
    assert calc.bmi(89, 200) == 22.3


@pytest.mark.parametrize(
    "bmi, label",
    [(18.4, "Underweight"), (18.5, "Normal"), (24.9, "Normal"),
     (25.0, "Overweight"), (29.9, "Overweight"), (30.0, "Obese")],
)
def test_bmi_category_bands(bmi, label):
    assert bmi_category(bmi) == label


# ── BMR / TDEE ───────────────────────────────────────────────────────
def test_bmr_mifflin_male():
    expected = 10 * 70 + 6.25 * 175 - 5 * 25 + 5   # 1736.25
    assert calc.bmr(MALE_70KG) == round(expected) == 1736


def test_bmr_mifflin_female():
    expected = 10 * 60 + 6.25 * 165 - 5 * 30 - 161   # 1320.25
    assert math.isclose(calc.bmr(FEMALE_60KG), expected, abs_tol=0.5)
    assert calc.bmr(FEMALE_60KG) == 1320


def test_bmr_any_other_gender_uses_female_formula():
    other = BiometricInput.from_raw(60, 165, 30, "Male", "sedentary", "maintenance")
    assert other.gender is Gender.female
    assert calc.bmr(other) == calc.bmr(FEMALE_60KG)


def test_bmr_half_rounds_up():
    # 700 + 1062.5 - 125 + 5 = 1642.5
    u = BiometricInput.from_raw(70, 170, 25, "male", "sedentary", "maintenance")
    assert calc.bmr(u) == 1643


def test_tdee_sedentary():
    assert calc.tdee(1736, ActivityLevel.sedentary) == 2083


@pytest.mark.parametrize(
    "level, factor",
    [("sedentary", 1.2), ("lightlyActive", 1.375), ("moderatelyActive", 1.55),
     ("veryActive", 1.725), ("extremelyActive", 1.9)],
)
def test_tdee_multipliers(level, factor):
    assert calc.tdee(2000, level) == round_half_up(2000 * factor)


def test_tdee_unknown_activity_level_is_rejected():
    with pytest.raises(UnknownActivityLevel):
        calc.tdee(1736, "couchPotato")


def test_from_raw_unknown_activity_level_is_rejected():
    with pytest.raises(ValueError):
        BiometricInput.from_raw(70, 175, 25, "male", "couchPotato", "maintenance")


# ── goal adjustment + plan choice ────────────────────────────────────
def test_weight_loss_deficit_and_plan():
    rec = calc.compute(_with("weightLoss"))
    assert rec.daily_calories == 2083 - 500
    assert rec.diet_plan_ref is Goal.weight_loss
    assert rec.diet_plan.name == "Weight Loss Diet"


def test_muscle_gain_surplus_and_plan():
    rec = calc.compute(_with("muscleGain"))
    assert rec.daily_calories == 2083 + 300
    assert rec.diet_plan_ref is Goal.muscle_gain
    assert rec.diet_plan.name == "Muscle Gain Diet"


@pytest.mark.parametrize("goal", ["maintenance", "bulk", "", None])
def test_unknown_goal_falls_back_to_maintenance(goal):
    rec = calc.compute(_with(goal))
    assert rec.daily_calories == 2083
    assert rec.diet_plan_ref is Goal.maintenance
    assert rec.diet_plan.name == "Maintenance Diet"


# ── macros ───────────────────────────────────────────────────────────
def test_macros_for_weight_loss():
    m = calc.compute(_with("weightLoss")).macros
    assert (m.protein, m.carbs, m.fat) == (99, 178, 53)


def test_macro_kcal_close_to_target():
    # three independent roundings: at most 0.5 g each
    worst = 0.5 * 4 + 0.5 * 4 + 0.5 * 9
    for kcal in range(1000, 4001):
        assert abs(calc.macros(kcal).kcal - kcal) <= worst


# ── full pipeline ────────────────────────────────────────────────────
def test_compute_is_pure():
    first = calc.compute(MALE_70KG)
    second = RecommendationCalculator().compute(MALE_70KG)
    assert first == second
    assert first.diet_plan.model_dump() == second.diet_plan.model_dump()


def test_tiny_inputs_do_not_raise():
    u = BiometricInput.from_raw(0.1, 50, 1, "female", "sedentary", "maintenance")
    rec = calc.compute(u)
    assert rec.bmi == 0.4
    assert rec.bmr == 148          # 1 + 312.5 - 5 - 161 = 147.5
