"""
core/catalog.py
────────────────────────────────────────────────────────────────────────
Static diet-plan and food tables.

Both tables are built once at import time from frozen models and exposed
read-only; nothing in the process mutates them.

* plan_for(goal)               → DietPlan   (unknown goal ⇒ maintenance)
* foods_by_category(category)  → tuple[FoodItem, ...]
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from core.errors import UnknownFoodCategory
from core.models import DietPlan, FoodCategory, FoodItem, Goal, MealOption, MealSlots


def _meal(name: str, calories: int, protein: int, carbs: int, fat: int) -> MealOption:
    return MealOption(name=name, calories=calories, protein=protein, carbs=carbs, fat=fat)


def _food(name: str, calories: int, protein: float, carbs: float, fat: float) -> FoodItem:
    return FoodItem(name=name, calories=calories, protein=protein, carbs=carbs, fat=fat)


# ──────────────────────────────────────────────────────────────────────
#  Diet plans (one per goal)
# ──────────────────────────────────────────────────────────────────────
_PLANS: Mapping[Goal, DietPlan] = MappingProxyType({
    Goal.weight_loss: DietPlan(
        name="Weight Loss Diet",
        description="A balanced diet focused on calorie deficit and healthy eating habits",
        daily_calories=1500,
        meals=MealSlots(
            breakfast=(
                _meal("Oatmeal with berries", 250, 8, 45, 5),
                _meal("Greek yogurt with nuts", 200, 15, 20, 8),
                _meal("Egg white omelette", 180, 20, 5, 8),
            ),
            lunch=(
                _meal("Grilled chicken salad", 300, 25, 15, 12),
                _meal("Quinoa bowl with vegetables", 280, 12, 45, 6),
                _meal("Tuna sandwich on whole grain", 320, 22, 35, 10),
            ),
            dinner=(
                _meal("Salmon with steamed vegetables", 350, 30, 20, 15),
                _meal("Lean beef stir-fry", 320, 28, 25, 12),
                _meal("Vegetarian lentil curry", 290, 15, 50, 8),
            ),
            snacks=(
                _meal("Apple with almond butter", 150, 4, 25, 8),
                _meal("Carrot sticks with hummus", 120, 3, 18, 6),
                _meal("Greek yogurt", 100, 12, 8, 2),
            ),
        ),
    ),
    Goal.muscle_gain: DietPlan(
        name="Muscle Gain Diet",
        description="High protein diet designed for muscle building and strength training",
        daily_calories=2500,
        meals=MealSlots(
            breakfast=(
                _meal("Protein smoothie with banana", 400, 25, 60, 8),
                _meal("Eggs with whole grain toast", 350, 20, 35, 15),
                _meal("Protein pancakes", 380, 22, 45, 12),
            ),
            lunch=(
                _meal("Chicken rice bowl", 500, 35, 65, 15),
                _meal("Turkey sandwich with avocado", 450, 28, 40, 20),
                _meal("Protein pasta with meatballs", 480, 32, 55, 18),
            ),
            dinner=(
                _meal("Steak with sweet potato", 550, 40, 45, 25),
                _meal("Salmon with quinoa", 520, 35, 50, 22),
                _meal("Chicken stir-fry with rice", 480, 30, 60, 18),
            ),
            snacks=(
                _meal("Protein bar", 200, 20, 25, 8),
                _meal("Nuts and dried fruits", 180, 6, 20, 12),
                _meal("Greek yogurt with granola", 220, 15, 30, 8),
            ),
        ),
    ),
    Goal.maintenance: DietPlan(
        name="Maintenance Diet",
        description="Balanced diet for maintaining current weight and overall health",
        daily_calories=2000,
        meals=MealSlots(
            breakfast=(
                _meal("Whole grain cereal with milk", 300, 12, 50, 8),
                _meal("Avocado toast", 280, 10, 35, 15),
                _meal("Smoothie bowl", 320, 15, 45, 12),
            ),
            lunch=(
                _meal("Mediterranean salad", 350, 18, 30, 20),
                _meal("Grilled cheese with soup", 380, 15, 40, 18),
                _meal("Pasta primavera", 360, 12, 55, 12),
            ),
            dinner=(
                _meal("Baked chicken with vegetables", 400, 30, 35, 18),
                _meal("Fish tacos", 380, 25, 40, 16),
                _meal("Vegetarian lasagna", 420, 18, 50, 20),
            ),
            snacks=(
                _meal("Mixed nuts", 160, 6, 8, 15),
                _meal("Fruit with yogurt", 140, 8, 25, 4),
                _meal("Popcorn", 120, 3, 20, 5),
            ),
        ),
    ),
})


# ──────────────────────────────────────────────────────────────────────
#  Food reference table
# ──────────────────────────────────────────────────────────────────────
_FOODS: Mapping[FoodCategory, tuple[FoodItem, ...]] = MappingProxyType({
    FoodCategory.proteins: (
        _food("Chicken Breast", 165, 31, 0, 3.6),
        _food("Salmon", 208, 25, 0, 12),
        _food("Eggs", 155, 13, 1.1, 11),
        _food("Greek Yogurt", 59, 10, 3.6, 0.4),
        _food("Tuna", 144, 30, 0, 1),
        _food("Lean Beef", 250, 26, 0, 15),
    ),
    FoodCategory.carbs: (
        _food("Brown Rice", 216, 4.5, 45, 1.8),
        _food("Quinoa", 222, 8, 39, 3.6),
        _food("Sweet Potato", 103, 2, 24, 0.2),
        _food("Oats", 307, 13, 55, 5.3),
        _food("Whole Grain Bread", 247, 13, 41, 4.2),
        _food("Banana", 89, 1.1, 23, 0.3),
    ),
    FoodCategory.fats: (
        _food("Avocado", 160, 2, 9, 15),
        _food("Almonds", 164, 6, 6, 14),
        _food("Olive Oil", 119, 0, 0, 14),
        _food("Peanut Butter", 188, 8, 6, 16),
        _food("Chia Seeds", 138, 4.7, 12, 8.7),
        _food("Coconut Oil", 121, 0, 0, 14),
    ),
})


# ──────────────────────────────────────────────────────────────────────
#  Lookups
# ──────────────────────────────────────────────────────────────────────
def plan_for(goal: Goal | str | None) -> DietPlan:
    return _PLANS[Goal.resolve(goal)]


def foods_by_category(category: FoodCategory | str) -> tuple[FoodItem, ...]:
    try:
        return _FOODS[FoodCategory(category)]
    except ValueError:
        raise UnknownFoodCategory(category) from None


def all_plans() -> Mapping[Goal, DietPlan]:
    return _PLANS


def all_foods() -> Mapping[FoodCategory, tuple[FoodItem, ...]]:
    return _FOODS
