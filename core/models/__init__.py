from .meal import DietPlan, MealOption, MealSlots
from .food import FoodItem
from .profile import ActivityLevel, FoodCategory, Gender, Goal

__all__ = [
    "ActivityLevel",
    "DietPlan",
    "FoodCategory",
    "FoodItem",
    "Gender",
    "Goal",
    "MealOption",
    "MealSlots",
]
