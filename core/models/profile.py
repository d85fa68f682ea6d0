from __future__ import annotations

from enum import Enum


class Gender(str, Enum):
    male = "male"
    female = "female"

    @classmethod
    def resolve(cls, value: str | Gender) -> Gender:
        # Only an exact "male" picks the male formula.
        return cls.male if value == cls.male.value else cls.female


class ActivityLevel(str, Enum):
    sedentary = "sedentary"
    lightly_active = "lightlyActive"
    moderately_active = "moderatelyActive"
    very_active = "veryActive"
    extremely_active = "extremelyActive"


class Goal(str, Enum):
    weight_loss = "weightLoss"
    muscle_gain = "muscleGain"
    maintenance = "maintenance"

    @classmethod
    def resolve(cls, value: str | Goal | None) -> Goal:
        """Map any goal string onto a plan; unknown goals mean maintenance."""
        if value == cls.weight_loss.value:
            return cls.weight_loss
        if value == cls.muscle_gain.value:
            return cls.muscle_gain
        return cls.maintenance


class FoodCategory(str, Enum):
    proteins = "proteins"
    carbs = "carbs"
    fats = "fats"
