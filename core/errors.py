"""Errors raised by the recommendation core."""

from __future__ import annotations


class NutritionError(ValueError):
    """Base class for everything the core refuses to compute."""


class UnknownActivityLevel(NutritionError):
    def __init__(self, level: object) -> None:
        super().__init__(f"unknown activity level: {level!r}")
        self.level = level


class UnknownFoodCategory(NutritionError, LookupError):
    def __init__(self, category: object) -> None:
        super().__init__(f"unknown food category: {category!r}")
        self.category = category
