from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class MealOption(BaseModel):
    name: str
    calories: int
    protein: int
    carbs: int
    fat: int

    model_config = ConfigDict(frozen=True)


class MealSlots(BaseModel):
    breakfast: tuple[MealOption, ...]
    lunch: tuple[MealOption, ...]
    dinner: tuple[MealOption, ...]
    snacks: tuple[MealOption, ...]

    model_config = ConfigDict(frozen=True)


class DietPlan(BaseModel):
    name: str
    description: str
    daily_calories: int            # baseline, not the personalised target
    meals: MealSlots

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )
