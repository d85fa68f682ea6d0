from pydantic import BaseModel, ConfigDict


class FoodItem(BaseModel):
    name: str
    calories: int
    protein: int | float
    carbs: int | float
    fat: int | float

    model_config = ConfigDict(frozen=True)
