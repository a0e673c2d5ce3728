"""
Pydantic models for meal planning and macro analysis.
"""
from typing import Annotated, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from intellimacro.models.fitness import Gender

ActivityLevel = Literal["Sedentary", "Light", "Moderate", "Active", "Very Active"]
Goal = Literal["Lose Weight", "Maintain Weight", "Gain Muscle"]
MealType = Literal["Breakfast", "Lunch", "Dinner", "Snack"]

# Star ratings are never coerced: True or 4.0 are rejected
_rating_adapter = TypeAdapter(Annotated[int, Field(ge=1, le=5, strict=True)])


class UserProfile(BaseModel):
    """Profile the meal planner builds a day of meals for."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "name": "Sam",
                "age": 29,
                "weight": 68,
                "height": 172,
                "gender": "Female",
                "activityLevel": "Moderate",
                "goal": "Gain Muscle",
                "preferences": "vegetarian",
                "allergies": "peanuts"
            }
        },
    )

    name: str = Field(..., max_length=100)
    age: int = Field(..., ge=0)
    weight: float = Field(..., ge=0, description="Weight in kg")
    height: float = Field(..., ge=0, description="Height in cm")
    gender: Gender
    activityLevel: ActivityLevel
    goal: Goal
    preferences: str = Field(default="", max_length=500, description="e.g., vegan, gluten-free")
    allergies: str = Field(default="", max_length=500, description="e.g., peanuts, shellfish")


class Macros(BaseModel):
    """Calories and macronutrient grams for one serving, meal or day."""

    model_config = ConfigDict(frozen=True)

    calories: int
    protein: int
    carbs: int
    fat: int


class Meal(BaseModel):
    """Single meal in a plan."""

    model_config = ConfigDict(frozen=True)

    type: MealType
    name: str
    macros: Macros
    ingredients: tuple[str, ...]
    instructions: str
    rating: Optional[int] = Field(None, ge=1, le=5)

    def with_rating(self, rating: int) -> "Meal":
        """Return a copy of this meal carrying a 1-5 star rating."""
        return self.model_copy(update={"rating": _rating_adapter.validate_python(rating)})


class MealPlan(BaseModel):
    """One day of meals with the day's total macros."""

    model_config = ConfigDict(frozen=True)

    day: str
    totalMacros: Macros
    meals: tuple[Meal, ...]

    def rate_meal(self, meal_name: str, rating: int) -> "MealPlan":
        """
        Return a copy of the plan with every meal called ``meal_name`` rated.

        Raises:
            KeyError: If no meal in the plan has that name
        """
        if not any(meal.name == meal_name for meal in self.meals):
            raise KeyError(meal_name)

        meals = tuple(
            meal.with_rating(rating) if meal.name == meal_name else meal
            for meal in self.meals
        )
        return self.model_copy(update={"meals": meals})


class AnalyzedRecipe(BaseModel):
    """Per-serving macro estimate for a recipe found at a URL."""

    model_config = ConfigDict(frozen=True)

    recipeName: str
    servingSize: str
    macrosPerServing: Macros
    ingredients: tuple[str, ...]


class ScannedProduct(BaseModel):
    """Nutrition label for a packaged product."""

    model_config = ConfigDict(frozen=True)

    productName: str
    servingSize: str
    servingsPerContainer: float
    macrosPerServing: Macros
    ingredients: tuple[str, ...]
