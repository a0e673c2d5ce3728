"""
Pydantic models for request/response validation.
"""
from pydantic import BaseModel, Field

from intellimacro.models.fitness import FitnessAgeResult
from intellimacro.models.nutrition import AnalyzedRecipe, MealPlan, ScannedProduct


# --- Request Models ---

class RecipeAnalysisRequest(BaseModel):
    """Request model for recipe URL analysis."""
    url: str = Field(..., min_length=1, max_length=2048)


class RateMealRequest(BaseModel):
    """Request model for rating one meal of a plan."""
    plan: MealPlan
    mealName: str
    rating: int = Field(..., ge=1, le=5)


# --- Response Models ---

class FitnessAgeResponse(BaseModel):
    """API wrapper response for the fitness-age endpoint."""
    status: str = "success"
    result: FitnessAgeResult


class MealPlanResponse(BaseModel):
    """API wrapper response for meal plan endpoints."""
    status: str = "success"
    plan: MealPlan


class GroceryListResponse(BaseModel):
    """Grocery list as raw markdown plus its sections."""
    status: str = "success"
    groceryList: str
    sections: dict[str, list[str]]


class RecipeAnalysisResponse(BaseModel):
    """API wrapper response for recipe analysis."""
    status: str = "success"
    analysis: AnalyzedRecipe


class ScannedProductResponse(BaseModel):
    """API wrapper response for a barcode scan."""
    status: str = "success"
    product: ScannedProduct

