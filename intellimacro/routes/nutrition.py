"""
Meal planning routes.
"""
import time

from fastapi import APIRouter, HTTPException, Depends, Request

from intellimacro.core.auth import verify_internal_secret
from intellimacro.core.dependencies import get_inference_client
from intellimacro.core.errors import DecodeError, TransportError
from intellimacro.core.limiter import limiter
from intellimacro.core.logger import logger, log_request, log_response, log_error
from intellimacro.models.nutrition import MealPlan, UserProfile
from intellimacro.models.schemas import GroceryListResponse, MealPlanResponse, RateMealRequest
from intellimacro.services.grocery import parse_grocery_list
from intellimacro.services.openai_service import StructuredInferenceClient

router = APIRouter(dependencies=[Depends(verify_internal_secret)])


@router.post("/generate-meal-plan", response_model=MealPlanResponse)
@limiter.limit("10/minute")
async def generate_meal_plan(
    request: Request,
    req: UserProfile,
    client: StructuredInferenceClient = Depends(get_inference_client),
):
    """
    Generate a personalized one-day meal plan.

    Creates breakfast, lunch, dinner and a snack sized to the user's
    profile, activity level and goal. Calling again regenerates the plan.
    """
    log_request("/generate-meal-plan")
    start = time.perf_counter()

    try:
        plan = await client.generate_meal_plan(req)
        log_response("/generate-meal-plan", "success", (time.perf_counter() - start) * 1000)
        return {"status": "success", "plan": plan}
    except DecodeError as e:
        log_error("Meal plan generation", e)
        raise HTTPException(status_code=500, detail="AI generation failed to produce valid JSON")
    except TransportError as e:
        log_error("Meal plan generation", e)
        raise HTTPException(
            status_code=503,
            detail="Failed to generate meal plan. The AI might be busy. Please try again."
        )
    except Exception as e:
        log_error("Meal plan generation", e)
        raise HTTPException(status_code=500, detail="Meal plan generation failed")


@router.post("/grocery-list", response_model=GroceryListResponse)
@limiter.limit("10/minute")
async def grocery_list(
    request: Request,
    req: MealPlan,
    client: StructuredInferenceClient = Depends(get_inference_client),
):
    """
    Build a grocery list for a meal plan.

    Returns the AI's markdown as-is plus the items grouped by store section.
    """
    log_request("/grocery-list")
    start = time.perf_counter()

    try:
        markdown = await client.generate_grocery_list(req)
    except DecodeError as e:
        log_error("Grocery list generation", e)
        raise HTTPException(status_code=500, detail="AI returned an empty grocery list")
    except TransportError as e:
        log_error("Grocery list generation", e)
        raise HTTPException(status_code=503, detail="Could not generate grocery list.")
    except Exception as e:
        log_error("Grocery list generation", e)
        raise HTTPException(status_code=500, detail="Could not generate grocery list.")

    sections = parse_grocery_list(markdown)
    logger.info(f"Grocery list has {sum(len(v) for v in sections.values())} items in {len(sections)} sections")

    log_response("/grocery-list", "success", (time.perf_counter() - start) * 1000)
    return {"status": "success", "groceryList": markdown, "sections": sections}


@router.post("/rate-meal", response_model=MealPlanResponse)
@limiter.limit("60/minute")
async def rate_meal(request: Request, req: RateMealRequest):
    """
    Rate one meal of a plan.

    No AI call is made: the plan comes back with the rating applied. Ratings
    are not fed into later meal plan prompts.
    """
    log_request("/rate-meal")
    start = time.perf_counter()

    try:
        plan = req.plan.rate_meal(req.mealName, req.rating)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Meal not found in plan: {req.mealName}")

    log_response("/rate-meal", "success", (time.perf_counter() - start) * 1000)
    return {"status": "success", "plan": plan}
