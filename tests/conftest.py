"""
Pytest fixtures for the IntelliMacro service tests.
"""
import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock

# Mock environment variables before importing app
import os
os.environ.setdefault("OPENAI_API_KEY", "test-api-key")
os.environ.setdefault("INTERNAL_API_SECRET", "test-internal-secret")
os.environ["RATE_LIMIT_ENABLED"] = "false"

from intellimacro.core.dependencies import get_inference_client
from intellimacro.main import app
from intellimacro.services.openai_service import StructuredInferenceClient


def make_completion(content):
    """Build an object shaped like an OpenAI chat completion."""
    response = MagicMock()
    response.choices = [MagicMock(message=MagicMock(content=content))]
    return response


@pytest.fixture
def mock_openai():
    """Mock AsyncOpenAI client whose chat completion returns a JSON stub."""
    mock = MagicMock()
    mock.chat.completions.create = AsyncMock(return_value=make_completion('{"test": "response"}'))
    return mock


@pytest.fixture
def inference_client(mock_openai):
    """StructuredInferenceClient wired to the mocked OpenAI client."""
    return StructuredInferenceClient(api_key="test-api-key", model="test-model", client=mock_openai)


@pytest.fixture
def client(inference_client):
    """Test client for the FastAPI app, authenticated and using the mocked AI."""
    app.dependency_overrides[get_inference_client] = lambda: inference_client
    yield TestClient(app, headers={"X-Internal-Secret": os.environ["INTERNAL_API_SECRET"]})
    app.dependency_overrides.clear()


@pytest.fixture
def sample_fitness_profile():
    """Sample fitness-age request."""
    return {
        "age": 35,
        "gender": "Male",
        "restingHeartRate": 65,
        "height": 180,
        "weight": 80,
        "waist": 85,
        "cardioMinutes": 150,
        "strengthSessions": 2
    }


@pytest.fixture
def sample_fitness_result():
    """Sample fitness-age response from the AI."""
    return {
        "fitnessAge": 31,
        "analysis": "Your activity levels and resting heart rate put you ahead of your age group.",
        "strengths": [
            "You meet the 150 minute weekly cardio guideline.",
            "Your resting heart rate of 65 bpm is in a healthy range."
        ],
        "areasForImprovement": [
            "Add a third strength session each week."
        ],
        "vo2MaxEstimate": 42.5,
        "disclaimer": "This is an estimate for informational purposes and is not a substitute for professional medical advice."
    }


@pytest.fixture
def sample_user_profile():
    """Sample meal plan request."""
    return {
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


@pytest.fixture
def sample_meal_plan():
    """Sample meal plan response. Totals deliberately differ from the meal sum."""
    return {
        "day": "Monday",
        "totalMacros": {"calories": 2100, "protein": 120, "carbs": 230, "fat": 70},
        "meals": [
            {
                "type": "Breakfast",
                "name": "Greek Yogurt Parfait",
                "macros": {"calories": 420, "protein": 30, "carbs": 50, "fat": 10},
                "ingredients": ["1 cup Greek yogurt", "1/2 cup granola", "1/2 cup berries"],
                "instructions": "Layer the yogurt, granola and berries in a glass."
            },
            {
                "type": "Lunch",
                "name": "Chickpea Quinoa Bowl",
                "macros": {"calories": 610, "protein": 28, "carbs": 80, "fat": 18},
                "ingredients": ["1 cup quinoa", "1 cup chickpeas", "1 cucumber"],
                "instructions": "Cook the quinoa and toss with chickpeas and cucumber."
            },
            {
                "type": "Dinner",
                "name": "Tofu Stir Fry",
                "macros": {"calories": 650, "protein": 35, "carbs": 70, "fat": 22},
                "ingredients": ["200g firm tofu", "2 cups mixed vegetables", "1 cup brown rice"],
                "instructions": "Stir fry the tofu and vegetables, serve over rice."
            },
            {
                "type": "Snack",
                "name": "Apple with Almond Butter",
                "macros": {"calories": 250, "protein": 7, "carbs": 25, "fat": 16},
                "ingredients": ["1 apple", "2 tbsp almond butter"],
                "instructions": "Slice the apple and serve with almond butter."
            }
        ]
    }


@pytest.fixture
def sample_grocery_markdown():
    """Sample grocery list markdown from the AI."""
    return (
        "### Produce\n"
        "* 1 cucumber\n"
        "* 1 apple\n"
        "\n"
        "### Protein\n"
        "* 200g firm tofu\n"
        "* 1 cup chickpeas\n"
        "\n"
        "### Pantry\n"
        "* 1 cup quinoa\n"
    )


@pytest.fixture
def sample_recipe():
    """Sample recipe analysis response."""
    return {
        "recipeName": "Classic Beef Lasagna",
        "servingSize": "1 slice (250g)",
        "macrosPerServing": {"calories": 480, "protein": 28, "carbs": 38, "fat": 24},
        "ingredients": ["lasagna noodles", "ground beef", "ricotta", "mozzarella", "tomato sauce"]
    }


@pytest.fixture
def sample_scanned_product():
    """Sample simulated barcode lookup response."""
    return {
        "productName": "Organic Almond Butter",
        "servingSize": "2 tbsp (32g)",
        "servingsPerContainer": 12,
        "macrosPerServing": {"calories": 190, "protein": 7, "carbs": 6, "fat": 17},
        "ingredients": ["organic dry roasted almonds", "sea salt"]
    }
