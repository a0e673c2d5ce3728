"""
OpenAI API service for AI operations.

Every operation builds a prompt from a typed record, makes exactly one chat
completion request and decodes the reply into a typed result. Nothing is
retried or cached: a failed call surfaces to the caller, who decides whether
to resubmit.
"""
import json
from typing import TypeVar

import openai
from openai import AsyncOpenAI
from pydantic import BaseModel, ValidationError

from intellimacro.core.config import Settings
from intellimacro.core.errors import ConfigurationError, DecodeError, TransportError
from intellimacro.core.logger import logger, log_ai_call, log_error, log_invalid_response
from intellimacro.models.fitness import FitnessAgeResult, FitnessProfile
from intellimacro.models.nutrition import AnalyzedRecipe, MealPlan, ScannedProduct, UserProfile
from intellimacro.services.response_schemas import (
    ANALYZED_RECIPE_SCHEMA,
    FITNESS_AGE_SCHEMA,
    MEAL_PLAN_SCHEMA,
    SCANNED_PRODUCT_SCHEMA,
    json_schema_format,
)

ResultT = TypeVar("ResultT", bound=BaseModel)

DISCLAIMER = (
    "This is an estimate for informational purposes and is not a substitute "
    "for professional medical advice."
)

JSON_ONLY_SYSTEM_PROMPT = "You are a helpful assistant that outputs strictly valid JSON."


# --- Prompt Construction ---

def build_fitness_age_prompt(profile: FitnessProfile) -> str:
    """Render a FitnessProfile into the fitness-age audit prompt."""
    return f"""
You are a friendly and encouraging AI Health & Fitness expert named 'FitBot'.
Based on the following user data, calculate their 'Fitness Age' and provide a concise, positive, and actionable health audit.

User Data:
- Age: {profile.age}
- Gender: {profile.gender}
- Resting Heart Rate: {profile.restingHeartRate} bpm
- Height: {profile.height} cm
- Weight: {profile.weight} kg
- Waist Circumference: {profile.waist} cm
- Weekly Cardio: {profile.cardioMinutes} minutes
- Weekly Strength Sessions: {profile.strengthSessions} sessions

Your analysis should consider BMI, waist-to-height ratio, resting heart rate against age-based norms,
and adherence to recommended physical activity guidelines (e.g., 150 mins of moderate cardio).

FITNESS AGE CALCULATION:
1. Start with the user's chronological age.
2. Adjust downwards for positive factors (e.g., low resting heart rate, healthy BMI, meeting exercise goals).
3. Adjust upwards for negative factors (e.g., high resting heart rate, high waist-to-height ratio, sedentary lifestyle).
4. The final result must be a plausible, non-negative integer.

VO2 MAX ESTIMATION:
- Provide a rough estimate of their VO2 Max based on their age, gender, and activity level.

RESPONSE FORMAT:
Return a single, valid JSON object matching the provided schema. Do not include any text outside of the JSON object.
Your tone must be motivating, not alarming. Frame "weaknesses" as "areas for improvement".
List at least one strength and at least one area for improvement.
Always include the disclaimer: "{DISCLAIMER}"
"""


def build_meal_plan_prompt(profile: UserProfile) -> str:
    """Render a UserProfile into the one-day meal plan prompt."""
    return f"""
You are an expert nutritionist and chef AI called IntelliMacro. Create a one-day meal plan for the following user.

User Profile:
- Name: {profile.name}
- Age: {profile.age}
- Weight: {profile.weight} kg
- Height: {profile.height} cm
- Gender: {profile.gender}
- Activity Level: {profile.activityLevel}
- Primary Goal: {profile.goal}
- Dietary Preferences: {profile.preferences or 'None'}
- Allergies or Dislikes: {profile.allergies or 'None'}

RULES:
1. Calculate the user's estimated daily calorie and macronutrient needs from their profile and goal
   (using Harris-Benedict or a similar formula).
2. Create a full day's meal plan (Breakfast, Lunch, Dinner, and one Snack).
3. Meals should be healthy, balanced, and delicious. Provide simple ingredients and clear instructions.
4. Ensure the total calories and macros for the day closely match the calculated needs.
5. STRICTLY adhere to the user's preferences and allergies.
6. Return a single, valid JSON object matching the provided schema. Do not include any text outside the JSON object.
"""


def build_grocery_list_prompt(plan: MealPlan) -> str:
    """Render a MealPlan into the markdown grocery list prompt."""
    return f"""
You are a helpful kitchen assistant AI. Based on the following meal plan JSON, create a simple,
well-organized grocery list in Markdown format.

Meal Plan:
{plan.model_dump_json(indent=2, exclude_none=True)}

RULES:
1. Consolidate all ingredients from all meals into a single list.
2. Categorize the list by common grocery store sections
   (e.g., ### Produce, ### Protein, ### Dairy & Alternatives, ### Pantry, ### Spices).
3. Format each item as a markdown list item (e.g., "* 1 cup quinoa").
4. Return only the markdown text. Do not include any other commentary.
"""


def build_recipe_prompt(url: str) -> str:
    """Render a recipe URL into the recipe analysis prompt."""
    return f"""
You are a recipe analysis AI. A user has provided a URL to a recipe. Your task is to extract the recipe's name,
determine a reasonable serving size, list the key ingredients, and estimate the macronutrients
(calories, protein, carbs, fat) per serving.

Recipe URL: {url}

RULES:
1. Act as if you have visited the URL. Based on the URL, infer the likely recipe.
2. Provide a nutritional analysis for that recipe.
3. If you cannot analyze the URL, create a plausible analysis for a typical recipe of that kind.
4. Return a single, valid JSON object matching the provided schema. Do not include any text outside the JSON object.
"""


def build_scanned_product_prompt() -> str:
    """Prompt for a simulated barcode lookup; the AI invents the product."""
    return """
You are a food database AI. For a simulation, generate a plausible nutritional profile for a common
grocery item that a user might scan with a barcode scanner.

RULES:
1. Invent a common, healthy-ish food product (e.g., "Organic Almond Butter", "Greek Yogurt, Plain", "Whole Wheat Bread").
2. Create a realistic nutrition label for it, including serving size, servings per container, macros, and ingredients.
3. Return a single, valid JSON object matching the provided schema. Do not include any text outside the JSON object.
"""


# --- Client ---

class StructuredInferenceClient:
    """
    Schema-constrained access to the OpenAI Chat Completions API.

    Holds only read-only configuration, so one instance can serve any number
    of concurrent requests.
    """

    def __init__(
        self,
        api_key: str | None,
        model: str = Settings.OPENAI_MODEL,
        base_url: str | None = None,
        timeout: float = Settings.OPENAI_TIMEOUT_SECONDS,
        client: AsyncOpenAI | None = None,
    ):
        if not api_key or not api_key.strip():
            raise ConfigurationError("OPENAI_API_KEY is required to call the AI service")

        self.model = model
        # Per-call timeout: 10s to connect, `timeout` overall.
        # Prevents a stalled response from hanging a uvicorn worker forever.
        self.timeout = openai.Timeout(timeout, connect=10.0)
        self._client = client or AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            max_retries=0,  # One request per call; resubmission is the caller's decision
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "StructuredInferenceClient":
        """Build a client from validated application settings."""
        return cls(
            api_key=settings.OPENAI_API_KEY,
            model=settings.OPENAI_MODEL,
            base_url=settings.OPENAI_BASE_URL,
            timeout=settings.OPENAI_TIMEOUT_SECONDS,
        )

    async def _call_chat_api(
        self,
        operation: str,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
        response_format: dict | None = None,
    ) -> str | None:
        """
        Issue one chat completion request and return the message text.

        Raises:
            TransportError: If the request fails or the service returns an error status
        """
        log_ai_call(operation, self.model)

        messages = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt}
        ]
        kwargs = {}
        if response_format is not None:
            kwargs["response_format"] = response_format

        try:
            response = await self._client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=temperature,
                timeout=self.timeout,
                **kwargs,
            )
        except openai.APIError as e:
            log_error(operation, e)
            raise TransportError(f"{operation} request failed: {e}") from e

        if not response.choices:
            return None
        return response.choices[0].message.content

    def _decode(self, operation: str, raw_text: str | None, result_type: type[ResultT]) -> ResultT:
        """
        Parse a reply as JSON and validate it against ``result_type``.

        Raises:
            DecodeError: If the reply is empty, not JSON, or not the expected shape
        """
        text = (raw_text or "").strip()

        try:
            json.loads(text)
        except json.JSONDecodeError as e:
            log_error(f"{operation} JSON parsing", e)
            log_invalid_response(operation, raw_text)
            raise DecodeError("AI did not return valid JSON", raw_text=raw_text) from e

        try:
            result = result_type.model_validate_json(text, strict=True)
        except ValidationError as e:
            log_error(f"{operation} schema validation", e)
            log_invalid_response(operation, raw_text)
            raise DecodeError(
                f"AI response does not match the {result_type.__name__} schema",
                raw_text=raw_text,
            ) from e

        logger.info(f"{operation} call successful")
        return result

    async def _generate_structured(
        self,
        operation: str,
        prompt: str,
        schema_name: str,
        schema: dict,
        result_type: type[ResultT],
        temperature: float,
    ) -> ResultT:
        raw_text = await self._call_chat_api(
            operation,
            JSON_ONLY_SYSTEM_PROMPT,
            prompt,
            temperature,
            response_format=json_schema_format(schema_name, schema),
        )
        return self._decode(operation, raw_text, result_type)

    # --- Fitness Age ---

    async def compute_fitness_age(self, profile: FitnessProfile) -> FitnessAgeResult:
        """
        Estimate a fitness age and health audit for a profile.

        Args:
            profile: Vital signs and weekly activity

        Returns:
            Validated FitnessAgeResult

        Raises:
            TransportError: If the AI service call fails
            DecodeError: If the reply is not a valid FitnessAgeResult
        """
        return await self._generate_structured(
            "Fitness Age",
            build_fitness_age_prompt(profile),
            "fitness_age_result",
            FITNESS_AGE_SCHEMA,
            FitnessAgeResult,
            Settings.TEMPERATURE_ANALYSIS,
        )

    # --- Meal Planning ---

    async def generate_meal_plan(self, profile: UserProfile) -> MealPlan:
        """
        Generate a one-day meal plan.

        Totals are taken from the reply as-is and never recomputed from the meals.
        """
        return await self._generate_structured(
            "Meal Plan",
            build_meal_plan_prompt(profile),
            "meal_plan",
            MEAL_PLAN_SCHEMA,
            MealPlan,
            Settings.TEMPERATURE_CREATIVE,
        )

    async def generate_grocery_list(self, plan: MealPlan) -> str:
        """
        Generate a markdown grocery list for a plan.

        This is a free-text request: the markdown is returned unchanged and
        grouping it into sections is left to the caller.
        """
        text = await self._call_chat_api(
            "Grocery List",
            "You are a helpful kitchen assistant that outputs Markdown.",
            build_grocery_list_prompt(plan),
            Settings.TEMPERATURE_EXTRACTION,
        )
        if not text or not text.strip():
            log_invalid_response("Grocery List", text)
            raise DecodeError("AI returned an empty grocery list", raw_text=text)
        return text

    # --- Macro Analysis ---

    async def analyze_recipe(self, url: str) -> AnalyzedRecipe:
        """Estimate per-serving macros for the recipe at ``url``."""
        return await self._generate_structured(
            "Recipe Analysis",
            build_recipe_prompt(url),
            "analyzed_recipe",
            ANALYZED_RECIPE_SCHEMA,
            AnalyzedRecipe,
            Settings.TEMPERATURE_ANALYSIS,
        )

    async def lookup_scanned_product(self) -> ScannedProduct:
        # Simulated barcode lookup: there is no product database, the AI invents one.
        return await self._generate_structured(
            "Barcode Lookup",
            build_scanned_product_prompt(),
            "scanned_product",
            SCANNED_PRODUCT_SCHEMA,
            ScannedProduct,
            Settings.TEMPERATURE_CREATIVE,
        )
