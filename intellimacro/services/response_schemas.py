"""
JSON Schemas sent to OpenAI structured outputs.

Strict mode requires every object to list all of its properties as required
and to set ``additionalProperties`` to false.
"""

MACROS_SCHEMA = {
    "type": "object",
    "properties": {
        "calories": {"type": "integer"},
        "protein": {"type": "integer", "description": "Grams of protein"},
        "carbs": {"type": "integer", "description": "Grams of carbohydrates"},
        "fat": {"type": "integer", "description": "Grams of fat"},
    },
    "required": ["calories", "protein", "carbs", "fat"],
    "additionalProperties": False,
}

FITNESS_AGE_SCHEMA = {
    "type": "object",
    "properties": {
        "fitnessAge": {
            "type": "integer",
            "description": "The user's calculated fitness age as an integer.",
        },
        "analysis": {
            "type": "string",
            "description": "A concise, one-paragraph analysis of the user's fitness age and what it means.",
        },
        "strengths": {
            "type": "array",
            "description": "2-3 strings highlighting the user's positive health and fitness metrics.",
            "items": {"type": "string"},
        },
        "areasForImprovement": {
            "type": "array",
            "description": "2-3 strings giving actionable advice where the user can improve.",
            "items": {"type": "string"},
        },
        "vo2MaxEstimate": {
            "type": "number",
            "description": "A reasonable estimate of the user's VO2 Max.",
        },
        "disclaimer": {
            "type": "string",
            "description": "A standard disclaimer that this is an estimate and not a medical diagnosis.",
        },
    },
    "required": [
        "fitnessAge",
        "analysis",
        "strengths",
        "areasForImprovement",
        "vo2MaxEstimate",
        "disclaimer",
    ],
    "additionalProperties": False,
}

MEAL_SCHEMA = {
    "type": "object",
    "properties": {
        "type": {"type": "string", "enum": ["Breakfast", "Lunch", "Dinner", "Snack"]},
        "name": {"type": "string"},
        "macros": MACROS_SCHEMA,
        "ingredients": {"type": "array", "items": {"type": "string"}},
        "instructions": {"type": "string"},
    },
    "required": ["type", "name", "macros", "ingredients", "instructions"],
    "additionalProperties": False,
}

MEAL_PLAN_SCHEMA = {
    "type": "object",
    "properties": {
        "day": {"type": "string", "description": "The day of the week, e.g., 'Monday'."},
        "totalMacros": MACROS_SCHEMA,
        "meals": {"type": "array", "items": MEAL_SCHEMA},
    },
    "required": ["day", "totalMacros", "meals"],
    "additionalProperties": False,
}

ANALYZED_RECIPE_SCHEMA = {
    "type": "object",
    "properties": {
        "recipeName": {"type": "string"},
        "servingSize": {"type": "string"},
        "macrosPerServing": MACROS_SCHEMA,
        "ingredients": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["recipeName", "servingSize", "macrosPerServing", "ingredients"],
    "additionalProperties": False,
}

SCANNED_PRODUCT_SCHEMA = {
    "type": "object",
    "properties": {
        "productName": {"type": "string"},
        "servingSize": {"type": "string"},
        "servingsPerContainer": {"type": "number"},
        "macrosPerServing": MACROS_SCHEMA,
        "ingredients": {"type": "array", "items": {"type": "string"}},
    },
    "required": [
        "productName",
        "servingSize",
        "servingsPerContainer",
        "macrosPerServing",
        "ingredients",
    ],
    "additionalProperties": False,
}


def json_schema_format(name: str, schema: dict) -> dict:
    """Wrap a schema in the ``response_format`` payload OpenAI expects."""
    return {
        "type": "json_schema",
        "json_schema": {
            "name": name,
            "schema": schema,
            "strict": True,
        },
    }
