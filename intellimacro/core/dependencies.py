"""
Shared FastAPI dependencies.
"""
from fastapi import Request

from intellimacro.services.openai_service import StructuredInferenceClient


def get_inference_client(request: Request) -> StructuredInferenceClient:
    """Return the inference client built once at startup."""
    return request.app.state.inference_client
