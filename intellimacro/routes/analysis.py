"""
Recipe and barcode macro analysis routes.
"""
import time

from fastapi import APIRouter, HTTPException, Depends, Request

from intellimacro.core.auth import verify_internal_secret
from intellimacro.core.dependencies import get_inference_client
from intellimacro.core.errors import DecodeError, TransportError
from intellimacro.core.limiter import limiter
from intellimacro.core.logger import log_request, log_response, log_error
from intellimacro.models.schemas import (
    RecipeAnalysisRequest,
    RecipeAnalysisResponse,
    ScannedProductResponse,
)
from intellimacro.services.openai_service import StructuredInferenceClient

router = APIRouter(dependencies=[Depends(verify_internal_secret)])


@router.post("/analyze-recipe", response_model=RecipeAnalysisResponse)
@limiter.limit("10/minute")
async def analyze_recipe(
    request: Request,
    req: RecipeAnalysisRequest,
    client: StructuredInferenceClient = Depends(get_inference_client),
):
    """
    Estimate per-serving macros for a recipe URL.

    The page itself is never downloaded; the AI infers the recipe from the URL.
    """
    log_request("/analyze-recipe")
    start = time.perf_counter()

    try:
        analysis = await client.analyze_recipe(req.url)
        log_response("/analyze-recipe", "success", (time.perf_counter() - start) * 1000)
        return {"status": "success", "analysis": analysis}
    except DecodeError as e:
        log_error("Recipe analysis", e)
        raise HTTPException(status_code=500, detail="AI generation failed to produce valid JSON")
    except TransportError as e:
        log_error("Recipe analysis", e)
        raise HTTPException(status_code=503, detail="Recipe analysis is unavailable. Please try again.")
    except Exception as e:
        log_error("Recipe analysis", e)
        raise HTTPException(status_code=500, detail="Recipe analysis failed")


@router.post("/scan-product", response_model=ScannedProductResponse)
@limiter.limit("10/minute")
async def scan_product(
    request: Request,
    client: StructuredInferenceClient = Depends(get_inference_client),
):
    """Simulate a barcode scan and return the product's nutrition label."""
    log_request("/scan-product")
    start = time.perf_counter()

    try:
        product = await client.lookup_scanned_product()
        log_response("/scan-product", "success", (time.perf_counter() - start) * 1000)
        return {"status": "success", "product": product}
    except DecodeError as e:
        log_error("Barcode lookup", e)
        raise HTTPException(status_code=500, detail="AI generation failed to produce valid JSON")
    except TransportError as e:
        log_error("Barcode lookup", e)
        raise HTTPException(
            status_code=503,
            detail="Could not retrieve nutrition information. The AI might be having a moment."
        )
    except Exception as e:
        log_error("Barcode lookup", e)
        raise HTTPException(status_code=500, detail="Barcode lookup failed")
