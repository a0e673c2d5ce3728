"""
Fitness-age calculator routes.
"""
import time

from fastapi import APIRouter, HTTPException, Depends, Request

from intellimacro.core.auth import verify_internal_secret
from intellimacro.core.dependencies import get_inference_client
from intellimacro.core.errors import DecodeError, TransportError
from intellimacro.core.limiter import limiter
from intellimacro.core.logger import log_request, log_response, log_error
from intellimacro.models.fitness import FitnessProfile
from intellimacro.models.schemas import FitnessAgeResponse
from intellimacro.services.openai_service import StructuredInferenceClient

router = APIRouter(dependencies=[Depends(verify_internal_secret)])


@router.post("/fitness-age", response_model=FitnessAgeResponse)
@limiter.limit("10/minute")
async def fitness_age(
    request: Request,
    req: FitnessProfile,
    client: StructuredInferenceClient = Depends(get_inference_client),
):
    """
    Calculate a fitness age and health audit.

    Takes vital signs and weekly activity and returns the AI's estimate,
    strengths, areas for improvement and a VO2 max estimate.
    """
    log_request("/fitness-age")
    start = time.perf_counter()

    try:
        result = await client.compute_fitness_age(req)
        log_response("/fitness-age", "success", (time.perf_counter() - start) * 1000)
        return {"status": "success", "result": result}
    except DecodeError as e:
        log_error("Fitness age calculation", e)
        raise HTTPException(status_code=500, detail="AI generation failed to produce valid JSON")
    except TransportError as e:
        log_error("Fitness age calculation", e)
        raise HTTPException(
            status_code=503,
            detail="The AI is resting right now. Please try again in a moment."
        )
    except Exception as e:
        log_error("Fitness age calculation", e)
        raise HTTPException(status_code=500, detail="Fitness age calculation failed")
