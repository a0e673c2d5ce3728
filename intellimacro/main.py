"""
IntelliMacro Service - Main Entry Point

AI-powered fitness-age calculator, meal planner and macro analyzer.
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from intellimacro.core.config import settings
from intellimacro.core.errors import ConfigurationError
from intellimacro.core.logger import logger
from intellimacro.core.limiter import limiter
from intellimacro.routes import analysis, fitness, nutrition
from intellimacro.services.openai_service import StructuredInferenceClient

SERVICE_NAME = "intellimacro-service"
VERSION = "1.0.0"


# Validate configuration on startup
try:
    settings.validate()
    logger.info("Configuration validated successfully")
except ConfigurationError as e:
    logger.error(f"Configuration error: {e}")
    raise


# Create FastAPI app
app = FastAPI(
    title="IntelliMacro Service",
    description="AI-powered fitness-age calculator, meal planner and macro analyzer",
    version=VERSION
)

# One client for the whole process; its configuration is read-only
app.state.inference_client = StructuredInferenceClient.from_settings(settings)

# Attach rate limiter and its error handler
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


app.include_router(fitness.router, tags=["Fitness"])
app.include_router(nutrition.router, tags=["Nutrition"])
app.include_router(analysis.router, tags=["Analysis"])


@app.get("/")
@limiter.limit("60/minute")
def root(request: Request):
    """Health check endpoint."""
    return {"message": "IntelliMacro Service running"}


@app.get("/health")
def health():
    """
    Detailed health status.
    Returns 'degraded' if the internal secret is missing and AI routes are locked.
    """
    # OPENAI_API_KEY is enforced by settings.validate() at import
    missing = []
    if not settings.INTERNAL_API_SECRET:
        missing.append("INTERNAL_API_SECRET")

    if missing:
        return JSONResponse(
            status_code=200,
            content={
                "status": "degraded",
                "service": SERVICE_NAME,
                "version": VERSION,
                "missing_config": missing,
                "message": f"Missing required environment variables: {', '.join(missing)}"
            }
        )

    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": VERSION
    }


# Run with uvicorn when executed directly
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "intellimacro.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False
    )
