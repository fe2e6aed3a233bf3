from contextlib import asynccontextmanager
from typing import Any

from fastapi import Body, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from services.tone_adjustment.service import ToneAdjustmentService
from shared.config import config
from shared.exceptions import UpstreamError, ValidationError
from shared.logging_utils import setup_logging
from shared.models import AdjustmentResponse
from shared.response_models import ErrorResponse, HealthResponse

SERVICE_VERSION = "1.0.0"

logger = setup_logging("tone-adjustment-service")


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await tone_service.close()


app = FastAPI(
    title="Tone Adjustment Service",
    description="Rewrite text along formality and verbosity axes with a language model",
    version=SERVICE_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get("allowed_origins", ["*"]),
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

tone_service = ToneAdjustmentService(logger)


def get_tone_service() -> ToneAdjustmentService:
    return tone_service


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error(400, "Request body must be a JSON object")


@app.get("/health", response_model=HealthResponse)
async def health_check(service: ToneAdjustmentService = Depends(get_tone_service)):
    return HealthResponse(
        status="healthy",
        message="Tone Adjustment Service is healthy",
        version=SERVICE_VERSION,
        dependencies=service.dependency_status(),
    )


@app.post(
    "/api/tone/adjust",
    response_model=AdjustmentResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def adjust_tone(
    payload: dict[str, Any] = Body(...),
    service: ToneAdjustmentService = Depends(get_tone_service),
):
    """Adjust the tone and style of the provided text."""
    try:
        return await service.adjust(
            payload.get("text"), payload.get("toneLevel"), payload.get("styleLevel")
        )
    except ValidationError as e:
        return _error(400, str(e))
    except UpstreamError as e:
        logger.error(f"Error in tone adjustment: {e!s}")
        return _error(500, str(e))
    except Exception:
        logger.exception("Unexpected error in tone adjustment")
        return _error(500, "Something went wrong!")


if __name__ == "__main__":
    try:
        import uvicorn
    except ImportError as e:
        raise RuntimeError("uvicorn must be installed to run this service.") from e
    uvicorn.run(app, host="0.0.0.0", port=config.get("port", 8000))
