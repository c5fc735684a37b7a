import logging
import os

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import Config, config
from shared.errors import ReviewError
from shared.models import ReviewResult
from reviewer.processor import ReviewProcessor
from .models import ErrorResponse, HealthResponse, ReviewRequest

if not logging.getLogger().handlers:
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

log = logging.getLogger(__name__)

UNEXPECTED_ERROR = "An unexpected error occurred during code review"

app = FastAPI(title="AI Code Review Assistant")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_config() -> Config:
    # Fresh settings from the environment on every request
    return Config.from_env()


def get_processor(settings: Config = Depends(get_config)) -> ReviewProcessor:
    return ReviewProcessor(settings)


def _error(message: str, status_code: int) -> JSONResponse:
    body = ReviewResult.failed(message).model_dump(exclude_none=True)
    return JSONResponse(content=body, status_code=status_code)


@app.exception_handler(RequestValidationError)
async def invalid_body(request: Request, exc: RequestValidationError):
    log.info("Rejected malformed review request: %s", exc.errors())
    return _error("Invalid request body", 400)


@app.post(
    "/api/review",
    response_model=ReviewResult,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def submit_review(request: ReviewRequest, processor: ReviewProcessor = Depends(get_processor)):
    try:
        return processor.review(request.code or "", request.language or "")
    except ReviewError as e:
        if e.status_code >= 500:
            log.error("Review failed: %s", e.message)
        return _error(e.message, e.status_code)
    except Exception as e:
        log.exception("Error in review API")
        return _error(str(e) or UNEXPECTED_ERROR, 500)


@app.options("/api/review")
def review_options():
    return {}


@app.get("/health", response_model=HealthResponse)
def health(settings: Config = Depends(get_config)):
    return HealthResponse(status="ok", llm_configured=settings.has_api_key)


def serve():
    import uvicorn

    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8000")))


if __name__ == "__main__":
    serve()
