import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from replypilot.config import settings
from replypilot.models.review import ErrorResponse
from replypilot.routers import reply
from replypilot.services.completion_client import build_dispatcher

VERSION = "1.0.0"

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the completion provider client once and share it across requests."""
    logger.info("Starting up with provider=%s", settings.llm_provider)
    app.state.dispatcher = build_dispatcher(settings)
    logger.info("Startup complete. model=%s", app.state.dispatcher.model)
    yield
    await app.state.dispatcher.aclose()
    logger.info("Shutting down.")


app = FastAPI(
    title="ReplyPilot",
    description=(
        "Generates short, publish-ready seller replies to marketplace product "
        "reviews using an LLM chat-completion provider."
    ),
    version=VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(reply.router)


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError):
    logger.info("Invalid request body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error="Invalid request body.", details=str(exc.errors())).model_dump(),
    )


@app.get("/", response_class=PlainTextResponse, tags=["health"])
async def root():
    return "ReplyPilot backend is running."


@app.get("/health", tags=["health"])
async def health_check():
    return {"status": "ok", "version": VERSION, "provider": settings.llm_provider}
