# main.py - Entry point and app setup only
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.settings import Settings, settings
from utils.logger import setup_logging, get_logger, RequestLogger
from personas import PERSONAS
from services.history_store import ConversationStore
from services.model_service import GeminiProvider, ModelProvider, ModelSessionManager

BANNER = "Pocketcare AI is running! Use /counseling for mental health support or /nutrition for meal planning."

def _build_model_service(app_settings: Settings, provider: ModelProvider) -> ModelSessionManager:
    return ModelSessionManager(
        provider,
        PERSONAS.values(),
        serialize=app_settings.serialize_persona_requests
    )

def create_app(app_settings: Settings = settings, provider: Optional[ModelProvider] = None) -> FastAPI:
    """Build the application with its own conversation store.

    When no provider is given, the Gemini provider is created at startup from
    ``GOOGLE_API_KEY``; startup fails if the key is missing.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        setup_logging()
        logger = get_logger("startup")
        logger.info("Starting PocketCare AI", version=app_settings.version, model=app_settings.gemini_model)
        if app.state.model_service is None:
            gemini = GeminiProvider(app_settings.google_api_key, app_settings.gemini_model)
            app.state.model_service = _build_model_service(app_settings, gemini)
        logger.info("PocketCare AI running", url=f"http://localhost:{app_settings.port}")
        yield
        logger.info("Shutting down PocketCare AI")

    app = FastAPI(
        title=app_settings.app_name,
        description="Counseling and nutrition personas backed by Gemini",
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
        lifespan=lifespan
    )

    app.state.conversation_store = ConversationStore(PERSONAS)
    app.state.model_service = _build_model_service(app_settings, provider) if provider is not None else None

    # Setup middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(RequestLogger())

    # Error bodies are {"error": ...}
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # The message body is the only input the API validates
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Message is required"})

    # Import and include routers
    from api import chat_router, health_router

    app.include_router(health_router.router, tags=["Health"])
    app.include_router(chat_router.router, tags=["Personas"])

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        """Root endpoint."""
        return BANNER

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn

    setup_logging()
    if not settings.google_api_key:
        get_logger("startup").error("GOOGLE_API_KEY not found in environment variables!")
        sys.exit(1)

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower()
    )
