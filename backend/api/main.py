"""FastAPI application for the Bedtime Story Generator."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.core.errors import ConfigurationError, ValidationError
from backend.core.modules.story_templates import verify_registry

from .config import CORS_ORIGINS, LOG_FORMAT, LOG_LEVEL
from .logging import configure_logging
from .routes import characters, stories, vocabulary

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    configure_logging(json_format=LOG_FORMAT == "json", level=LOG_LEVEL)

    # Fail fast if the theme vocabulary and the template registry have drifted
    verify_registry()
    logger.info("Story template registry verified")

    yield


app = FastAPI(
    title="Bedtime Story Generator API",
    description="""
Generate short personalized bedtime stories from a child's name, a favorite
animal and a moral theme.

## Features
- **Stories**: Templated multi-paragraph stories with word count and reading time
- **Characters**: Save custom animal characters and star them in stories
- **Illustrations**: Anchor supplied images after specific paragraphs

## Workflow
1. POST `/api/stories` with `childName`, `animal` and `theme`
2. GET `/api/stories/{id}` to read it again later
    """,
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for web frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "field": exc.field},
    )


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    logger.critical("Story templates misconfigured: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Story templates are misconfigured"},
    )


# Include routers
app.include_router(stories.router, prefix="/api/stories", tags=["Stories"])
app.include_router(characters.router, prefix="/api/characters", tags=["Characters"])
app.include_router(vocabulary.router, prefix="/api/vocabulary", tags=["Vocabulary"])


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
