import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.db import init_all_databases
from app.db.sqlite import StorageError
from app.services.lexicon import DEFAULT_LEXICON, load_lexicon

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_all_databases(settings.data_dir)
    if settings.lexicon_path is not None:
        app.state.lexicon = load_lexicon(settings.lexicon_path)
        logger.info(
            "Loaded lexicon from %s: %s",
            settings.lexicon_path,
            ", ".join(app.state.lexicon.subject_names),
        )
    else:
        app.state.lexicon = DEFAULT_LEXICON
    yield


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error(
        "%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc
    )
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # malformed create bodies get the same 400 as missing fields
    if request.method == "POST" and request.url.path == "/flashcard":
        from app.routers.flashcards import CREATE_FIELDS_REQUIRED

        return JSONResponse(status_code=400, content={"detail": CREATE_FIELDS_REQUIRED})
    return await request_validation_exception_handler(request, exc)


def create_app() -> FastAPI:
    application = FastAPI(
        title="Flashcard Revision Backend", version="0.1.0", lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_exception_handler(StorageError, storage_error_handler)
    application.add_exception_handler(RequestValidationError, validation_error_handler)

    from app.routers import flashcards, health

    application.include_router(health.router)
    application.include_router(flashcards.router, tags=["flashcards"])

    return application


app = create_app()
