"""Application entry point defining the HTTP API."""
from __future__ import annotations

import logging
from functools import partial
from typing import Any, Callable, List, TypeVar

from fastapi import (
    APIRouter,
    Body,
    FastAPI,
    File,
    HTTPException,
    Response,
    UploadFile,
    status,
)
from fastapi.middleware.cors import CORSMiddleware

from cv_search.application.process_cv import (
    ClearDocumentsUseCase,
    ListDocumentsUseCase,
    TextExtractor,
    UploadDocumentUseCase,
    UploadedFile,
)
from cv_search.application.search_cvs import SearchDocumentsUseCase
from cv_search.config.settings import JSON_BACKEND, Settings, get_settings
from cv_search.domain.errors import StorageError, ValidationError
from cv_search.domain.models.search_query import SearchQuery
from cv_search.domain.repositories.document_repository import DocumentRepository
from cv_search.infrastructure.parsers.content_type_text_extractor import (
    ContentTypeTextExtractor,
)
from cv_search.infrastructure.repositories.in_memory_document_repository import (
    InMemoryDocumentRepository,
)
from cv_search.infrastructure.repositories.json_document_repository import (
    JsonDocumentRepository,
)

logger = logging.getLogger(__name__)

_ResultT = TypeVar("_ResultT")


def create_app(
    document_repo: DocumentRepository | None = None,
    text_extractor: TextExtractor | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application instance."""

    settings = get_settings()

    document_repository = (
        document_repo if document_repo is not None else _build_repository(settings)
    )
    extractor = text_extractor if text_extractor is not None else ContentTypeTextExtractor()

    document_uploader = UploadDocumentUseCase(extractor, document_repository)
    document_lister = ListDocumentsUseCase(document_repository)
    document_searcher = SearchDocumentsUseCase(document_repository)
    document_clearer = ClearDocumentsUseCase(document_repository)

    app = FastAPI(title="CV Search API", version=settings.app_version)

    @app.get("/", status_code=status.HTTP_200_OK)
    async def get_root() -> dict[str, str]:
        """Return a simple heartbeat response for uptime monitoring."""

        return {"message": "RUNNING CV SEARCH"}

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_router = APIRouter(prefix=settings.api_prefix)

    @api_router.get("/status", status_code=status.HTTP_200_OK)
    async def get_status() -> dict:
        """Return the operational status and version of the service."""

        return {"status": "ok", "version": settings.app_version}

    @api_router.post("/cvs/upload", status_code=status.HTTP_200_OK)
    async def upload_cvs(files: List[UploadFile] = File(...)) -> list[dict]:
        """Extract and store every uploaded PDF or DOCX file."""

        uploads = [
            UploadedFile(
                filename=uploaded_file.filename or "",
                content_type=uploaded_file.content_type or "",
                content=await _read_cv_bytes(uploaded_file, settings),
            )
            for uploaded_file in files
        ]

        documents = _execute_use_case(partial(document_uploader.execute_many, uploads))
        return [document.to_dict() for document in documents]

    @api_router.get("/cvs", status_code=status.HTTP_200_OK)
    async def list_cvs() -> list[dict]:
        """Return every stored CV without ranking."""

        documents = _execute_use_case(document_lister.execute)
        return [document.to_dict() for document in documents]

    @api_router.post("/cvs/search", status_code=status.HTTP_200_OK)
    async def search_cvs(payload: dict[str, Any] = Body(...)) -> list[dict]:
        """Return stored CVs ranked by keyword occurrences."""

        query = _execute_use_case(lambda: SearchQuery.from_dict(payload))
        documents = _execute_use_case(lambda: document_searcher.execute_query(query))
        return [document.to_dict() for document in documents]

    @api_router.delete("/cvs", status_code=status.HTTP_204_NO_CONTENT)
    async def clear_cvs() -> Response:
        """Delete every stored CV and restart document ids."""

        _execute_use_case(document_clearer.execute)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    app.include_router(api_router)
    return app


def _build_repository(settings: Settings) -> DocumentRepository:
    """Return the repository implementation selected in ``settings``."""

    if settings.storage_backend == JSON_BACKEND:
        return JsonDocumentRepository(settings.documents_path)
    return InMemoryDocumentRepository()


app = create_app()


async def _read_cv_bytes(uploaded_file: UploadFile, settings: Settings) -> bytes:
    """Read ``uploaded_file`` ensuring type, non-emptiness and size constraints."""

    if uploaded_file.content_type not in settings.allowed_content_types:
        logger.warning(
            "Rejected %s with content type %s",
            uploaded_file.filename,
            uploaded_file.content_type,
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid file type. Only PDF and DOCX files are allowed.",
        )

    file_bytes = await uploaded_file.read()
    if not file_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"The file '{uploaded_file.filename}' is empty.",
        )

    if len(file_bytes) > settings.max_upload_size_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"The file '{uploaded_file.filename}' exceeds the allowed size.",
        )

    return file_bytes


def _execute_use_case(operation: Callable[[], _ResultT]) -> _ResultT:
    """Run ``operation`` converting domain errors to HTTP errors."""

    try:
        return operation()
    except ValidationError as validation_error:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(validation_error),
        ) from validation_error
    except StorageError as storage_error:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(storage_error),
        ) from storage_error
