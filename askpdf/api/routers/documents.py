"""
Document upload endpoint.

Routes:
- POST /upload - Upload a PDF (multipart field 'document') and create a session

Dependencies: askpdf.application.services.document_service
System role: Document HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, UploadFile

from askpdf.api.deps import ServiceContainer, get_container, get_document_service, get_owner_id
from askpdf.application.services import DocumentService
from askpdf.models.document import UploadResponse

from .router_utils import cleanup_temp_file, save_upload_to_temp, validate_pdf_upload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["documents"])


@router.post("/upload", response_model=UploadResponse)
async def upload_document(
    document: UploadFile = File(...),
    owner_id: str = Depends(get_owner_id),
    container: ServiceContainer = Depends(get_container),
    document_service: DocumentService = Depends(get_document_service),
) -> UploadResponse:
    """
    Upload a PDF and create a new chat session from it.

    Flow:
    1. Validate content type and extension
    2. Stage the upload in a temp directory (size ceiling enforced)
    3. Parse, chunk and index into a new session
    4. Always remove the temp directory

    Raises:
        ValidationError (400): Non-PDF or empty upload
        DocumentTooLargeError (400): Byte or chunk ceiling exceeded
        SessionLimitExceededError (403): Caller at session limit
        DocumentProcessingError (500): Parsing or indexing failed
    """
    settings = container.settings.documents
    filename = validate_pdf_upload(document)

    logger.info("Upload received", extra={"file_name": filename, "owner_id": owner_id})

    file_path = await save_upload_to_temp(
        document,
        filename,
        max_bytes=settings.max_upload_bytes,
        prefix=settings.temp_dir_prefix,
    )
    try:
        record = await document_service.upload_document(
            owner_id=owner_id,
            document_name=filename,
            file_path=file_path,
        )
    finally:
        cleanup_temp_file(file_path, settings.temp_dir_prefix)

    return UploadResponse(session_id=record.id, chunks=record.chunk_count, name=record.name)
