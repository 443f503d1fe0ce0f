"""
Upload router utility functions.

Validation, temp-file staging and cleanup helpers for the upload endpoint.

Dependencies: fastapi, askpdf.core.exceptions
System role: Document upload utilities
"""

import logging
import shutil
import tempfile
from pathlib import Path

from fastapi import UploadFile

from askpdf.core.exceptions import DocumentTooLargeError, ValidationError

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPES = frozenset({"application/pdf", "application/x-pdf"})
READ_BLOCK_SIZE = 1024 * 1024


def validate_pdf_upload(upload: UploadFile) -> str:
    """
    Check that the upload looks like a PDF.

    Args:
        upload: Multipart file field

    Returns:
        str: Sanitized filename

    Raises:
        ValidationError: Missing filename, or non-PDF content type or extension
    """
    filename = Path(upload.filename or "").name
    if not filename:
        raise ValidationError("No file uploaded", field="document")

    content_type = (upload.content_type or "").split(";")[0].strip().lower()
    if content_type not in PDF_CONTENT_TYPES or not filename.lower().endswith(".pdf"):
        raise ValidationError(
            "Only PDF files are allowed",
            field="document",
            details={"content_type": content_type, "filename": filename},
        )
    return filename


async def save_upload_to_temp(
    upload: UploadFile,
    filename: str,
    max_bytes: int,
    prefix: str = "askpdf_",
) -> str:
    """
    Stream the upload into a fresh temp directory.

    Args:
        upload: Multipart file field
        filename: Sanitized filename
        max_bytes: Upload size ceiling
        prefix: Temp directory prefix (cleanup only removes matching dirs)

    Returns:
        str: Path of the staged file

    Raises:
        DocumentTooLargeError: Upload exceeds max_bytes
        ValidationError: Empty upload
    """
    temp_dir = tempfile.mkdtemp(prefix=prefix)
    file_path = str(Path(temp_dir) / filename)
    written = 0
    try:
        with open(file_path, "wb") as f:
            while block := await upload.read(READ_BLOCK_SIZE):
                written += len(block)
                if written > max_bytes:
                    raise DocumentTooLargeError(
                        "File too large to process",
                        limit=max_bytes,
                        actual=written,
                    )
                f.write(block)
        if written == 0:
            raise ValidationError("Uploaded file is empty", field="document")
    except Exception:
        cleanup_temp_file(file_path, prefix)
        raise

    logger.debug("Staged upload", extra={"file_path": file_path, "size_bytes": written})
    return file_path


def cleanup_temp_file(file_path: str, prefix: str = "askpdf_") -> None:
    """
    Safely remove temporary file and its parent temp directory.

    Args:
        file_path: Path to file to remove
        prefix: Prefix the parent directory must carry to be removed
    """
    try:
        path = Path(file_path)
        parent_dir = path.parent

        if path.exists():
            path.unlink()
            logger.debug("Cleaned up temp file", extra={"file_path": file_path})

        if parent_dir.exists() and parent_dir.name.startswith(prefix):
            shutil.rmtree(parent_dir, ignore_errors=True)
            logger.debug("Cleaned up temp directory", extra={"temp_dir": str(parent_dir)})

    except OSError as e:
        logger.warning(
            "Failed to cleanup temp file",
            extra={"file_path": file_path, "error": str(e)},
        )
