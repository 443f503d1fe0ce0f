"""
Document upload schemas.

Dependencies: pydantic
System role: Upload API contract
"""

from askpdf.models.common import CamelModel


class UploadResponse(CamelModel):
    """Response schema for a processed upload."""

    message: str = "PDF uploaded and processed."
    session_id: str
    chunks: int
    name: str
