"""Router helper functions."""

from .upload_utils import cleanup_temp_file, save_upload_to_temp, validate_pdf_upload

__all__ = ["cleanup_temp_file", "save_upload_to_temp", "validate_pdf_upload"]
