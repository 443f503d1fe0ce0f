"""
Document processing module.

PDF parsing and chunking stages of the upload pipeline.
"""

from askpdf.core.document_processing.tasks import ChunkingTask, ParsingTask

__all__ = ["ChunkingTask", "ParsingTask"]
