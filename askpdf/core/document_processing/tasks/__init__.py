"""Document processing pipeline tasks."""

from askpdf.core.document_processing.tasks.chunking_task import ChunkingTask
from askpdf.core.document_processing.tasks.parsing_task import ParsingTask

__all__ = ["ChunkingTask", "ParsingTask"]
