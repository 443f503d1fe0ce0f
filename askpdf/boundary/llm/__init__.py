"""Text-generation provider boundary."""

from askpdf.boundary.llm.chat_model_factory import create_chat_model

__all__ = ["create_chat_model"]
