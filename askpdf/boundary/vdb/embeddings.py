"""
Embedding provider factory.

Dependencies: langchain_google_genai, python-dotenv
System role: Embedding model construction for the vector index
"""

import logging

from dotenv import load_dotenv
from langchain_core.embeddings import Embeddings
from langchain_google_genai import GoogleGenerativeAIEmbeddings

logger = logging.getLogger(__name__)

load_dotenv()


def create_embeddings(model: str = "models/text-embedding-004") -> Embeddings:
    """
    Create Google Generative AI embeddings.

    Reads GOOGLE_API_KEY from the environment.

    Args:
        model: Embedding model ID

    Returns:
        Embeddings: LangChain embeddings instance
    """
    logger.info(f"{__name__}:create_embeddings - model={model}")
    return GoogleGenerativeAIEmbeddings(model=model)
