"""
Chat model factory.

Dependencies: langchain_google_genai, python-dotenv, askpdf.configs
System role: Text-generation provider construction
"""

import logging

from dotenv import load_dotenv
from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI

from askpdf.configs.llm import LLMSettings

logger = logging.getLogger(__name__)

load_dotenv()


def create_chat_model(settings: LLMSettings) -> BaseChatModel:
    """
    Create the Gemini chat model used for answer generation.

    Reads GOOGLE_API_KEY from the environment. Retries inside the client are
    disabled because the workflow applies its own bounded retry policy.

    Args:
        settings: LLM settings

    Returns:
        BaseChatModel: Configured chat model
    """
    logger.info(
        f"{__name__}:create_chat_model - model={settings.model_id}, temperature={settings.temperature}"
    )
    return ChatGoogleGenerativeAI(
        model=settings.model_id,
        temperature=settings.temperature,
        max_retries=0,
    )
