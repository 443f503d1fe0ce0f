"""
Test suite for configuration classes.

System role: Verification of defaults and environment overrides
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from askpdf.configs.conversation import ConversationSettings
from askpdf.configs.documents import DocumentSettings
from askpdf.configs.settings import Settings


class TestSettings:
    """Test suite for Settings aggregation."""

    def test_defaults(self) -> None:
        settings = Settings()

        assert settings.documents.chunk_size == 1000
        assert settings.documents.chunk_overlap == 200
        assert settings.documents.max_chunks == 5000
        assert settings.vector_store.retrieval_k == 5
        assert settings.conversation.history_window == 6
        assert settings.conversation.max_sessions_per_owner == 3

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CONVERSATION_HISTORY_WINDOW", "4")
        monkeypatch.setenv("CONVERSATION_HISTORY_RETENTION", "full")

        settings = ConversationSettings()

        assert settings.history_window == 4
        assert settings.history_retention == "full"

    def test_shared_base_fields_read_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("DEBUG", "true")

        settings = Settings()

        assert settings.log_level == "DEBUG"
        assert settings.debug is True

    def test_overlap_must_be_smaller_than_size(self) -> None:
        with pytest.raises(PydanticValidationError):
            DocumentSettings(chunk_size=100, chunk_overlap=100)
