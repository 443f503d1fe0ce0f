"""
Test suite for the conversation prompt.

System role: Verification of prompt rendering
"""

from langchain_core.messages import AIMessage, HumanMessage

from askpdf.core.rag_query.prompt import format_conversation, render_prompt


class TestConversationPrompt:
    """Test suite for format_conversation and render_prompt."""

    def test_format_conversation_uses_role_prefixes(self) -> None:
        text = format_conversation([HumanMessage(content="Hi"), AIMessage(content="Hello")])

        assert text == "human: Hi\nai: Hello"

    def test_render_prompt_contains_all_parts(self) -> None:
        prompt = render_prompt(
            question="What is the refund window?",
            context="Refunds are accepted within 30 days.",
            history=[HumanMessage(content="Earlier question")],
        )

        text = prompt.to_string()
        assert "What is the refund window?" in text
        assert "Refunds are accepted within 30 days." in text
        assert "human: Earlier question" in text
        assert "does not provide enough information" in text

    def test_render_prompt_is_deterministic(self) -> None:
        first = render_prompt("q", "ctx", []).to_string()
        second = render_prompt("q", "ctx", []).to_string()

        assert first == second
