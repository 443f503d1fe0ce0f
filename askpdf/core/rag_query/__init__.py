"""RAG query business logic.

Session-scoped retrieval, prompt rendering, generation and the LangGraph
workflow joining them.
"""

from .generation import AnswerGenerator, normalize_content
from .workflow import ConversationWorkflow, WorkflowResult, create_conversation_graph

__all__ = [
    "AnswerGenerator",
    "ConversationWorkflow",
    "WorkflowResult",
    "create_conversation_graph",
    "normalize_content",
]
