"""
Conversational retrieval workflow.

Builds and compiles the two-node LangGraph (retrieve -> generate) and wraps
it in ConversationWorkflow, the entry point used by ChatService.

Dependencies: langgraph, askpdf.core.rag_query.nodes
System role: Graph orchestration for per-session question answering
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from langgraph.graph import END, StateGraph

from askpdf.core.rag_query.generation import AnswerGenerator
from askpdf.core.rag_query.nodes import generate_node, retrieve_node
from askpdf.core.rag_query.state import ConversationState

if TYPE_CHECKING:
    from askpdf.application.adapters import ChatHistoryAdapter
    from askpdf.boundary.vdb.faiss_store import SessionVectorStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorkflowResult:
    """Outcome of one answered question."""

    answer: str
    conversation_length: int
    context: str


def create_conversation_graph(
    vector_store: "SessionVectorStore",
    history: "ChatHistoryAdapter",
    generator: AnswerGenerator,
    retrieval_k: int = 5,
    history_window: int = 6,
    history_retention: Literal["window", "full"] = "window",
):
    """Create LangGraph for the conversation pipeline.

    Args:
        vector_store: Session-scoped vector store
        history: Chat history adapter
        generator: Chat model invoker
        retrieval_k: Passages retrieved per question
        history_window: Turns included in the prompt
        history_retention: 'window' or 'full' persisted history

    Returns:
        CompiledStateGraph: Compiled and runnable graph
    """
    graph = StateGraph(ConversationState)

    async def retrieve_wrapper(state: ConversationState) -> dict:
        return await retrieve_node(state, vector_store, k=retrieval_k)

    async def generate_wrapper(state: ConversationState) -> dict:
        return await generate_node(
            state,
            history,
            generator,
            history_window=history_window,
            history_retention=history_retention,
        )

    graph.add_node("retrieve", retrieve_wrapper)
    graph.add_node("generate", generate_wrapper)

    graph.set_entry_point("retrieve")
    graph.add_edge("retrieve", "generate")
    graph.add_edge("generate", END)

    compiled = graph.compile()
    logger.debug(f"{__name__}:create_conversation_graph - Graph compiled")
    return compiled


class ConversationWorkflow:
    """
    Per-question retrieve -> generate pipeline.

    The graph is compiled once and reused; callers serialize invocations per
    session (see SessionLockRegistry) because generate performs a
    read-modify-write of the stored history.
    """

    def __init__(
        self,
        vector_store: "SessionVectorStore",
        history: "ChatHistoryAdapter",
        generator: AnswerGenerator,
        retrieval_k: int = 5,
        history_window: int = 6,
        history_retention: Literal["window", "full"] = "window",
    ) -> None:
        self._graph = create_conversation_graph(
            vector_store,
            history,
            generator,
            retrieval_k=retrieval_k,
            history_window=history_window,
            history_retention=history_retention,
        )

    async def run(self, question: str, session_id: str) -> WorkflowResult:
        """
        Answer a question against a session.

        Raises:
            UpstreamError: On retrieval or generation failure
            StorageCorruptionError: When stored history is unreadable
        """
        final_state = await self._graph.ainvoke({"question": question, "session_id": session_id})
        return WorkflowResult(
            answer=final_state["answer"],
            conversation_length=final_state["conversation_length"],
            context=final_state.get("context", ""),
        )
