"""
Conversation workflow nodes.

retrieve_node: session-scoped similarity search -> context string.
generate_node: history window + context -> answer, then history write.

Dependencies: fastapi.concurrency, askpdf.boundary.vdb, askpdf.core.session
System role: Node implementations for the conversation graph
"""

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Literal

from fastapi.concurrency import run_in_threadpool

from askpdf.core.exceptions import AskPdfException, RetrievalError
from askpdf.core.rag_query.generation import AnswerGenerator
from askpdf.core.rag_query.prompt import render_prompt
from askpdf.core.rag_query.state import ConversationState
from askpdf.core.session import recent_window, to_messages
from askpdf.models.chat import ChatTurn

if TYPE_CHECKING:
    from askpdf.application.adapters import ChatHistoryAdapter
    from askpdf.boundary.vdb.faiss_store import SessionVectorStore

logger = logging.getLogger(__name__)

CONTEXT_SEPARATOR = "\n\n"


async def retrieve_node(
    state: ConversationState,
    vector_store: "SessionVectorStore",
    k: int = 5,
) -> dict:
    """
    Retrieve the top-k passages of the session for the question.

    An empty result is valid and yields an empty context.
    """
    session_id = state["session_id"]
    try:
        results = await run_in_threadpool(
            vector_store.similarity_search,
            state["question"],
            session_id,
            k,
        )
    except AskPdfException:
        raise
    except Exception as e:
        raise RetrievalError(f"Retrieval failed: {e}", session_id=session_id) from e

    context = CONTEXT_SEPARATOR.join(result.content for result in results)
    logger.info(
        f"{__name__}:retrieve_node - Retrieved {len(results)} passages",
        extra={"session_id": session_id, "context_len": len(context)},
    )
    return {"retrieved": results, "context": context}


async def generate_node(
    state: ConversationState,
    history: "ChatHistoryAdapter",
    generator: AnswerGenerator,
    history_window: int = 6,
    history_retention: Literal["window", "full"] = "window",
) -> dict:
    """
    Generate the answer and persist the updated history.

    With 'window' retention the stored history becomes the prompt window plus
    the new pair; with 'full' the new pair is appended to the whole history.
    History is written only after a successful generation.
    """
    session_id = state["session_id"]
    question = state["question"]

    turns = await history.get_turns(session_id)
    window = recent_window(turns, history_window)

    prompt = render_prompt(question, state.get("context", ""), to_messages(window))
    answer = await generator.generate(prompt)

    now = datetime.now(timezone.utc)
    new_pair = [
        ChatTurn(type="human", content=question, timestamp=now),
        ChatTurn(type="ai", content=answer, timestamp=now),
    ]
    base = window if history_retention == "window" else turns
    updated = [*base, *new_pair]
    await history.save_turns(session_id, updated)

    logger.info(
        f"{__name__}:generate_node - Answer generated",
        extra={
            "session_id": session_id,
            "answer_len": len(answer),
            "window_turns": len(window),
            "stored_turns": len(updated),
        },
    )
    return {"answer": answer, "conversation_length": len(updated)}
