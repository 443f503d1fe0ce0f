"""
Conversation workflow state schema.

Dependencies: typing, askpdf.boundary.vdb
System role: LangGraph state for the retrieve -> generate pipeline
"""

from typing import TypedDict

from askpdf.boundary.vdb.vector_schemas import VectorSearchResult


class ConversationState(TypedDict, total=False):
    """LangGraph state for one question.

    TypedDict with total=False lets each node return only the keys it sets.
    """

    # Inputs
    question: str
    session_id: str

    # Retrieve output
    retrieved: list[VectorSearchResult]
    context: str

    # Generate output
    answer: str
    conversation_length: int
