"""
Conversation prompt template.

Renders the conversation window, retrieved context and question into a
single deterministic prompt instructing the model to answer only from the
document context.

Dependencies: langchain_core.prompts
System role: Prompt template for answer generation
"""

from collections.abc import Sequence

from langchain_core.messages import BaseMessage
from langchain_core.prompt_values import PromptValue
from langchain_core.prompts import ChatPromptTemplate

CONVERSATION_PROMPT = ChatPromptTemplate.from_template(
    """You are a helpful AI assistant that answers questions about an uploaded document using the provided context and conversation history.

Conversation History:
{conversation_history}

Current Context from Documents:
{context}

Current Question: {question}

Instructions:
1. Answer ONLY from the document context provided above
2. Use the conversation history to understand follow-up questions
3. If the context does not contain the information needed, say clearly that the document does not provide enough information to answer
4. Be concise but comprehensive
5. Reference specific parts of the document when relevant

Answer:"""
)


def format_conversation(messages: Sequence[BaseMessage]) -> str:
    """Render messages as `role: content` lines (roles 'human' / 'ai')."""
    return "\n".join(f"{message.type}: {message.content}" for message in messages)


def render_prompt(
    question: str,
    context: str,
    history: Sequence[BaseMessage],
) -> PromptValue:
    """
    Render the generation prompt.

    Args:
        question: Current question
        context: Retrieved passages joined by blank lines (may be empty)
        history: Conversation window, oldest first

    Returns:
        PromptValue: Prompt ready for chat model invocation
    """
    return CONVERSATION_PROMPT.invoke({
        "conversation_history": format_conversation(history),
        "context": context,
        "question": question,
    })
