"""
Career chatbot prompt.

Defines the system prompt and the context/question template used to ground
answers in retrieved passages.

Dependencies: langchain_core.prompts
System role: Prompt template for answer generation
"""

from langchain_core.prompts import ChatPromptTemplate

from profile_rag.core.retrieval import RetrievedPassage

SYSTEM_PROMPT = """You are the candidate's public career chatbot. Audience: HR and general public.
Tone: professional, concise, friendly. Mirror Indonesian/English automatically.
Answer ONLY from the provided context. If missing, say you don't have that info.
Refuse sensitive PII (NIK/NPWP/SSN, full home address, family, religion, marital status).
Do NOT state salary unless present in context.
Always include short tags derived from the context you used (e.g., [project:Name])."""

ANSWER_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SYSTEM_PROMPT),
    ("human", """Context:
{context}

Question:
{question}

Answer with tags."""),
])

CONTEXT_SEPARATOR = "\n\n---\n\n"


def format_context(passages: list[RetrievedPassage]) -> str:
    """Render passages as SOURCE-labelled blocks."""
    return CONTEXT_SEPARATOR.join(
        f"SOURCE: {passage.source_id}\n{passage.text}" for passage in passages
    )
