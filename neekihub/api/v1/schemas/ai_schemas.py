"""Schemas for AI Q&A endpoints."""
from typing import Optional, Any
from pydantic import BaseModel


class AskRequestSchema(BaseModel):
    """Question for the AI assistant.

    Blank or over-long questions are rejected by the use case so the error
    messages stay consistent with other entry points.
    """
    question: Optional[str] = None
    lang: Optional[str] = "en"
    context: Optional[Any] = None  # accepted for client compatibility, not forwarded
