"""Pydantic models describing generation results."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class TokenUsage(BaseModel):
    """Token accounting metadata returned by the endpoint."""

    prompt_tokens: Optional[int] = Field(
        None, description="Tokens consumed by the prompt portion of the request."
    )
    completion_tokens: Optional[int] = Field(
        None, description="Tokens generated in the completion response."
    )
    total_tokens: Optional[int] = Field(
        None, description="Total tokens counted for the request."
    )


class GenerationResult(BaseModel):
    """Outcome of a single chat-completion call."""

    prompt_id: str = Field(..., description="Caller-supplied correlation identifier.")
    model: Optional[str] = Field(None, description="Model named in the request payload.")
    text: str = Field(..., description="Content of the first choice, stripped.")
    usage: Optional[TokenUsage] = Field(
        None, description="Token usage metrics reported by the endpoint."
    )
    duration_sec: float = Field(..., description="Time taken by the request in seconds.")


def to_token_usage(payload: Dict[str, Any] | None) -> Optional[TokenUsage]:
    """Convert a usage dictionary into a :class:`TokenUsage` instance."""

    if not payload:
        return None
    return TokenUsage(**payload)
