"""Chat-completion helper driving a provider-built client."""

from __future__ import annotations

import logging
import time
from typing import Dict, Optional

from openai import OpenAI
from openai.types.chat import completion_create_params

from .logging_utils import log_generation
from .models import GenerationResult, to_token_usage
from .types import OpenAICompatibleProvider

logger = logging.getLogger(__name__)


def generate_content(
    provider: OpenAICompatibleProvider,
    client: OpenAI,
    request: completion_create_params.CompletionCreateParams,
    prompt_id: str,
    *,
    log_path: Optional[str] = None,
) -> GenerationResult:
    """Send ``request`` through ``client`` after the provider has shaped it.

    Errors raised by the SDK propagate unchanged. When ``log_path`` is set a
    usage row is appended to that CSV file. Streaming requests are rejected
    with ``ValueError`` before anything is sent.
    """

    payload = provider.build_request(request, prompt_id)
    if payload.get("stream"):
        raise ValueError("generate_content does not support stream=True requests.")

    start_time = time.perf_counter()
    completion = client.chat.completions.create(**payload)
    duration = time.perf_counter() - start_time

    text = ""
    if completion.choices:
        text = (completion.choices[0].message.content or "").strip()

    usage = getattr(completion, "usage", None)
    tokens: Dict[str, int | None] = (
        {
            "prompt_tokens": getattr(usage, "prompt_tokens", None),
            "completion_tokens": getattr(usage, "completion_tokens", None),
            "total_tokens": getattr(usage, "total_tokens", None),
        }
        if usage
        else {}
    )
    model = payload.get("model")
    logger.debug("Prompt %s completed in %.3fs", prompt_id, duration)

    if log_path:
        log_generation(
            log_path,
            {
                "timestamp": time.strftime("%Y-%m-%d %H:%M:%S", time.localtime()),
                "prompt_id": prompt_id,
                "model": model,
                "prompt_tokens": tokens.get("prompt_tokens"),
                "completion_tokens": tokens.get("completion_tokens"),
                "total_tokens": tokens.get("total_tokens"),
                "duration_sec": round(duration, 3),
            },
        )

    return GenerationResult(
        prompt_id=prompt_id,
        model=model,
        text=text,
        usage=to_token_usage(tokens),
        duration_sec=round(duration, 3),
    )
