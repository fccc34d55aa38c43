"""Provider contract shared by OpenAI-compatible client builders."""

from __future__ import annotations

from typing import Dict, Protocol, runtime_checkable

from openai import OpenAI
from openai.types.chat import completion_create_params


@runtime_checkable
class OpenAICompatibleProvider(Protocol):
    """Interface for providers that configure an OpenAI-compatible client."""

    def build_headers(self) -> Dict[str, str]:
        """Return the default headers sent with every request."""

    def build_client(self) -> OpenAI:
        """Return a new client configured for the provider's endpoint."""

    def build_request(
        self,
        request: completion_create_params.CompletionCreateParams,
        prompt_id: str,
    ) -> completion_create_params.CompletionCreateParams:
        """Return the chat-completion payload to send for ``request``."""
