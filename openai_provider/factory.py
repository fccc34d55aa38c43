"""OpenAI-compatible client factory."""

from __future__ import annotations

from typing import Optional

from openai import OpenAI

from .default import DefaultOpenAICompatibleProvider
from .settings import (
    ContentGeneratorConfig,
    HostContext,
    load_content_generator_config,
)


def create_provider(
    config: Optional[ContentGeneratorConfig] = None,
    host: Optional[HostContext] = None,
) -> DefaultOpenAICompatibleProvider:
    """Create the default provider, loading settings when none are given."""

    if config is None:
        config = load_content_generator_config()
    if host is None:
        host = HostContext.from_environment()
    return DefaultOpenAICompatibleProvider(config, host)


def create_client(
    config: Optional[ContentGeneratorConfig] = None,
    host: Optional[HostContext] = None,
) -> OpenAI:
    """Create an OpenAI client using the configured settings."""

    return create_provider(config, host).build_client()
