"""Configure OpenAI-compatible chat-completion clients."""

from .default import DefaultOpenAICompatibleProvider, detect_provider_kind
from .factory import create_client, create_provider
from .settings import ContentGeneratorConfig, HostContext, load_content_generator_config
from .types import OpenAICompatibleProvider

__all__ = [
    "ContentGeneratorConfig",
    "DefaultOpenAICompatibleProvider",
    "HostContext",
    "OpenAICompatibleProvider",
    "create_client",
    "create_provider",
    "detect_provider_kind",
    "load_content_generator_config",
]
