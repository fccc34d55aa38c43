"""Default provider for standard OpenAI-compatible APIs.

Azure-hosted endpoints are detected from the base URL and get the
deployment path, the ``api-key`` header and the ``api-version`` query
parameter they require.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Literal, Optional

from openai import OpenAI
from openai.types.chat import completion_create_params

from .constants import (
    API_VERSION_ENV,
    AZURE_DEPLOYMENTS_PATH,
    AZURE_HOST_MARKER,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
)
from .settings import ContentGeneratorConfig, HostContext

logger = logging.getLogger(__name__)

ProviderKind = Literal["default", "azure"]


def detect_provider_kind(base_url: Optional[str]) -> ProviderKind:
    if isinstance(base_url, str) and base_url and AZURE_HOST_MARKER in base_url:
        return "azure"
    return "default"


def normalize_azure_base_url(base_url: str, deployment: str) -> str:
    """Point an Azure resource URL at ``/openai/deployments/<deployment>``.

    URLs that already carry a deployments path are returned unchanged.
    """

    if AZURE_DEPLOYMENTS_PATH in base_url:
        return base_url
    trimmed = base_url[:-1] if base_url.endswith("/") else base_url
    return f"{trimmed}{AZURE_DEPLOYMENTS_PATH}{deployment}"


class DefaultOpenAICompatibleProvider:
    """Builds headers, clients and request payloads for one endpoint."""

    def __init__(self, config: ContentGeneratorConfig, host: HostContext) -> None:
        self.config = config
        self.host = host
        self.kind: ProviderKind = detect_provider_kind(config.base_url)

    def build_headers(self) -> Dict[str, str]:
        version = self.host.version or "unknown"
        user_agent = f"{self.host.product}/{version} ({self.host.platform}; {self.host.arch})"
        return {"User-Agent": user_agent}

    def effective_base_url(self) -> str:
        base_url = self.config.base_url or ""
        if self.kind == "azure":
            return normalize_azure_base_url(base_url, self.config.model or "")
        return base_url

    def build_client_options(self) -> Dict[str, Any]:
        """Return the keyword arguments :meth:`build_client` passes to ``OpenAI``."""

        api_key = self.config.api_key
        timeout = self.config.timeout if self.config.timeout is not None else DEFAULT_TIMEOUT
        max_retries = (
            self.config.max_retries
            if self.config.max_retries is not None
            else DEFAULT_MAX_RETRIES
        )

        headers = self.build_headers()
        base_url = self.effective_base_url()
        default_query: Optional[Dict[str, str]] = None

        if self.kind == "azure":
            # Bearer auth from api_key stays in place; Azure reads api-key.
            if api_key is not None:
                headers["api-key"] = api_key
            api_version = os.environ.get(API_VERSION_ENV)
            if api_version:
                default_query = {"api-version": api_version}
            logger.debug("Azure endpoint detected, base URL rewritten to %s", base_url)

        options: Dict[str, Any] = {
            "api_key": api_key,
            "base_url": base_url or None,
            # The SDK measures timeouts in seconds.
            "timeout": timeout / 1000,
            "max_retries": max_retries,
            "default_headers": headers,
        }
        if default_query:
            options["default_query"] = default_query
        return options

    def build_client(self) -> OpenAI:
        options = self.build_client_options()
        logger.debug(
            "Creating %s client for %s", self.kind, options["base_url"] or "SDK default URL"
        )
        return OpenAI(**options)

    def build_request(
        self,
        request: completion_create_params.CompletionCreateParams,
        prompt_id: str,
    ) -> completion_create_params.CompletionCreateParams:
        # Nothing to add for standard endpoints; sampling params pass through.
        return {**request}  # type: ignore[return-value]
