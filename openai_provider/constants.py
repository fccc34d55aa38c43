"""Shared constants for OpenAI-compatible client construction."""

from __future__ import annotations

# Request timeout in milliseconds.
DEFAULT_TIMEOUT = 120000
DEFAULT_MAX_RETRIES = 3

PRODUCT_NAME = "QwenCode"
DISTRIBUTION_NAME = "openai-provider"

AZURE_HOST_MARKER = ".azure.com"
AZURE_DEPLOYMENTS_PATH = "/openai/deployments/"
API_VERSION_ENV = "OPENAI_API_VERSION"
