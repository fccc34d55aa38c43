"""Content generator configuration and host environment description."""

from __future__ import annotations

import os
import platform
import sys
from dataclasses import dataclass
from importlib import metadata
from typing import Any, Dict, Optional

from .constants import DISTRIBUTION_NAME, PRODUCT_NAME

try:  # pragma: no cover - optional configuration module
    import config  # type: ignore
except ImportError:  # pragma: no cover - configuration may not exist
    config = None  # type: ignore


@dataclass(frozen=True)
class ContentGeneratorConfig:
    """Settings for talking to an OpenAI-compatible endpoint.

    ``timeout`` is expressed in milliseconds. Unset fields fall back to the
    provider defaults.
    """

    api_key: Optional[str] = None
    base_url: Optional[str] = None
    model: Optional[str] = None
    timeout: Optional[int] = None
    max_retries: Optional[int] = None


@dataclass(frozen=True)
class HostContext:
    """Tool version and process platform reported in the User-Agent."""

    version: Optional[str]
    platform: str
    arch: str
    product: str = PRODUCT_NAME

    @classmethod
    def from_environment(cls, version: Optional[str] = None) -> "HostContext":
        if version is None:
            version = _installed_version()
        return cls(
            version=version,
            platform=sys.platform,
            arch=normalize_arch(platform.machine()),
        )


# platform.machine() names mapped to the identifiers Node reports as process.arch.
ARCH_ALIASES: Dict[str, str] = {
    "x86_64": "x64",
    "amd64": "x64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "ia32",
    "i686": "ia32",
    "x86": "ia32",
    "armv7l": "arm",
    "ppc64le": "ppc64",
    "s390x": "s390x",
}


def normalize_arch(machine: str) -> str:
    return ARCH_ALIASES.get(machine.lower(), machine)


STRING_SETTINGS: Dict[str, str] = {
    "OPENAI_API_KEY": "api_key",
    "OPENAI_BASE_URL": "base_url",
    "OPENAI_MODEL": "model",
}

INTEGER_SETTINGS: Dict[str, str] = {
    "OPENAI_TIMEOUT": "timeout",
    "OPENAI_MAX_RETRIES": "max_retries",
}


def _installed_version() -> Optional[str]:
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return None


def _lookup_setting(name: str, source: Any) -> Optional[Any]:
    """Fetch a configuration value from the environment or config module.

    Returns the first match from environment or ``config.py``. Values from
    environment are always strings; values from ``config.py`` may be any type.
    """

    env_value = os.getenv(name)
    if env_value:
        return env_value

    if source is not None and hasattr(source, name):
        value = getattr(source, name)
        if value is not None:
            return value
    return None


def _to_int(name: str, raw: Any) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise RuntimeError(
            f"{name} must be an integer (env or config.py). Got: {raw!r}."
        ) from exc


def load_content_generator_config(
    config_module: Any = None,
) -> ContentGeneratorConfig:
    """Load generator settings, leaving missing ones unset.

    Each setting is read from the environment first, then from
    ``config_module``. When no module is given, a top-level ``config`` module
    importable from ``sys.path`` is consulted, whatever package it belongs to;
    pass an explicit settings object to avoid picking up an unrelated one.
    """

    source = config_module if config_module is not None else config

    values: Dict[str, Any] = {}
    for setting_name, alias in STRING_SETTINGS.items():
        raw = _lookup_setting(setting_name, source)
        values[alias] = raw if isinstance(raw, str) and raw else None

    for setting_name, alias in INTEGER_SETTINGS.items():
        raw = _lookup_setting(setting_name, source)
        values[alias] = _to_int(setting_name, raw) if raw is not None else None

    return ContentGeneratorConfig(**values)
