import pytest

from openai_provider import settings
from openai_provider.settings import HostContext

ENV_NAMES = [
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "OPENAI_MODEL",
    "OPENAI_TIMEOUT",
    "OPENAI_MAX_RETRIES",
    "OPENAI_API_VERSION",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(settings, "config", None)


@pytest.fixture
def host():
    return HostContext(version="1.2.3", platform="linux", arch="x86_64")
