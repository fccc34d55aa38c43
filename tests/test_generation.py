import csv
import itertools
from types import SimpleNamespace

import pytest

from openai_provider import generation
from openai_provider.default import DefaultOpenAICompatibleProvider
from openai_provider.generation import generate_content
from openai_provider.settings import ContentGeneratorConfig


class FakeCompletions:
    def __init__(self, completion):
        self.completion = completion
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        return self.completion


def make_client(content, usage=None):
    completion = SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=usage,
    )
    completions = FakeCompletions(completion)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions)), completions


REQUEST = {
    "model": "gpt-4",
    "messages": [{"role": "user", "content": "What should I see in Paris?"}],
    "temperature": 1.0,
}


def test_request_is_sent_unchanged(host):
    provider = DefaultOpenAICompatibleProvider(ContentGeneratorConfig(), host)
    client, completions = make_client("  The Louvre.  ")

    result = generate_content(provider, client, REQUEST, "prompt-7")

    assert completions.calls == [REQUEST]
    assert result.text == "The Louvre."
    assert result.prompt_id == "prompt-7"
    assert result.model == "gpt-4"
    assert result.usage is None
    assert result.duration_sec >= 0


def test_usage_is_reported_and_logged(host, tmp_path):
    provider = DefaultOpenAICompatibleProvider(ContentGeneratorConfig(), host)
    usage = SimpleNamespace(prompt_tokens=12, completion_tokens=4, total_tokens=16)
    client, _ = make_client("ok", usage)
    log_path = tmp_path / "usage.csv"

    result = generate_content(provider, client, REQUEST, "prompt-8", log_path=str(log_path))

    assert result.usage is not None
    assert result.usage.total_tokens == 16
    with open(log_path, newline="", encoding="utf-8") as file:
        rows = list(csv.DictReader(file))
    assert len(rows) == 1
    assert rows[0]["prompt_id"] == "prompt-8"
    assert rows[0]["model"] == "gpt-4"
    assert rows[0]["prompt_tokens"] == "12"
    assert rows[0]["total_tokens"] == "16"


def test_missing_content_yields_empty_text(host):
    provider = DefaultOpenAICompatibleProvider(ContentGeneratorConfig(), host)
    client, _ = make_client(None)
    assert generate_content(provider, client, REQUEST, "prompt-9").text == ""


def test_streaming_request_is_rejected(host):
    provider = DefaultOpenAICompatibleProvider(ContentGeneratorConfig(), host)
    client, completions = make_client("unused")

    with pytest.raises(ValueError, match="stream=True"):
        generate_content(provider, client, {**REQUEST, "stream": True}, "prompt-10")

    assert completions.calls == []


def test_duration_ignores_wall_clock_steps(host, monkeypatch):
    provider = DefaultOpenAICompatibleProvider(ContentGeneratorConfig(), host)
    client, _ = make_client("ok")
    wall_clock = itertools.count(100.0, -1.0)
    monotonic = itertools.count(5.0, 0.25)
    monkeypatch.setattr(generation.time, "time", lambda: next(wall_clock))
    monkeypatch.setattr(generation.time, "perf_counter", lambda: next(monotonic))

    result = generate_content(provider, client, REQUEST, "prompt-11")

    assert result.text == "ok"
    assert result.duration_sec == 0.25
