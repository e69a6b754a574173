"""
Shared test fixtures.

Provides: Flask app and test client, a scripted fake completion client,
and zero-delay retry configuration so nothing sleeps or touches the network.
"""

import json
from contextlib import asynccontextmanager
from types import SimpleNamespace

import pytest

from config.app_config import AppConfig
from legal_analyzer import create_app


class FakeStatusError(Exception):
  """Provider error carrying an HTTP status like openai.APIStatusError."""

  def __init__(self, status_code: int, message: str = "provider error"):
    super().__init__(message)
    self.status_code = status_code


def completion(content):
  """Build an object shaped like a chat completion response."""
  message = SimpleNamespace(content=content)
  return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def analysis_json(key_terms=(), risks=(), obligations=()) -> str:
  return json.dumps({
    "keyTerms": list(key_terms),
    "risks": list(risks),
    "obligations": list(obligations),
  })


class FakeCompletions:
  """
  Scripted stand-in for ``client.chat.completions``.

  Each queued item is either a string (returned as message content) or an
  exception (raised). When the queue runs dry ``default`` is returned.
  """

  def __init__(self, responses=None, default=None):
    self.responses = list(responses or [])
    self.default = default if default is not None else analysis_json()
    self.calls = []

  async def create(self, **kwargs):
    self.calls.append(kwargs)
    item = self.responses.pop(0) if self.responses else self.default
    if isinstance(item, Exception):
      raise item
    if callable(item):
      item = item(kwargs)
    return completion(item)

  @property
  def user_messages(self):
    return [call["messages"][-1]["content"] for call in self.calls]


class FakePromptClient:
  def __init__(self, completions: FakeCompletions):
    self.chat = SimpleNamespace(completions=completions)


@pytest.fixture
def fake_completions() -> FakeCompletions:
  return FakeCompletions()


@pytest.fixture
def fake_client(fake_completions: FakeCompletions) -> FakePromptClient:
  return FakePromptClient(fake_completions)


@pytest.fixture
def patch_prompt_client(monkeypatch, fake_client):
  """Route the analysis pipeline to the fake completion client."""

  @asynccontextmanager
  async def fake_get_prompt_async_client():
    yield fake_client

  monkeypatch.setattr(
    "legal_analyzer.services.analysis_pipeline.get_prompt_async_client",
    fake_get_prompt_async_client,
  )
  return fake_client


@pytest.fixture
def no_backoff(monkeypatch):
  monkeypatch.setattr(AppConfig, "LLM_BASE_DELAY", 0.0)


@pytest.fixture
def app():
  return create_app({"TESTING": True})


@pytest.fixture
def client(app):
  return app.test_client()
