"""Tests for the per-chunk completion call and response parsing."""

from types import SimpleNamespace

import pytest

from legal_analyzer.common.constants import ANALYZER_SYSTEM_PROMPT
from legal_analyzer.schemas.analysis_response import ChunkAnalysis
from legal_analyzer.services.prompt_service import PromptService, \
  clean_markdown_block
from tests.conftest import analysis_json


class TestCleanMarkdownBlock:
  def test_plain_json_is_parsed(self):
    assert clean_markdown_block('{"risks": ["X"]}') == {"risks": ["X"]}

  def test_json_fence_is_stripped(self):
    text = '```json\n{"keyTerms": ["Term"]}\n```'

    assert clean_markdown_block(text) == {"keyTerms": ["Term"]}

  def test_bare_fence_is_stripped(self):
    assert clean_markdown_block('```\n{"a": 1}\n```') == {"a": 1}

  def test_invalid_json_returns_none(self):
    assert clean_markdown_block("Sure! Here are the key terms:") is None

  def test_missing_content_returns_none(self):
    assert clean_markdown_block(None) is None


class TestAnalyzeChunk:
  @pytest.mark.asyncio
  async def test_sends_system_instruction_model_and_chunk(
    self, fake_client, fake_completions
  ):
    service = PromptService("gpt-4o-mini")

    await service.analyze_chunk(fake_client, "The tenant shall pay rent.")

    call = fake_completions.calls[0]
    assert call["model"] == "gpt-4o-mini"
    assert call["messages"][0] == {
      "role": "system",
      "content": ANALYZER_SYSTEM_PROMPT,
    }
    assert call["messages"][1] == {
      "role": "user",
      "content": "The tenant shall pay rent.",
    }

  @pytest.mark.asyncio
  async def test_parses_structured_response(self, fake_client, fake_completions):
    fake_completions.responses.append(
      analysis_json(["Rent"], ["Late fee"], ["Pay monthly"]))

    result = await PromptService("m").analyze_chunk(fake_client, "chunk")

    assert result == ChunkAnalysis(
      key_terms=["Rent"], risks=["Late fee"], obligations=["Pay monthly"])

  @pytest.mark.asyncio
  async def test_unparseable_response_falls_back_to_empty(
    self, fake_client, fake_completions
  ):
    fake_completions.responses.append("I cannot produce JSON today.")

    result = await PromptService("m").analyze_chunk(fake_client, "chunk")

    assert result == ChunkAnalysis.empty()

  @pytest.mark.asyncio
  async def test_missing_fields_are_empty(self, fake_client, fake_completions):
    fake_completions.responses.append('{"keyTerms": ["Only terms"]}')

    result = await PromptService("m").analyze_chunk(fake_client, "chunk")

    assert result.key_terms == ["Only terms"]
    assert result.risks == []
    assert result.obligations == []


class TestPromptClient:
  @pytest.mark.asyncio
  async def test_client_reads_key_at_call_time_and_disables_sdk_retries(
    self, monkeypatch
  ):
    from openai import AsyncOpenAI

    from legal_analyzer.clients.openai_clients import get_prompt_async_client

    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

    async with get_prompt_async_client() as prompt_client:
      assert isinstance(prompt_client, AsyncOpenAI)
      assert prompt_client.api_key == "sk-test"
      assert prompt_client.max_retries == 0


class EmptyChoicesCompletions:
  async def create(self, **kwargs):
    return SimpleNamespace(choices=[])


class TestAnalyzeChunkEmptyChoices:
  @pytest.mark.asyncio
  async def test_empty_choices_fall_back_to_empty_analysis(self, fake_client):
    fake_client.chat.completions = EmptyChoicesCompletions()

    result = await PromptService("m").analyze_chunk(fake_client, "chunk")

    assert result == ChunkAnalysis.empty()
