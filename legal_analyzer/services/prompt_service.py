import json
import logging
from typing import Any

from openai import AsyncOpenAI

from legal_analyzer.common.constants import ANALYZER_SYSTEM_PROMPT
from legal_analyzer.schemas.analysis_response import ChunkAnalysis


def clean_markdown_block(response_text: str | None) -> Any | None:
  if response_text is None:
    logging.error("[PromptService]: empty completion content")
    return None

  response_text_cleaned = response_text.strip()

  if response_text_cleaned.startswith(
      "```json") and response_text_cleaned.endswith("```"):
    response_text_cleaned = response_text_cleaned[7:-3].strip()
  elif response_text_cleaned.startswith(
      "```") and response_text_cleaned.endswith("```"):
    response_text_cleaned = response_text_cleaned[3:-3].strip()

  try:
    return json.loads(response_text_cleaned)

  except json.JSONDecodeError as e:
    logging.error(
      f"[PromptService]: jsonDecodeError: {e} | raw response: {response_text_cleaned}")
    return None


class PromptService:
  def __init__(self, deployment_name):
    self.deployment_name = deployment_name

  async def analyze_chunk(self, prompt_client: AsyncOpenAI,
      chunk: str) -> ChunkAnalysis:
    response = await prompt_client.chat.completions.create(
        model=self.deployment_name,
        messages=[
          {
            "role": "system",
            "content": ANALYZER_SYSTEM_PROMPT
          },
          {
            "role": "user",
            "content": chunk
          }
        ],
        response_format={"type": "json_object"}
    )

    if not response.choices:
      logging.error("[PromptService]: completion returned no choices")
      return ChunkAnalysis.empty()

    response_text = response.choices[0].message.content
    parsed_response = clean_markdown_block(response_text)
    if parsed_response is None:
      return ChunkAnalysis.empty()

    return ChunkAnalysis.from_response(parsed_response)
