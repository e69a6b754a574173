import logging
from contextlib import asynccontextmanager

import httpx
from openai import AsyncOpenAI

from config.app_config import AppConfig


@asynccontextmanager
async def get_prompt_async_client():
  httpx_client = httpx.AsyncClient(
      timeout=httpx.Timeout(timeout=AppConfig.LLM_HTTP_TIMEOUT, connect=30.0),
      http2=False
  )
  async with httpx_client:
    # retries are owned by retry_llm_call, not the SDK
    async with AsyncOpenAI(
        # a missing key surfaces as an authentication error from the API
        api_key=AppConfig.openai_api_key() or "",
        base_url=AppConfig.OPENAI_BASE_URL,
        max_retries=0,
        http_client=httpx_client
    ) as client:
      logging.debug(f"[get_prompt_async_client]: model={prompt_deployment_name}")
      yield client

prompt_deployment_name = AppConfig.PROMPT_MODEL
