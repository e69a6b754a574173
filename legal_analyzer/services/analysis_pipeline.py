import asyncio
import logging
from typing import List, Optional

from openai import AsyncOpenAI

from config.app_config import AppConfig
from legal_analyzer.clients.openai_clients import get_prompt_async_client
from legal_analyzer.common.constants import CONCURRENT, SEQUENTIAL
from legal_analyzer.common.decorators import async_measure_time
from legal_analyzer.common.exception.custom_exception import AnalysisException
from legal_analyzer.common.exception.error_code import ErrorCode
from legal_analyzer.containers.service_container import prompt_service
from legal_analyzer.schemas.analysis_response import AnalysisResult, \
  ChunkAnalysis
from legal_analyzer.services.chunking_service import split_into_chunks
from legal_analyzer.services.document_service import extract_text
from legal_analyzer.services.llm_retry import retry_llm_call
from legal_analyzer.services.merge_service import merge_results


@async_measure_time
async def analyze_document_text(document_text: str,
    dispatch: Optional[str] = None) -> AnalysisResult:
  dispatch = dispatch or AppConfig.CHUNK_DISPATCH
  if dispatch not in (SEQUENTIAL, CONCURRENT):
    raise ValueError(f"unknown chunk dispatch strategy: {dispatch}")

  # 1️⃣ split document into chunks
  chunks = split_into_chunks(document_text)
  if not chunks:
    raise AnalysisException(ErrorCode.CHUNKING_FAIL)
  logging.info(f"[analyze_document_text]: document split into {len(chunks)} chunks")

  # 2️⃣ analyze each chunk with retries
  async with get_prompt_async_client() as prompt_client:
    if dispatch == CONCURRENT:
      chunk_results = await analyze_chunks_concurrently(prompt_client, chunks)
    else:
      chunk_results = await analyze_chunks_sequentially(prompt_client, chunks)

  # 3️⃣ merge results from all chunks
  result = merge_results(chunk_results)
  logging.info(
      f"[analyze_document_text]: analysis completed "
      f"(keyTerms={len(result.key_terms)}, risks={len(result.risks)}, "
      f"obligations={len(result.obligations)})")
  return result


async def analyze_chunks_sequentially(prompt_client: AsyncOpenAI,
    chunks: List[str]) -> List[ChunkAnalysis]:
  results = []
  for chunk in chunks:
    results.append(await retry_llm_call(
        prompt_service.analyze_chunk, prompt_client, chunk))
  return results


async def analyze_chunks_concurrently(prompt_client: AsyncOpenAI,
    chunks: List[str]) -> List[ChunkAnalysis]:
  semaphore = asyncio.Semaphore(AppConfig.MAX_CONCURRENT_CHUNKS)

  async def analyze(chunk: str) -> ChunkAnalysis:
    async with semaphore:
      return await retry_llm_call(
          prompt_service.analyze_chunk, prompt_client, chunk)

  # every chunk runs to completion or to its retry ceiling before a failure
  # is surfaced
  results = await asyncio.gather(*(analyze(chunk) for chunk in chunks),
                                 return_exceptions=True)

  failures = [r for r in results if isinstance(r, BaseException)]
  if failures:
    logging.error(f"[analyze_chunks_concurrently]: {len(failures)}/"
                  f"{len(chunks)} chunks failed")
    raise failures[0]

  return list(results)


async def analyze_uploaded_document(file_bytes: bytes,
    filename: str) -> AnalysisResult:
  document_text = extract_text(file_bytes, filename)
  return await analyze_document_text(document_text)
