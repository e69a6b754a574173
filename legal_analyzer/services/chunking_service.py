import logging
import re
from typing import List, Optional

from config.app_config import AppConfig
from legal_analyzer.common.constants import SENTENCE_BOUNDARY_PATTERN


def sentence_boundaries(text: str) -> List[int]:
  """Offsets right after each run of terminal punctuation that ends a
  sentence, followed by the end of the text."""
  boundaries = [m.end() for m in re.finditer(SENTENCE_BOUNDARY_PATTERN, text)]
  if not boundaries or boundaries[-1] != len(text):
    boundaries.append(len(text))
  return boundaries


def split_into_chunks(text: str, max_length: Optional[int] = None) -> List[str]:
  """Splits document text into sentence-aligned chunks of at most
  ``max_length`` characters.

  Sentences are accumulated greedily; a chunk is closed as soon as the next
  sentence would push it over the limit. A single sentence longer than the
  limit is never cut and becomes an oversized chunk of its own. Each chunk
  is a trimmed, contiguous slice of ``text``.
  """
  if max_length is None:
    max_length = AppConfig.MAX_CHUNK_LENGTH
  if max_length < 1:
    raise ValueError(f"max_length must be positive, got {max_length}")

  chunks: List[str] = []
  start = 0
  end = 0

  for boundary in sentence_boundaries(text):
    if not text[end:boundary].strip():
      end = boundary
      continue

    if end > start and len(text[start:boundary].strip()) > max_length:
      append_chunk_if_valid(chunks, text[start:end])
      start = end

    end = boundary

  append_chunk_if_valid(chunks, text[start:end])

  logging.info(f"[split_into_chunks]: {len(chunks)} chunks "
               f"(max_length={max_length}, text_length={len(text)})")
  return chunks


def append_chunk_if_valid(chunks: List[str], chunk: str):
  chunk = chunk.strip()
  if chunk:
    chunks.append(chunk)
