import asyncio
import logging
from http import HTTPStatus
from typing import Any, Awaitable, Callable, Coroutine, Optional

from openai import RateLimitError

from config.app_config import AppConfig
from legal_analyzer.common.exception.custom_exception import \
  BaseCustomException, CommonException
from legal_analyzer.common.exception.error_code import ErrorCode

RATE_LIMIT_MESSAGE = "Rate limit"


def is_rate_limit_error(error: Exception) -> bool:
  if isinstance(error, RateLimitError):
    return True
  if getattr(error, "status_code", None) == HTTPStatus.TOO_MANY_REQUESTS:
    return True
  return RATE_LIMIT_MESSAGE in str(error)


def backoff_delay(attempt: int, base_delay: float) -> float:
  return base_delay * 2 ** attempt


async def retry_llm_call(
    func: Callable[..., Coroutine[Any, Any, Any]],
    *args,
    max_retries: Optional[int] = None,
    base_delay: Optional[float] = None,
    sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep) -> Any:
  """Awaits ``func(*args)``, retrying failures with exponential backoff.

  Attempt ``n`` (starting at 0) that fails while ``n < max_retries`` is
  followed by a ``base_delay * 2 ** n`` second pause and attempt ``n + 1``.
  When the retries are spent the last error is raised as a
  ``CommonException``: ``LLM_RATE_LIMITED`` when it was a rate limit,
  ``LLM_REQUEST_FAILED`` otherwise.
  """
  if max_retries is None:
    max_retries = AppConfig.LLM_MAX_RETRIES
  if base_delay is None:
    base_delay = AppConfig.LLM_BASE_DELAY

  attempt = 0
  while True:
    logging.info(
        f"[retry_llm_call]: attempt {attempt + 1}/{max_retries + 1}")
    try:
      return await func(*args)

    except BaseCustomException:
      raise

    except Exception as e:
      rate_limited = is_rate_limit_error(e)

      if attempt >= max_retries:
        logging.error(
            f"[retry_llm_call]: retries exhausted after {attempt + 1} attempts: {e}")
        if rate_limited:
          raise CommonException(ErrorCode.LLM_RATE_LIMITED) from e
        raise CommonException(ErrorCode.LLM_REQUEST_FAILED) from e

      delay = backoff_delay(attempt, base_delay)
      if rate_limited:
        logging.warning(
            f"[retry_llm_call]: rate limit hit, retrying in {delay:.1f}s "
            f"({attempt + 1}/{max_retries})")
      else:
        logging.warning(
            f"[retry_llm_call]: error occurred, retrying in {delay:.1f}s "
            f"({attempt + 1}/{max_retries}) {e}")

    await sleep(delay)
    attempt += 1
