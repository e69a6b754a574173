import logging
import time
from functools import wraps

from flask import request
from pydantic import ValidationError

from legal_analyzer.common.exception.custom_exception import CommonException
from legal_analyzer.common.exception.error_code import ErrorCode


def parse_request(model_cls):
  def decorator(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
      json_data = request.get_json(silent=True)
      if not isinstance(json_data, dict):
        raise CommonException(ErrorCode.INVALID_JSON_FORMAT)

      try:
        model_instance = model_cls(**json_data)
      except ValidationError:
        raise CommonException(ErrorCode.FIELD_MISSING)

      return func(model_instance, *args, **kwargs)

    return wrapper

  return decorator


def measure_time(func):
  @wraps(func)
  def wrapper(*args, **kwargs):
    start_time = time.time()
    result = func(*args, **kwargs)
    logging.info(f"[{func.__name__}] elapsed: {time.time() - start_time:.4f}s")
    return result

  return wrapper


def async_measure_time(func):
  @wraps(func)
  async def wrapper(*args, **kwargs):
    start_time = time.time()
    result = await func(*args, **kwargs)
    logging.info(f"[{func.__name__}] elapsed: {time.time() - start_time:.4f}s")
    return result

  return wrapper
