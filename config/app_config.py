import os
from dotenv import load_dotenv


load_dotenv()


class AppConfig:
  APP_ENV = os.getenv("APP_ENV", "dev")

  PROMPT_MODEL = os.getenv("PROMPT_MODEL", "gpt-4o-mini")
  OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL")

  MAX_CHUNK_LENGTH = int(os.getenv("MAX_CHUNK_LENGTH", "4000"))
  LLM_MAX_RETRIES = int(os.getenv("LLM_MAX_RETRIES", "3"))
  LLM_BASE_DELAY = float(os.getenv("LLM_BASE_DELAY", "3.0"))
  LLM_HTTP_TIMEOUT = float(os.getenv("LLM_HTTP_TIMEOUT", "60.0"))

  # sequential | concurrent
  CHUNK_DISPATCH = os.getenv("CHUNK_DISPATCH", "sequential")
  MAX_CONCURRENT_CHUNKS = int(os.getenv("MAX_CONCURRENT_CHUNKS", "5"))

  MAX_UPLOAD_SIZE = int(os.getenv("MAX_UPLOAD_SIZE", str(10 * 1024 * 1024)))
  LOG_TIMEZONE = os.getenv("LOG_TIMEZONE", "Asia/Seoul")

  @staticmethod
  def openai_api_key() -> str | None:
    return os.getenv("OPENAI_API_KEY")
