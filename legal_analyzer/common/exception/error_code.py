from enum import Enum
from http import HTTPStatus


class ErrorCode(Enum):
  # global errors
  REQUEST_UNMATCH = (HTTPStatus.BAD_REQUEST, "G001", "Request body does not match the expected schema")
  URL_NOT_FOUND = (HTTPStatus.NOT_FOUND, "G002", "Requested url does not exist")
  METHOD_NOT_ALLOWED = (HTTPStatus.METHOD_NOT_ALLOWED, "G003", "Method not allowed for this url")

  # common errors
  INVALID_JSON_FORMAT = (HTTPStatus.BAD_REQUEST, "C001", "Request body is not a JSON object")
  FIELD_MISSING = (HTTPStatus.BAD_REQUEST, "C002", "No document text provided")
  UNSUPPORTED_FILE_TYPE = (HTTPStatus.BAD_REQUEST, "C003", "Please upload a PDF, DOC, DOCX, or TXT file")
  FILE_MISSING = (HTTPStatus.BAD_REQUEST, "C004", "No file provided")
  FILE_TOO_LARGE = (HTTPStatus.REQUEST_ENTITY_TOO_LARGE, "C005", "File size must be less than the upload limit")
  FILE_FORMAT_INVALID = (HTTPStatus.BAD_REQUEST, "C006", "File is corrupted or not readable")
  NO_TEXTS_EXTRACTED = (HTTPStatus.BAD_REQUEST, "C007", "No text could be extracted from the file")

  # analysis errors
  CHUNKING_FAIL = (HTTPStatus.BAD_REQUEST, "A001", "Document text produced no chunks")
  LLM_RATE_LIMITED = (HTTPStatus.TOO_MANY_REQUESTS, "A002", "Rate limit exceeded, retries exhausted")
  LLM_REQUEST_FAILED = (HTTPStatus.BAD_GATEWAY, "A003", "Completion API request failed, retries exhausted")

  def __init__(self, status: HTTPStatus, code: str, message: str):
    self.status = status
    self.code = code
    self.message = message
