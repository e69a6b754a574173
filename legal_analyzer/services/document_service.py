import io
import logging
from typing import List

import docx
import fitz

from legal_analyzer.common.decorators import measure_time
from legal_analyzer.common.exception.custom_exception import CommonException
from legal_analyzer.common.exception.error_code import ErrorCode
from legal_analyzer.common.file_type import FileType


def extract_file_type(filename: str | None) -> FileType:
  if not filename or "." not in filename:
    raise CommonException(ErrorCode.UNSUPPORTED_FILE_TYPE)

  try:
    ext = filename.rsplit(".", 1)[-1].strip().upper()
    return FileType(ext)
  except ValueError:
    raise CommonException(ErrorCode.UNSUPPORTED_FILE_TYPE)


def extract_fitz_document(file_bytes: bytes) -> fitz.Document:
  try:
    return fitz.open(stream=file_bytes, filetype="pdf")
  except Exception:
    raise CommonException(ErrorCode.FILE_FORMAT_INVALID)


def extract_text_from_pdf(file_bytes: bytes) -> str:
  pages: List[str] = []

  with extract_fitz_document(file_bytes) as doc:
    for page in doc:
      text = page.get_text("text").strip()
      if text:
        pages.append(text)

  return "\n".join(pages)


def extract_text_from_docx(file_bytes: bytes) -> str:
  # legacy binary .doc files are not zip packages and fail here
  try:
    document = docx.Document(io.BytesIO(file_bytes))
  except Exception:
    raise CommonException(ErrorCode.FILE_FORMAT_INVALID)

  return "\n".join(para.text for para in document.paragraphs if para.text)


def extract_text_from_txt(file_bytes: bytes) -> str:
  return file_bytes.decode("utf-8-sig", errors="replace")


@measure_time
def extract_text(file_bytes: bytes, filename: str) -> str:
  file_type = extract_file_type(filename)

  if file_type == FileType.PDF:
    text = extract_text_from_pdf(file_bytes)
  elif file_type in (FileType.DOC, FileType.DOCX):
    text = extract_text_from_docx(file_bytes)
  else:
    text = extract_text_from_txt(file_bytes)

  if not text.strip():
    raise CommonException(ErrorCode.NO_TEXTS_EXTRACTED)

  logging.info(f"[extract_text]: {filename} ({file_type.value}) "
               f"-> {len(text)} characters")
  return text
