from enum import Enum


class FileType(str, Enum):
  PDF = "PDF"
  DOC = "DOC"
  DOCX = "DOCX"
  TXT = "TXT"
