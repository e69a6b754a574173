from pydantic import BaseModel, field_validator


class AnalysisRequest(BaseModel):
  documentText: str

  @field_validator("documentText")
  @classmethod
  def must_not_be_blank(cls, value: str) -> str:
    if not value.strip():
      raise ValueError("documentText is blank")
    return value
