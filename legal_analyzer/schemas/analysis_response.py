import json
from dataclasses import dataclass, field
from typing import Any, Dict, List

from legal_analyzer.common.constants import KEY_TERMS, OBLIGATIONS, RISKS


def _coerce_items(value: Any) -> List[str]:
  """Keeps what a model put in one array field as a list of strings.

  Absent or non-list values yield nothing; nested objects are kept as their
  canonical JSON text so equal objects still collapse during the merge.
  """
  if not isinstance(value, list):
    return []

  items = []
  for item in value:
    if item is None:
      continue
    if isinstance(item, str):
      items.append(item)
    else:
      items.append(json.dumps(item, ensure_ascii=False, sort_keys=True))
  return items


@dataclass
class ChunkAnalysis:
  key_terms: List[str] = field(default_factory=list)
  risks: List[str] = field(default_factory=list)
  obligations: List[str] = field(default_factory=list)

  @staticmethod
  def empty() -> "ChunkAnalysis":
    return ChunkAnalysis()

  @staticmethod
  def from_response(value: Any) -> "ChunkAnalysis":
    if isinstance(value, ChunkAnalysis):
      return value
    if not isinstance(value, dict):
      return ChunkAnalysis.empty()

    return ChunkAnalysis(
        key_terms=_coerce_items(value.get(KEY_TERMS)),
        risks=_coerce_items(value.get(RISKS)),
        obligations=_coerce_items(value.get(OBLIGATIONS))
    )


@dataclass
class AnalysisResult:
  key_terms: List[str] = field(default_factory=list)
  risks: List[str] = field(default_factory=list)
  obligations: List[str] = field(default_factory=list)

  def to_dict(self) -> Dict[str, List[str]]:
    return {
      KEY_TERMS: list(self.key_terms),
      RISKS: list(self.risks),
      OBLIGATIONS: list(self.obligations)
    }
