from typing import Any, Dict, Iterable

from legal_analyzer.schemas.analysis_response import AnalysisResult, \
  ChunkAnalysis


def merge_results(results: Iterable[Any]) -> AnalysisResult:
  # dicts keep insertion order, so they double as ordered sets
  key_terms: Dict[str, None] = {}
  risks: Dict[str, None] = {}
  obligations: Dict[str, None] = {}

  for result in results:
    analysis = ChunkAnalysis.from_response(result)
    key_terms.update(dict.fromkeys(analysis.key_terms))
    risks.update(dict.fromkeys(analysis.risks))
    obligations.update(dict.fromkeys(analysis.obligations))

  return AnalysisResult(
      key_terms=list(key_terms),
      risks=list(risks),
      obligations=list(obligations)
  )
