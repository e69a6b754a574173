import asyncio
from http import HTTPStatus

from flask import Blueprint, jsonify, request

from legal_analyzer.common.decorators import parse_request
from legal_analyzer.common.exception.custom_exception import CommonException
from legal_analyzer.common.exception.error_code import ErrorCode
from legal_analyzer.schemas.analysis_request import AnalysisRequest
from legal_analyzer.services.analysis_pipeline import analyze_document_text, \
  analyze_uploaded_document

analyses = Blueprint('analyses', __name__, url_prefix="/analyze-document")


@analyses.route('', methods=['POST'])
@parse_request(AnalysisRequest)
def analyze_document(analysis_request: AnalysisRequest):
  result = asyncio.run(analyze_document_text(analysis_request.documentText))
  return jsonify(result.to_dict()), HTTPStatus.OK


@analyses.route('/file', methods=['POST'])
def analyze_document_file():
  uploaded = request.files.get("file")
  if uploaded is None or not uploaded.filename:
    raise CommonException(ErrorCode.FILE_MISSING)

  result = asyncio.run(
      analyze_uploaded_document(uploaded.read(), uploaded.filename))
  return jsonify(result.to_dict()), HTTPStatus.OK
