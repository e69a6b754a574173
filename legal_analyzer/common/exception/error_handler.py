import traceback
import logging

from pydantic import ValidationError
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound, \
  RequestEntityTooLarge

from legal_analyzer.common.exception.custom_exception import \
  AnalysisException, CommonException
from legal_analyzer.common.exception.error_code import ErrorCode
from legal_analyzer.schemas.error_response import ErrorResponse

logger = logging.getLogger(__name__)


def error_code_response(error_code: ErrorCode):
  return ErrorResponse(error_code.code, error_code.message).of(), \
    error_code.status


def register_error_handlers(app):

  @app.errorhandler(NotFound)
  def handle_not_found_error(e: NotFound):
    logger.error(f"[NotFound]: {str(e)}")
    return error_code_response(ErrorCode.URL_NOT_FOUND)

  @app.errorhandler(MethodNotAllowed)
  def handle_method_not_allowed(e: MethodNotAllowed):
    logger.error(f"[MethodNotAllowed]: {str(e)}")
    return error_code_response(ErrorCode.METHOD_NOT_ALLOWED)

  @app.errorhandler(RequestEntityTooLarge)
  def handle_request_entity_too_large(e: RequestEntityTooLarge):
    logger.error(f"[RequestEntityTooLarge]: {str(e)}")
    return error_code_response(ErrorCode.FILE_TOO_LARGE)

  @app.errorhandler(HTTPException)
  def handle_http_exception(e: HTTPException):
    logger.error(f"[HTTPException]: {str(e)}")
    error_response = ErrorResponse(f"H{e.code}", e.description or e.name)
    return error_response.of(), e.code

  @app.errorhandler(ValidationError)
  def handle_validation_error(e: ValidationError):
    logger.error(f"[ValidationError]: {str(e)}\n{traceback.format_exc()}")
    return error_code_response(ErrorCode.REQUEST_UNMATCH)

  @app.errorhandler(AnalysisException)
  def handle_analysis_exception(e: AnalysisException):
    logger.error(f"[AnalysisException]: {str(e)}\n{traceback.format_exc()}")
    error_response = ErrorResponse(e.code, str(e))
    return error_response.of(), e.status

  @app.errorhandler(CommonException)
  def handle_common_exception(e: CommonException):
    logger.error(f"[CommonException]: {str(e)}\n{traceback.format_exc()}")
    error_response = ErrorResponse(e.code, str(e))
    return error_response.of(), e.status

  @app.errorhandler(Exception)
  def handle_unexpected_exception(e: Exception):
    logger.error(f"[Exception]: {str(e)}\n{traceback.format_exc()}")
    error_response = ErrorResponse("G999", str(e) or "Internal server error")
    return error_response.of(), 500
