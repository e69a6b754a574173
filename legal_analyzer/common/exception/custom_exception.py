from legal_analyzer.common.exception.error_code import ErrorCode


class BaseCustomException(Exception):

  def __init__(self, error_code: ErrorCode):
    super().__init__(error_code.message)
    self.error_code = error_code
    self.status = error_code.status
    self.code = error_code.code


class CommonException(BaseCustomException):
  pass


class AnalysisException(BaseCustomException):
  pass
