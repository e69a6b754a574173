from dataclasses import dataclass
from flask import jsonify


@dataclass
class ErrorResponse:
  code: str
  message: str

  def of(self):
    return jsonify({
      "error": self.message,
      "code": self.code
    })
