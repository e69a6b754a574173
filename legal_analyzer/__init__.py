import datetime
import logging
import sys

import pytz
from flask import Flask
from flask_cors import CORS

from config.app_config import AppConfig
from legal_analyzer.blueprints.analysis import analysis_blueprint
from legal_analyzer.blueprints.common import healthcheck_blueprint
from legal_analyzer.common.constants import CORS_ALLOW_HEADERS
from legal_analyzer.common.exception.error_handler import \
  register_error_handlers


class TimezoneFormatter(logging.Formatter):
  def __init__(self, *args, timezone: str = AppConfig.LOG_TIMEZONE, **kwargs):
    super().__init__(*args, **kwargs)
    self.timezone = pytz.timezone(timezone)

  def formatTime(self, record, datefmt = None):
    dt = datetime.datetime.fromtimestamp(record.created, self.timezone)
    return dt.strftime(datefmt or "%Y-%m-%d %H:%M:%S")

def configure_logging():
  handler = logging.StreamHandler(sys.stdout)
  handler.setFormatter(TimezoneFormatter(
      fmt="%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
      datefmt="%Y-%m-%d %H:%M:%S"
  ))

  logging.basicConfig(
      level=logging.INFO,
      handlers=[handler],
      force=True
  )
  logging.getLogger('werkzeug').disabled = True


def create_app(config_overrides: dict | None = None):
  configure_logging()

  app = Flask(__name__)

  # environment
  app.config["APP_ENV"] = AppConfig.APP_ENV
  app.config["MAX_CONTENT_LENGTH"] = AppConfig.MAX_UPLOAD_SIZE
  if config_overrides:
    app.config.update(config_overrides)

  CORS(app, origins="*", send_wildcard=True,
       allow_headers=CORS_ALLOW_HEADERS)

  # error handlers
  register_error_handlers(app)

  # blueprints
  app.register_blueprint(healthcheck_blueprint.health)
  app.register_blueprint(analysis_blueprint.analyses)

  return app
