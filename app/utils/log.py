import json
import logging
import datetime

from app.config.settings import settings


class StructuredLogger:

    def __init__(self, logger_name='StructuredLogger', level=None):
        self.logger = logging.getLogger(logger_name)
        self.logger.setLevel(level or settings.LOG_LEVEL.upper())

        # getLogger returns a shared instance, so only attach one handler
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter('%(message)s')
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)


    def _log(self, level, message, exc_info=None, **kwargs):
        log_entry = {
            'timestamp': datetime.datetime.now().isoformat(),
            'level': level.upper(),
            'message': message,
            **kwargs
        }
        if exc_info is not None:
            log_entry['exc_type'] = type(exc_info).__name__
        json_log = json.dumps(log_entry, default=str)
        getattr(self.logger, level)(json_log) # Invoke the method corresponding to the level


    def info(self, message, **kwargs):
        self._log('info', message, **kwargs)

    def warning(self, message, **kwargs):
        self._log('warning', message, **kwargs)

    def error(self, message, **kwargs):
        self._log('error', message, **kwargs)

    def debug(self, message, **kwargs):
        self._log('debug', message, **kwargs)

app_logger = StructuredLogger('OpsprobeLogger')
