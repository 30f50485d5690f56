import logging
import sys
from .settings import LOG_LEVEL
from .context import request_id_var


_LEVEL = getattr(logging, LOG_LEVEL, logging.INFO)
class ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        # Inject request_id into every record, defaulting to '-'
        record.request_id = request_id_var.get()
        return True


_FORMAT = "%(asctime)s %(levelname)s %(name)s req=%(request_id)s - %(message)s"
handler = logging.StreamHandler(sys.stdout)
handler.setFormatter(logging.Formatter(_FORMAT))
handler.addFilter(ContextFilter())

root = logging.getLogger()
root.setLevel(_LEVEL)
root.handlers = [handler]

# Route uvicorn's error and access logs through the root handler
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")
for _name in UVICORN_LOGGERS:
    _uv = logging.getLogger(_name)
    _uv.handlers = []
    _uv.propagate = True


def get_logger(name: str = "latency_server") -> logging.Logger:
    return logging.getLogger(name)


# Default module logger
logger = get_logger("latency_server")
