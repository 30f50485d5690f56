import uvicorn

from .core.settings import HOST, PORT
from .main import app


def run() -> None:
    # Logging is configured in core.logging
    uvicorn.run(app, host=HOST, port=PORT, log_config=None, access_log=True)
