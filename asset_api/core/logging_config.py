import logging
import sys

from asset_api.config import settings
from asset_api.core.request_context import RequestIDLogFilter

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s"


def setup_logging() -> None:
    level = logging.DEBUG if settings.APP_DEBUG else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDLogFilter())
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[handler],
    )
