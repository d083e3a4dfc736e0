# src/reqlog/core/logging/
# ├─ __init__.py            # public API: setup_logging, RequestLoggerMiddleware, install_request_logging
# ├─ builder.py             # make_dict_config(settings) + setup_logging(settings)
# ├─ formatters.py          # JsonFormatter, ColorFormatter
# ├─ handlers.py            # console / access file handler factories
# └─ middleware.py          # RequestLogger + FastAPI/Starlette middleware


from .builder import setup_logging, make_dict_config
from .middleware import RequestLogger, RequestLoggerMiddleware, install_request_logging

__all__ = [
    "setup_logging",
    "make_dict_config",
    "RequestLogger",
    "RequestLoggerMiddleware",
    "install_request_logging",
]
