import logging
import structlog
from catalog_api.core.config import Settings, settings as default_settings


def setup_logging(settings: Settings = default_settings):
    """
    Setup structured logging with flat, readable format.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            # Flat console lines instead of JSON
            structlog.dev.ConsoleRenderer(colors=False)
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = logging.Formatter(
        '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
    )

    root_logger = logging.getLogger()
    if not any(getattr(h, "_catalog_api", False) for h in root_logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        handler._catalog_api = True
        root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, settings.log_level.upper()))

    uvicorn_logger = logging.getLogger("uvicorn")
    uvicorn_logger.setLevel(getattr(logging, settings.log_level.upper()))

    # SQL echo is only wanted when debugging
    sqlalchemy_logger = logging.getLogger("sqlalchemy.engine")
    sqlalchemy_logger.setLevel(logging.INFO if settings.log_level.upper() == "DEBUG" else logging.WARNING)

    for logger_name in ("aiosqlite", "asyncpg", "httpx"):
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    return structlog.get_logger()
