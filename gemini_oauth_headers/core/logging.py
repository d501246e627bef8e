import logging

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

NOISY_HTTP_LOGGERS = (
    "httpx",
    "httpcore",
    "httpcore.http11",
    "httpcore.connection",
)


def parse_log_level(raw_level: str) -> str:
    """Normalize a configured level, tolerating trailing comments."""
    parts = raw_level.split()
    level = parts[0].upper() if parts else ""
    if level not in VALID_LOG_LEVELS:
        return "INFO"
    return level


def set_noisy_http_logger_levels(current_log_level: str) -> None:
    """Ensure HTTP client noise only surfaces at DEBUG level."""

    noisy_level = logging.DEBUG if current_log_level == "DEBUG" else logging.WARNING
    for logger_name in NOISY_HTTP_LOGGERS:
        logging.getLogger(logger_name).setLevel(noisy_level)


class CorrelationFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        # Add correlation ID if available
        correlation_id = getattr(record, "correlation_id", None)
        if correlation_id:
            record.msg = f"[{correlation_id[:8]}] {record.msg}"
        return super().format(record)


class HttpRequestLogDowngradeFilter(logging.Filter):
    """Downgrade noisy third-party HTTP logs to DEBUG."""

    def __init__(self, *prefixes: str) -> None:
        super().__init__()
        self.prefixes = prefixes

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno == logging.INFO:
            for prefix in self.prefixes:
                if record.name.startswith(prefix):
                    record.levelno = logging.DEBUG
                    record.levelname = logging.getLevelName(logging.DEBUG)
                    break
        return True


PACKAGE_LOGGER_NAME = "gemini_oauth_headers"


class FallbackStreamHandler(logging.StreamHandler):
    """Stderr handler used until the host configures logging."""


def ensure_fallback_handler(logger: logging.Logger) -> None:
    """Make INFO records of ``logger`` reach stderr when nothing else is configured.

    Does nothing if any handler exists in the logger hierarchy, so hosts that
    set up logging keep full control.
    """
    if logger.hasHandlers():
        return

    handler = FallbackStreamHandler()
    handler.setFormatter(CorrelationFormatter("%(levelname)s - %(name)s - %(message)s"))
    logger.addHandler(handler)
    if logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)


def configure_root_logging(log_level: str) -> logging.Handler:
    """Install the single stream handler on the root logger.

    Returns the installed handler so callers (and tests) can inspect it.
    """
    level = parse_log_level(log_level)

    handler = logging.StreamHandler()
    handler.addFilter(HttpRequestLogDowngradeFilter(*NOISY_HTTP_LOGGERS))
    handler.setFormatter(
        CorrelationFormatter("%(asctime)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S")
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for existing in [h for h in package_logger.handlers if isinstance(h, FallbackStreamHandler)]:
        package_logger.removeHandler(existing)
        package_logger.setLevel(logging.NOTSET)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level))

    set_noisy_http_logger_levels(level)
    logging.getLogger(__name__).debug(f"Root logging configured at {level}")
    return handler
