"""
structlog setup for the email router.

JSON lines in production, colored console output for local work. Log events
are snake_case names with keyword context, e.g.
``log.info("email_classified", category="Support")``.
"""

import logging
import sys

import structlog

# Third-party loggers that are chatty at INFO (one line per Gemini request)
NOISY_LOGGERS = ("httpx", "httpcore", "google_genai")


def configure_logging(log_level: str = "INFO", json_output: bool = True) -> None:
    """
    Route stdlib and structlog output to stdout.

    Args:
        log_level: DEBUG, INFO, WARNING or ERROR
        json_output: JSON renderer if True, console renderer otherwise
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_output:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Logger for a module; pass ``__name__``."""
    return structlog.get_logger(name)
