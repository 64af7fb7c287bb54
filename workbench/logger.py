import logging
import sys

import structlog


def setup_logger(level: str = "INFO", json: bool = True):
    log_level = getattr(logging, str(level).upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", level=log_level)

    renderer = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
    )

    return structlog.get_logger()
