import sys

import structlog


def _stderr_logger_factory(*args: object) -> structlog.PrintLogger:
    # Resolve sys.stderr per logger so redirected streams are honoured
    return structlog.PrintLogger(file=sys.stderr)


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structured logger instance.

    Logs go to stderr; stdout carries the repository list.

    Args:
        name: Logger name

    Returns:
        Configured logger instance
    """
    from mirrorstamp.config import get_config

    config = get_config()

    level_map = {
        "ERROR": 40,
        "WARNING": 30,
        "INFO": 20,
        "DEBUG": 10,
    }
    log_level = level_map.get(config.logging.log_level, 30)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,  # Disable cache to allow level updates
    )

    return structlog.get_logger(name)
