import logging

import structlog
from structlog.types import Processor


def setup_logging(json_logs: bool = False, log_level: str = "INFO"):
    """Configure structlog for the ledgerfees package"""

    # Leave an existing structlog setup owned by the host application alone
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        if (isinstance(handler, logging.StreamHandler) and
                isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)):
            root_logger.setLevel(log_level.upper())
            return

    timestamper = structlog.processors.TimeStamper(fmt="iso")

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        timestamper,
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        # Pretty exceptions are left to the ConsoleRenderer
        shared_processors.append(structlog.processors.format_exc_info)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    log_renderer: structlog.types.Processor
    if json_logs:
        log_renderer = structlog.processors.JSONRenderer()
    else:
        log_renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        # These run ONLY on `logging` entries that do NOT originate within
        # structlog.
        foreign_pre_chain=shared_processors,
        # These run on ALL entries after the pre_chain is done.
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            log_renderer,
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level.upper())


def get_ledgerfees_logger(name: str = "ledgerfees"):
    """Return a structlog logger; bind ``component=...`` for per-class context."""
    return structlog.stdlib.get_logger(name)


def init_logger(config):
    """
    Initialize the structured logger for the ledgerfees package.

    Args:
        config: SystemConfig with logging settings

    Returns:
        Configured structlog logger for the package
    """
    log_level = "DEBUG" if config.debug else config.log_level

    setup_logging(json_logs=config.json_logs, log_level=log_level)

    return get_ledgerfees_logger("ledgerfees")
