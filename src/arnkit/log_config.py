"""Configuração do logging estruturado (structlog) do arnkit."""

import logging
import sys

import structlog
from structlog.types import Processor

# Loggers do arnkit ficam pendurados em "arnkit.*" da stdlib
LOGGER_NAMESPACE = "arnkit"

SHARED_PROCESSORS: list[Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def configure_logging(verbose: bool = False) -> None:
    """
    Instala o handler da stdlib que renderiza os eventos do structlog,
    sempre em stderr para não misturar com o output dos comandos
    (json/yaml/text vão para stdout).

    WARNING por padrão; com `verbose` desce para DEBUG.
    """
    structlog.configure(
        processors=SHARED_PROCESSORS
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # botocore é bem verboso em DEBUG
    logging.getLogger("botocore").setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Logger do structlog sobre um logger da stdlib (`arnkit.<name>`).

    Não depende da configuração global do structlog: sem configure_logging,
    a stdlib descarta debug/info e nada vai para stdout.
    """
    stdlib_name = f"{LOGGER_NAMESPACE}.{name}" if name else LOGGER_NAMESPACE
    initial_values = {"component": name} if name else {}
    return structlog.wrap_logger(
        logging.getLogger(stdlib_name),
        processors=SHARED_PROCESSORS
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        **initial_values,
    )
