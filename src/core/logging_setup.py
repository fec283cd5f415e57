"""Logging estructurado (structlog).

Por qué stderr:
- Los logs nunca se mezclan con la vista del quote, que va a stdout.
- La CLI llama a `configure_logging` una sola vez, antes de cada comando.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.typing import Processor


def _stderr_logger_factory(*_args: Any) -> structlog.PrintLogger:
    # sys.stderr se busca por logger: puede cambiar en runtime.
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(level: str = "WARNING", fmt: str = "console") -> None:
    """Configura structlog para el proceso de la CLI.

    Args:
        level: Nivel estándar (`DEBUG`, `INFO`, ...). Un nombre desconocido
            cae en `WARNING`.
        fmt: `"json"` para líneas legibles por máquina; cualquier otro valor
            usa el renderer de consola.
    """

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    processors: list[Processor] = [
        merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if fmt == "json":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )
