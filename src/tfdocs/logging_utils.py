# src/tfdocs/logging_utils.py
"""
Helpers de logging da CLI do tfdocs.

O core nunca imprime: ele registra eventos estruturados no
`ResolutionContext`. Este módulo configura o logger raiz a partir da
verbosidade e encaminha esses eventos para ele.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable

logger = logging.getLogger("tfdocs")

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def configure_logging(verbosity: int) -> None:
    """
    Configura o logger raiz a partir da contagem de `-v`.

    verbosity == 0 -> WARNING
    verbosity == 1 -> INFO
    verbosity >= 2 -> DEBUG
    """

    if verbosity <= 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )


def forward_events(events: Iterable[Dict[str, Any]]) -> None:
    for event in events:
        level = _LEVELS.get(str(event.get("level", "INFO")).upper(), logging.INFO)
        logger.log(level, "[%s] %s", event.get("stage"), event.get("message"))


def forward_warnings(warnings: Dict[str, list]) -> None:
    for stage, messages in warnings.items():
        for message in messages:
            logger.warning("[%s] %s", stage, message)
