# src/crunz_config/core/logger.py
"""
Logger de console com níveis de verbosidade.

Este módulo define o `ConsoleLogger`, o coletor canônico de mensagens
de diagnóstico emitidas pelo core. Cada mensagem habilitada pela
verbosidade configurada é registrada como evento estruturado e escrita,
em uma linha, no stream de saída.

Níveis (ordem crescente):
    QUIET < NORMAL < VERBOSE < VERY_VERBOSE < DEBUG

Princípios fundamentais:
    - Logging é fire-and-forget: nenhum retorno é consultado
    - Eventos são estruturados e rastreáveis
    - Ausência de estado global compartilhado

Invariantes:
    - Todo evento inclui `level`, `message` e `timestamp` (UTC)
    - Mensagens acima da verbosidade configurada são descartadas

Limites explícitos:
    - Não formata cores nem marcação de terminal
    - Não persiste eventos
"""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from enum import IntEnum
from typing import Any, Dict, List, Optional, Protocol, TextIO, runtime_checkable


class Verbosity(IntEnum):
    QUIET = 16
    NORMAL = 32
    VERBOSE = 64
    VERY_VERBOSE = 128
    DEBUG = 256


@runtime_checkable
class ConsoleLoggerProtocol(Protocol):
    """Contrato mínimo consumido pelo resolver."""

    def verbose(self, message: str) -> None:
        ...

    def debug(self, message: str) -> None:
        ...


class ConsoleLogger:
    """
    Logger de console com eventos estruturados.

    Args:
        verbosity: Nível máximo emitido.
        stream: Destino das linhas; `sys.stderr` quando omitido.
    """

    def __init__(self, verbosity: Verbosity = Verbosity.NORMAL, stream: Optional[TextIO] = None):
        self.verbosity = Verbosity(verbosity)
        self._stream = stream
        self.events: List[Dict[str, Any]] = []

    def normal(self, message: str) -> None:
        self.log(Verbosity.NORMAL, message)

    def verbose(self, message: str) -> None:
        self.log(Verbosity.VERBOSE, message)

    def very_verbose(self, message: str) -> None:
        self.log(Verbosity.VERY_VERBOSE, message)

    def debug(self, message: str) -> None:
        self.log(Verbosity.DEBUG, message)

    def is_enabled(self, level: Verbosity) -> bool:
        return self.verbosity >= level

    def log(self, level: Verbosity, message: str, **extra: Any) -> None:
        if not self.is_enabled(level):
            return

        event = {
            "level": level.name.lower(),
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(f"{message}\n")

    def clear(self) -> None:
        """Descarta os eventos registrados; `events` cresce até ser limpo."""
        self.events.clear()

    def messages(self, level: Optional[Verbosity] = None) -> List[str]:
        """Mensagens registradas, opcionalmente filtradas por nível."""
        if level is None:
            return [e["message"] for e in self.events]
        name = Verbosity(level).name.lower()
        return [e["message"] for e in self.events if e["level"] == name]
