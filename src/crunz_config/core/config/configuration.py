# src/crunz_config/core/config/configuration.py
"""Acesso somente leitura à configuração resolvida.

O `Configuration` resolve uma única vez, no primeiro acesso, e expõe
valores por chave pontuada (ex.: `mailer.transport`).
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, Optional

from .resolver import ConfigurationResolver

_MISSING = object()


class Configuration:
    """Fachada de leitura sobre um `ConfigurationResolver`."""

    def __init__(self, resolver: ConfigurationResolver):
        self._resolver = resolver
        self._config: Optional[Dict[str, Any]] = None

    def _resolved(self) -> Dict[str, Any]:
        if self._config is None:
            self._config = self._resolver.resolve()
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """Retorna o valor da chave pontuada, ou `default` se ausente."""
        node: Any = self._resolved()
        for part in key.split("."):
            if not isinstance(node, dict):
                return default
            node = node.get(part, _MISSING)
            if node is _MISSING:
                return default
        return deepcopy(node)

    def has(self, key: str) -> bool:
        return self.get(key, _MISSING) is not _MISSING

    def all(self) -> Dict[str, Any]:
        return deepcopy(self._resolved())
