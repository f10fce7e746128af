# src/crunz_config/core/config/locator.py
"""
Localização do arquivo de configuração.

Estratégia única: `<cwd>/crunz.yml`. Não há busca em diretórios pais,
nomes alternativos ou override por variável de ambiente.
"""

from __future__ import annotations

import os

from .errors import ConfigFileNotFoundError
from .filesystem import Filesystem

CONFIG_FILE_NAME = "crunz.yml"


class ConfigFileLocator:
    """Calcula o caminho candidato e verifica sua existência."""

    def __init__(self, filesystem: Filesystem, *, file_name: str = CONFIG_FILE_NAME):
        self._filesystem = filesystem
        self._file_name = file_name

    @property
    def file_name(self) -> str:
        return self._file_name

    def candidate_path(self) -> str:
        """Caminho esperado, recalculado a cada chamada."""
        return os.path.join(self._filesystem.get_cwd(), self._file_name)

    def resolve_path(self) -> str:
        """
        Retorna o caminho do arquivo de configuração, se existir.

        Raises:
            ConfigFileNotFoundError: Se não houver arquivo no caminho candidato.
        """
        path = self.candidate_path()
        if self._filesystem.file_exists(path):
            return path

        raise ConfigFileNotFoundError.for_path(path)
