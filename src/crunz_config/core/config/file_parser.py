# src/crunz_config/core/config/file_parser.py
"""Parser do arquivo `crunz.yml` (YAML).

Notas:
- Apenas YAML é suportado; o nome do arquivo é fixo.
- Documento vazio é interpretado como dicionário vazio.
- Falhas de acesso viram `ConfigFileError`; falhas de conteúdo são fatais.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Protocol, runtime_checkable

import yaml

from .errors import (
    ConfigFileNotFoundError,
    ConfigFileNotReadableError,
    ConfigFileParseError,
    InvalidConfigRootTypeError,
)


@runtime_checkable
class ConfigFileParser(Protocol):
    def parse(self, path: str) -> Dict[str, Any]:
        ...


class FileParser:
    """Carrega um arquivo YAML de configuração como dicionário."""

    def parse(self, path: str) -> Dict[str, Any]:
        """Lê e parseia o arquivo.

        Args:
            path: caminho absoluto do arquivo.

        Raises:
            ConfigFileNotFoundError: se o arquivo não existir.
            ConfigFileNotReadableError: se o arquivo não puder ser lido.
            ConfigFileParseError: se o YAML for inválido.
            InvalidConfigRootTypeError: se a raiz não for um mapa.
        """
        p = Path(path)
        if not p.exists():
            raise ConfigFileNotFoundError.for_path(str(p))

        if p.is_dir() or not os.access(p, os.R_OK):
            raise ConfigFileNotReadableError.for_path(str(p))

        try:
            raw = p.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            # removido entre a verificação e a leitura
            raise ConfigFileNotFoundError.for_path(str(p)) from e
        except PermissionError as e:
            raise ConfigFileNotReadableError.for_path(str(p), e.strerror) from e
        except UnicodeDecodeError as e:
            raise ConfigFileParseError(f'Unable to parse config file "{p}": {e}') from e

        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ConfigFileParseError(f'Unable to parse config file "{p}": {e}') from e

        if data is None:
            return {}

        if not isinstance(data, dict):
            raise InvalidConfigRootTypeError(
                f"Config root must be a mapping, got: {type(data).__name__}"
            )

        return data
