# src/crunz_config/core/config/filesystem.py
"""
Acesso mínimo ao filesystem usado pela resolução de configuração.

O diretório de trabalho é tratado como dependência injetada e somente
leitura, nunca como estado global consultado implicitamente. Testes
podem substituir a implementação sem tocar o filesystem real.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Protocol, Union, runtime_checkable


@runtime_checkable
class Filesystem(Protocol):
    """Contrato mínimo de filesystem consumido pelo locator."""

    def get_cwd(self) -> str:
        """Retorna o diretório de trabalho absoluto."""
        ...

    def file_exists(self, path: str) -> bool:
        """Indica se existe uma entrada no caminho informado."""
        ...


class LocalFilesystem:
    """
    Implementação sobre o filesystem local.

    Args:
        cwd: Diretório de trabalho fixo. Quando omitido, o diretório do
            processo é consultado a cada chamada de `get_cwd`.
    """

    def __init__(self, cwd: Optional[Union[str, Path]] = None):
        self._cwd = None if cwd is None else os.path.abspath(os.fspath(cwd))

    def get_cwd(self) -> str:
        if self._cwd is not None:
            return self._cwd
        return os.getcwd()

    def file_exists(self, path: str) -> bool:
        return Path(path).exists()
