# src/crunz_config/core/config/resolver.py
"""
Resolver canônico de configuração do crunz-config.

Este módulo é responsável por produzir a configuração efetiva do processo
a partir de um `crunz.yml` opcional no diretório de trabalho.

Fluxo por chamada:
    START → LOOKUP → {PARSE_OK | PARSE_FAILED | LOOKUP_FAILED} → MERGE → DONE

Responsabilidades do módulo:
    - Localizar o arquivo via `ConfigFileLocator`
    - Delegar o parse ao `FileParser`
    - Absorver apenas as falhas de acesso ao arquivo (não encontrado,
      não legível), registrando-as em nível debug
    - Emitir exatamente um resumo em nível verbose
    - Delegar validação, merge e defaults ao `Processor`

Princípios fundamentais:
    - Sempre existe uma configuração final, mesmo sem arquivo
    - Nenhum cache entre chamadas: o caminho é recalculado e o arquivo
      relido a cada `resolve()`
    - Erros de conteúdo nunca são silenciados

Invariantes:
    - O retorno sempre valida contra a definição injetada
    - PARSE_FAILED e LOOKUP_FAILED convergem para a mesma entrada vazia
    - Uma ou duas emissões de log por chamada

Limites explícitos:
    - Não interpreta o significado das opções
    - Não busca em diretórios pais nem lê variáveis de ambiente
    - Não escreve no arquivo de configuração
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..logger import ConsoleLogger, ConsoleLoggerProtocol
from .crunz_schema import CrunzConfigurationDefinition
from .definition import ConfigurationDefinition
from .errors import (
    ConfigFileError,
    ConfigFileNotFoundError,
    ConfigFileNotReadableError,
)
from .file_parser import ConfigFileParser, FileParser
from .filesystem import Filesystem, LocalFilesystem
from .locator import ConfigFileLocator
from .processor import Processor

UNREADABLE_FALLBACK = "fallback"
UNREADABLE_RAISE = "raise"
_UNREADABLE_POLICIES = {UNREADABLE_FALLBACK, UNREADABLE_RAISE}

_DEBUG_MESSAGES = {
    ConfigFileNotFoundError.kind: "Config file not found, exception message: '{detail}'.",
    ConfigFileNotReadableError.kind: "Config file is not readable, exception message: '{detail}'.",
}

FALLBACK_MESSAGE = "Unable to find/parse config file, fallback to default values."


class ConfigurationResolver:
    """
    Orquestra lookup → parse → fallback → merge.

    Decisões arquiteturais:
        - Todos os colaboradores são injetados
        - Apenas `ConfigFileNotFoundError` e `ConfigFileNotReadableError`
          são capturados; o restante propaga sem modificação
        - A distinção entre arquivo ausente e ilegível é configurável
          via `unreadable_policy`

    Args:
        definition: Schema que expõe `get_config_tree()`.
        processor: Processador de validação/merge.
        file_parser: Parser do arquivo de configuração.
        logger: Logger com `debug` e `verbose`.
        locator: Localizador do arquivo.
        unreadable_policy: `"fallback"` (default) trata arquivo ilegível
            como ausente; `"raise"` propaga `ConfigFileNotReadableError`.
    """

    def __init__(
        self,
        definition: ConfigurationDefinition,
        processor: Processor,
        file_parser: ConfigFileParser,
        logger: ConsoleLoggerProtocol,
        locator: ConfigFileLocator,
        *,
        unreadable_policy: str = UNREADABLE_FALLBACK,
    ):
        if unreadable_policy not in _UNREADABLE_POLICIES:
            raise ValueError(
                f"unreadable_policy must be one of {sorted(_UNREADABLE_POLICIES)}, "
                f"got: {unreadable_policy!r}"
            )
        self._definition = definition
        self._processor = processor
        self._file_parser = file_parser
        self._logger = logger
        self._locator = locator
        self._unreadable_policy = unreadable_policy

    @classmethod
    def create(
        cls,
        *,
        filesystem: Optional[Filesystem] = None,
        logger: Optional[ConsoleLoggerProtocol] = None,
        definition: Optional[ConfigurationDefinition] = None,
        unreadable_policy: str = UNREADABLE_FALLBACK,
    ) -> "ConfigurationResolver":
        """Monta o resolver com as implementações padrão dos colaboradores."""
        return cls(
            definition=definition or CrunzConfigurationDefinition(),
            processor=Processor(),
            file_parser=FileParser(),
            logger=logger or ConsoleLogger(),
            locator=ConfigFileLocator(filesystem or LocalFilesystem()),
            unreadable_policy=unreadable_policy,
        )

    def resolve(self) -> Dict[str, Any]:
        """
        Resolve a configuração efetiva.

        Política de resolução:
            - Arquivo encontrado e parseado → conteúdo + defaults
            - Arquivo ausente ou ilegível → apenas defaults
            - Conteúdo inválido → erro fatal

        Returns:
            Dict[str, Any]: Configuração completa e validada.

        Raises:
            SchemaValidationError: Se o conteúdo violar o schema.
            ConfigFileParseError: Se o YAML for inválido.
            InvalidConfigRootTypeError: Se a raiz do arquivo não for um mapa.
            ConfigFileNotReadableError: Apenas com `unreadable_policy="raise"`.
        """
        parsed: Dict[str, Any] = {}
        config_file: Optional[str] = None

        try:
            path = self._locator.resolve_path()
            parsed = self._file_parser.parse(path)
            config_file = path
        except ConfigFileError as exc:
            if not self._absorbs(exc):
                raise
            self._logger.debug(_DEBUG_MESSAGES[exc.kind].format(detail=exc))

        if config_file is None:
            self._logger.verbose(FALLBACK_MESSAGE)
        else:
            self._logger.verbose(f"Using config file {config_file}.")

        return self._processor.process_configuration(self._definition, [parsed])

    # compatibilidade com o nome usado pelos consumidores do scheduler
    parse_config = resolve

    def _absorbs(self, exc: ConfigFileError) -> bool:
        if exc.kind not in _DEBUG_MESSAGES:
            return False
        if isinstance(exc, ConfigFileNotReadableError):
            return self._unreadable_policy == UNREADABLE_FALLBACK
        return True
