# src/crunz_config/core/config/errors.py
"""
Exceções canônicas da camada de configuração do crunz-config.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a localização, leitura, validação estrutural e resolução da configuração.

Duas famílias de erro coexistem:
    - falhas de acesso ao arquivo (`ConfigFileError`), um conjunto fechado
      de variantes tipadas que o resolver pode absorver
    - falhas de conteúdo (parse, tipo raiz, schema, merge), sempre fatais

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros de conteúdo são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Toda `ConfigFileError` carrega o caminho tentado e um `kind` estável

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não registra logs
"""

from typing import Optional


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração.

    Esta hierarquia permite:
        - captura genérica de erros de configuração
        - distinção clara entre falhas de arquivo e falhas de conteúdo
    """


class ConfigFileError(ConfigError):
    """
    Base do conjunto fechado de falhas de acesso ao arquivo de configuração.

    Apenas as subclasses declaradas neste módulo são válidas; o resolver
    trata cada `kind` explicitamente e nenhuma outra exceção é absorvida.

    Attributes:
        path (str): Caminho tentado.
        kind (str): Identificador estável da variante.
    """

    kind = "file_error"

    def __init__(self, message: str, *, path: str):
        super().__init__(message)
        self.path = path


class ConfigFileNotFoundError(ConfigFileError):
    """
    Exceção levantada quando o arquivo de configuração não existe
    no caminho esperado.

    Decisões arquiteturais:
        - A ausência do arquivo é esperada e recuperável
        - O resolver aplica apenas defaults quando isso ocorre
    """

    kind = "not_found"

    @classmethod
    def for_path(cls, path: str) -> "ConfigFileNotFoundError":
        return cls(f'Unable to find config file "{path}".', path=path)


class ConfigFileNotReadableError(ConfigFileError):
    """
    Exceção levantada quando o arquivo existe mas não pode ser lido
    (permissões, diretório no lugar do arquivo).
    """

    kind = "not_readable"

    @classmethod
    def for_path(
        cls, path: str, reason: Optional[str] = None
    ) -> "ConfigFileNotReadableError":
        message = f'Config file "{path}" is not readable.'
        if reason:
            message = f"{message} {reason}"
        return cls(message, path=path)


class ConfigFileParseError(ConfigError):
    """
    Exceção levantada quando o conteúdo YAML do arquivo é sintaticamente
    inválido.

    Limites explícitos:
        - Não é absorvida pelo resolver
        - Não tenta recuperar documentos parciais
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz do arquivo
    não é um dicionário (`dict`).

    Decisões arquiteturais:
        - A configuração deve ser sempre um mapa chave-valor
        - Listas ou valores escalares no root são inválidos
    """


class SchemaValidationError(ConfigError):
    """
    Exceção levantada quando o conteúdo viola o schema de configuração.

    Cobre tipos inválidos, chaves desconhecidas em mapas estritos,
    valores fora do domínio e chaves obrigatórias ausentes.

    Attributes:
        path (str): Caminho pontuado da chave inválida (ex.: `crunz.smtp.port`).
    """

    def __init__(self, message: str, *, path: str = ""):
        super().__init__(message)
        self.path = path


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Este erro indica que uma mesma chave possui tipos incompatíveis
    entre duas entradas de configuração mescladas.

    Exemplo de conflito:
        - entrada 1: {"mailer": {"transport": "smtp"}}
        - entrada 2: {"mailer": "smtp"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """
