# tests/conftest.py
"""
Fixtures compartilhados para testes do crunz-config.

Este módulo define fixtures reutilizáveis que fornecem:
- conteúdos YAML representativos de `crunz.yml`
- a configuração esperada quando apenas defaults se aplicam
- um filesystem em memória para testes do locator e do resolver
- um logger de console em nível debug com stream capturado

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture depende do diretório de trabalho real
    - Todas as fixtures são seguras para execução em paralelo
"""

import io

import pytest


# =====================================================
# Conteúdos de crunz.yml
# =====================================================

@pytest.fixture
def crunz_partial_yaml() -> str:
    """
    Fixture que fornece um `crunz.yml` com apenas parte das opções.

    Usado para validar que chaves presentes vêm do arquivo e as
    ausentes vêm dos defaults do schema.

    Returns:
        str: Conteúdo YAML parcial e válido.
    """
    return """\
source: app/tasks
timezone: Europe/Warsaw
log_errors: true
errors_log: /var/log/crunz-errors.log
mailer:
  transport: sendmail
  recipients:
    - ops@example.com
smtp:
  port: 2525
"""


@pytest.fixture
def crunz_invalid_type_yaml() -> str:
    """Fixture com tipo inválido para uma chave conhecida (`timezone_log`)."""
    return """\
timezone_log: "yes"
"""


@pytest.fixture
def crunz_defaults() -> dict:
    """
    Fixture que fornece a configuração resolvida a partir de entrada vazia.

    Returns:
        dict: Defaults puros do schema de `crunz.yml`.
    """
    return {
        "source": "tasks",
        "suffix": "Tasks.php",
        "timezone": None,
        "timezone_log": False,
        "errors_log": False,
        "output_log": False,
        "log_output": False,
        "log_errors": False,
        "log_ignore_empty_context": False,
        "log_allow_line_breaks": False,
        "email_output": False,
        "email_errors": False,
        "mailer": {
            "transport": "smtp",
            "recipients": [],
            "sender_name": None,
            "sender_email": None,
        },
        "smtp": {
            "host": None,
            "port": None,
            "username": None,
            "password": None,
            "encryption": None,
        },
    }


# =====================================================
# Colaboradores
# =====================================================

class _InMemoryFilesystem:
    def __init__(self, cwd: str, existing=()):
        self.cwd = cwd
        self.existing = set(existing)
        self.checked = []

    def get_cwd(self) -> str:
        return self.cwd

    def file_exists(self, path: str) -> bool:
        self.checked.append(path)
        return path in self.existing


@pytest.fixture
def memory_fs():
    """
    Fixture factory de filesystem em memória.

    Returns:
        type: Classe instanciável com `(cwd, existing=())`.
    """
    return _InMemoryFilesystem


@pytest.fixture
def debug_logger():
    """
    Fixture que fornece um `ConsoleLogger` em nível debug.

    O stream é um `StringIO`, de modo que nada é escrito no terminal
    e todos os eventos ficam disponíveis em `events`.
    """
    from crunz_config.core.logger import ConsoleLogger, Verbosity

    return ConsoleLogger(verbosity=Verbosity.DEBUG, stream=io.StringIO())
