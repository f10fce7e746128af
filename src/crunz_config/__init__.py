# src/crunz_config/__init__.py
"""
crunz-config: resolução da configuração efetiva do scheduler.

Este pacote raiz expõe o ponto de entrada público para resolver a
configuração a partir de um `crunz.yml` opcional no diretório de
trabalho, com fallback para os defaults do schema.

Arquitetura em alto nível:
    - core.config → locator, parser, schema, processor e resolver
    - core.logger → mensagens de diagnóstico com níveis de verbosidade
"""
# src/crunz_config/__init__.py
from .core.config.configuration import Configuration
from .core.config.resolver import ConfigurationResolver

__all__ = ["Configuration", "ConfigurationResolver"]
