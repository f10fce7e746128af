# src/crunz_config/core/config/processor.py
"""
Processador de configuração: merge + validação + defaults.

Este módulo recebe uma definição de schema e uma sequência de entradas
brutas (em ordem de precedência crescente) e produz a configuração final.

Política de processamento:
    1. As entradas são combinadas com `deep_merge`, a última vencendo
    2. O resultado é normalizado pela árvore raiz da definição
    3. Defaults são aplicados às chaves ausentes

Invariantes:
    - Uma lista vazia de entradas produz apenas os defaults do schema
    - Uma entrada vazia (`{}`) é sempre válida
    - Nenhuma entrada é mutada
    - Nenhuma configuração parcial é retornada em caso de erro

Limites explícitos:
    - Não lê arquivos
    - Não registra logs
    - Não captura erros de schema
"""

from __future__ import annotations

from typing import Any, Dict, Iterable

from .definition import ConfigurationDefinition
from .errors import SchemaValidationError
from .merge import deep_merge


class Processor:
    """Valida e mescla configurações segundo uma definição."""

    def process_configuration(
        self,
        definition: ConfigurationDefinition,
        configs: Iterable[Dict[str, Any]],
    ) -> Dict[str, Any]:
        """
        Processa as entradas contra a árvore de schema da definição.

        Args:
            definition: Definição que expõe `get_config_tree()`.
            configs: Entradas brutas, em ordem de precedência crescente.

        Returns:
            Dict[str, Any]: Configuração final validada e completa.

        Raises:
            SchemaValidationError: Se o conteúdo violar o schema.
            ConfigTypeConflictError: Se duas entradas conflitarem estruturalmente.
        """
        tree = definition.get_config_tree()

        merged: Dict[str, Any] = {}
        for i, config in enumerate(configs):
            if config is None:
                config = {}
            if not isinstance(config, dict):
                raise SchemaValidationError(
                    f'Invalid type for path "{tree.name}". Expected a mapping, '
                    f"but got {type(config).__name__} (input #{i}).",
                    path=tree.name,
                )
            merged = deep_merge(merged, config)

        return tree.normalize(merged, tree.name)
