# src/crunz_config/core/config/merge.py
"""
Utilitário canônico de deep-merge de configuração.

Este módulo implementa a política de deep-merge usada pelo `Processor`
para combinar, em ordem, várias entradas brutas de configuração antes da
normalização pelo schema.

Política de merge (v1):
    - dict → merge recursivo por chave
    - list → sobrescrita total (sem merge elemento a elemento)
    - escalar → sobrescrita direta
    - None → sobrescrita direta (chave declarada sem valor)
    - conflito de tipos → erro estrutural explícito

Invariantes:
    - A mesma entrada sempre produz a mesma saída
    - Nenhum input é mutado durante o processo
    - Chaves não sobrescritas são preservadas

Limites explícitos:
    - Não carrega arquivos de configuração
    - Não aplica defaults do schema
    - Não realiza coerção de tipos
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def _is_scalar(value: Any) -> bool:
    return not isinstance(value, (dict, list))


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre dois dicionários de configuração.

    Decisões arquiteturais:
        - O merge é puramente funcional (inputs não são mutados)
        - `None` em qualquer lado nunca gera conflito
        - Escalares de tipos diferentes (ex.: `False` vs `"/var/log/x.log"`)
          se sobrescrevem, já que o schema decide o tipo final
        - Conflitos estruturais (dict/list vs escalar) são falha fatal

    Args:
        base (Dict[str, Any]): Entrada anterior.
        override (Dict[str, Any]): Entrada posterior, com precedência.

    Returns:
        Dict[str, Any]: Nova configuração resultante do deep-merge.

    Raises:
        ConfigTypeConflictError: Se ocorrer conflito estrutural entre as entradas.
    """

    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requires dicts at the root, got: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    result: Dict[str, Any] = deepcopy(base)

    for key, override_value in override.items():
        if key not in result:
            result[key] = deepcopy(override_value)
            continue

        base_value = result[key]

        if base_value is None or override_value is None:
            result[key] = deepcopy(override_value)
            continue

        # dict -> merge recursivo
        if isinstance(base_value, dict) and isinstance(override_value, dict):
            result[key] = deep_merge(base_value, override_value)
            continue

        # list -> sobrescrita total
        if isinstance(base_value, list) and isinstance(override_value, list):
            result[key] = deepcopy(override_value)
            continue

        if _is_scalar(base_value) and _is_scalar(override_value):
            result[key] = override_value
            continue

        raise ConfigTypeConflictError(
            f"Type conflict on key '{key}': "
            f"{type(base_value).__name__} vs {type(override_value).__name__}"
        )

    return result
