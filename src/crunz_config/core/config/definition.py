# src/crunz_config/core/config/definition.py
"""
Árvore declarativa de schema de configuração.

Este módulo define os nós usados para descrever as chaves reconhecidas,
seus tipos, defaults e restrições. Cada nó sabe normalizar um valor bruto
(vindo do YAML) e produzir o valor final validado.

Tipos de nó (v1):
    - ScalarNode  → str / int / float / bool
    - BooleanNode → apenas bool
    - IntegerNode → apenas int (bool é rejeitado), com limites opcionais
    - EnumNode    → valor em um conjunto fechado
    - ListNode    → lista homogênea segundo um nó protótipo
    - MappingNode → mapa de filhos nomeados, estrito por padrão

Decisões arquiteturais:
    - Sem dependências externas (ex.: Pydantic); validação explícita
    - Chave ausente com default → default (cópia profunda)
    - `None` em nó não anulável com default → default
    - Chave ausente obrigatória → erro
    - Mapas ausentes são materializados com os defaults dos filhos

Invariantes:
    - A normalização nunca muta o valor de entrada
    - Todo erro carrega o caminho pontuado da chave inválida

Limites explícitos:
    - Não lê arquivos
    - Não faz merge entre múltiplas entradas (ver `processor`)
    - Não atribui significado às opções
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol, Tuple, runtime_checkable

from .errors import SchemaValidationError


class _NoDefault:
    def __repr__(self) -> str:
        return "NO_DEFAULT"


NO_DEFAULT: Any = _NoDefault()

_SCALAR_TYPES: Tuple[type, ...] = (str, int, float, bool)


def _expect(cond: bool, msg: str, path: str) -> None:
    if not cond:
        raise SchemaValidationError(msg, path=path)


def _child_path(path: str, name: str) -> str:
    return f"{path}.{name}" if path else name


def _type_name(value: Any) -> str:
    return "null" if value is None else type(value).__name__


@dataclass(frozen=True)
class Node:
    """Base comum a todos os nós do schema."""

    name: str
    default: Any = NO_DEFAULT
    required: bool = False
    allow_null: bool = False
    info: str = ""

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT

    def default_value(self, path: str) -> Any:
        """Valor usado quando a chave está ausente."""
        _expect(self.has_default, f'The child config "{path}" must be configured.', path)
        return deepcopy(self.default)

    def normalize(self, value: Any, path: str) -> Any:
        if value is None:
            if self.allow_null:
                return None
            if self.has_default:
                return deepcopy(self.default)
            raise SchemaValidationError(
                f'Invalid type for path "{path}". Expected {self.expected()}, but got null.',
                path=path,
            )
        return self._normalize_value(value, path)

    def expected(self) -> str:
        return "a value"

    def _normalize_value(self, value: Any, path: str) -> Any:
        return value

    def _invalid_type(self, value: Any, path: str) -> SchemaValidationError:
        return SchemaValidationError(
            f'Invalid type for path "{path}". Expected {self.expected()}, '
            f"but got {_type_name(value)}.",
            path=path,
        )


@dataclass(frozen=True)
class ScalarNode(Node):
    allow_null: bool = True

    def expected(self) -> str:
        return "a scalar"

    def _normalize_value(self, value: Any, path: str) -> Any:
        if not isinstance(value, _SCALAR_TYPES):
            raise self._invalid_type(value, path)
        return value


@dataclass(frozen=True)
class BooleanNode(Node):
    def expected(self) -> str:
        return "bool"

    def _normalize_value(self, value: Any, path: str) -> Any:
        if not isinstance(value, bool):
            raise self._invalid_type(value, path)
        return value


@dataclass(frozen=True)
class IntegerNode(Node):
    min: Optional[int] = None
    max: Optional[int] = None

    def expected(self) -> str:
        return "int"

    def _normalize_value(self, value: Any, path: str) -> Any:
        if isinstance(value, bool) or not isinstance(value, int):
            raise self._invalid_type(value, path)
        _expect(
            self.min is None or value >= self.min,
            f'The value {value} is too small for path "{path}". Should be greater than or equal to {self.min}',
            path,
        )
        _expect(
            self.max is None or value <= self.max,
            f'The value {value} is too big for path "{path}". Should be less than or equal to {self.max}',
            path,
        )
        return value


@dataclass(frozen=True)
class EnumNode(Node):
    values: Tuple[Any, ...] = ()

    def expected(self) -> str:
        return "one of " + ", ".join(repr(v) for v in self.values)

    def _normalize_value(self, value: Any, path: str) -> Any:
        _expect(
            value in self.values,
            f'The value {value!r} is not allowed for path "{path}". '
            f"Permissible values: {', '.join(repr(v) for v in self.values)}",
            path,
        )
        return value


@dataclass(frozen=True)
class ListNode(Node):
    prototype: Node = field(default_factory=lambda: ScalarNode(name="item", allow_null=False))
    default: Any = field(default_factory=list)

    def expected(self) -> str:
        return "a list"

    def _normalize_value(self, value: Any, path: str) -> Any:
        if not isinstance(value, list):
            raise self._invalid_type(value, path)
        return [
            self.prototype.normalize(item, f"{path}.{i}")
            for i, item in enumerate(value)
        ]


@dataclass(frozen=True)
class MappingNode(Node):
    children: Tuple[Node, ...] = ()
    strict: bool = True

    def expected(self) -> str:
        return "a mapping"

    def child(self, name: str) -> Node:
        for node in self.children:
            if node.name == name:
                return node
        raise KeyError(name)

    def default_value(self, path: str) -> Any:
        if self.has_default:
            return deepcopy(self.default)
        _expect(not self.required, f'The child config "{path}" must be configured.', path)
        return self._normalize_value({}, path)

    def normalize(self, value: Any, path: str) -> Any:
        if value is None and not self.allow_null:
            return self.default_value(path)
        return super().normalize(value, path)

    def _normalize_value(self, value: Any, path: str) -> Any:
        if not isinstance(value, dict):
            raise self._invalid_type(value, path)

        known = {node.name for node in self.children}
        if self.strict:
            unknown = sorted(str(k) for k in value if k not in known)
            _expect(
                not unknown,
                f'Unrecognized option{"s" if len(unknown) > 1 else ""} '
                f'"{", ".join(unknown)}" under "{path}". '
                f'Available options are "{", ".join(sorted(known))}".',
                path,
            )

        result: Dict[str, Any] = {}
        for node in self.children:
            child_path = _child_path(path, node.name)
            if node.name in value:
                result[node.name] = node.normalize(value[node.name], child_path)
            elif node.has_default or isinstance(node, MappingNode):
                result[node.name] = node.default_value(child_path)
            else:
                _expect(
                    not node.required,
                    f'The child config "{node.name}" under "{path}" must be configured.',
                    child_path,
                )

        if not self.strict:
            for key, extra in value.items():
                if key not in known:
                    result[key] = deepcopy(extra)

        return result


@runtime_checkable
class ConfigurationDefinition(Protocol):
    """Contrato de uma definição de schema injetável no resolver."""

    def get_config_tree(self) -> MappingNode:
        ...
