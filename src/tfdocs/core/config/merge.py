# src/tfdocs/core/config/merge.py
"""
Utilitário canônico de deep-merge de configuração.

Este módulo implementa a política de deep-merge usada para aplicar os
valores brutos do binding de flags sobre o mapa de defaults da
configuração.

Política de merge (v1):
    - dict → merge recursivo por chave
    - list → sobrescrita total (sem merge elemento a elemento)
    - escalar → sobrescrita direta
    - conflito de tipos → erro estrutural explícito

Invariantes:
    - Nenhum input é mutado durante o processo
    - A mesma entrada sempre produz a mesma saída
    - Conflitos estruturais interrompem o merge

Limites explícitos:
    - Não valida semântica das flags
    - Não realiza coerção de tipos
"""

from copy import deepcopy
from typing import Any, Dict, Mapping

from .errors import ConfigTypeConflictError


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre dois mapas de configuração.

    Args:
        base: Configuração base (ex.: `default_config().to_dict()`).
        override: Valores explícitos vindos do binding.

    Returns:
        Novo dicionário resultante do deep-merge.

    Raises:
        ConfigTypeConflictError: Se uma chave possuir tipos incompatíveis.
    """

    if not isinstance(base, Mapping) or not isinstance(override, Mapping):
        raise ConfigTypeConflictError(
            f"deep-merge requires mappings at the root, got: "
            f"{type(base).__name__} vs {type(override).__name__}",
            details={"base": type(base).__name__, "override": type(override).__name__},
        )

    result: Dict[str, Any] = deepcopy(dict(base))

    for key, override_value in override.items():
        if key not in result:
            result[key] = deepcopy(override_value)
            continue

        base_value = result[key]

        # dict -> merge recursivo
        if isinstance(base_value, Mapping) and isinstance(override_value, Mapping):
            result[key] = deep_merge(base_value, override_value)
            continue

        # list -> sobrescrita total
        if isinstance(base_value, list) and isinstance(override_value, (list, tuple)):
            result[key] = list(deepcopy(override_value))
            continue

        # conflito de tipo
        if type(base_value) is not type(override_value):
            raise ConfigTypeConflictError(
                f"type conflict for key '{key}': "
                f"{type(base_value).__name__} vs {type(override_value).__name__}",
                details={
                    "key": key,
                    "expected": type(base_value).__name__,
                    "received": type(override_value).__name__,
                },
            )

        # escalar -> sobrescrita
        result[key] = deepcopy(override_value)

    return result
