# src/tfdocs/core/config/errors.py
"""
Exceções canônicas da camada de configuração do tfdocs.

Este módulo define a hierarquia oficial de exceções levantadas durante a
construção, normalização e validação da configuração de flags.

As exceções aqui definidas representam **erros de entrada do usuário**,
e não falhas internas: toda combinação inválida de flags é rejeitada com
uma mensagem que nomeia a(s) flag(s) envolvida(s).

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - A validação para no primeiro conflito (sem agregação)
    - Mensagens são claras e direcionadas ao usuário da CLI

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Cada classe possui um código estável (`kind`)
    - Erros são funções determinísticas do estado de entrada

Limites explícitos:
    - Não imprime nem registra erros
    - Não realiza fallback ou recovery
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from tfdocs.core import errors as codes
from tfdocs.core.errors import ErrorPayload


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do tfdocs.

    Carrega, além da mensagem exibida ao usuário:
        - details: dados estruturados e serializáveis (ex.: flags)
        - hint: sugestão opcional de correção

    Esta hierarquia permite:
        - captura genérica de erros de configuração pela CLI
        - conversão determinística para `ErrorPayload`
    """

    kind: str = "CONFIG_ERROR"

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.hint = hint

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> ErrorPayload:
        return ErrorPayload(
            type=self.kind,
            message=self.message,
            details=dict(self.details),
            hint=self.hint,
        )


class InvalidSectionName(ConfigError):
    """
    Um nome fora do conjunto fechado de seções aparece em `--show`/`--hide`.

    Seções válidas: header, inputs, outputs, providers, requirements.
    """

    kind = codes.INVALID_SECTION_NAME


class ConflictingModeFlags(ConfigError):
    """
    `--show-all` e `--hide-all` usados juntos, ou um modo "all" combinado
    com a sua lista correspondente (`--show-all` + `--show`,
    `--hide-all` + `--hide`).
    """

    kind = codes.CONFLICTING_MODE_FLAGS


class ConflictingLegacyFlag(ConfigError):
    """
    Uma flag legada e sua equivalente atual foram ambas informadas
    explicitamente.

    Também cobre `--no-<section>` combinado com `--hide <section>`.
    O conflito é sobre *uso explícito*, não sobre o valor resultante.
    """

    kind = codes.CONFLICTING_LEGACY_FLAG


class ConflictingSortCriteria(ConfigError):
    """Os dois critérios secundários de ordenação foram pedidos ao mesmo tempo."""

    kind = codes.CONFLICTING_SORT_CRITERIA


class MissingRequiredValue(ConfigError):
    """
    Valor obrigatório ausente ou vazio.

    Casos:
        - output values habilitado sem caminho de origem
        - caminho de `--header-from` vazio
    """

    kind = codes.MISSING_REQUIRED_VALUE


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge
    da configuração bruta sobre os defaults.

    Exemplo de conflito:
        - defaults: {"sort": {"by": {"required": false}}}
        - override: {"sort": {"by": "required"}}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito

    Limites explícitos:
        - Não realiza coerção ou conversão de tipos
    """

    kind = codes.CONFIG_TYPE_CONFLICT
