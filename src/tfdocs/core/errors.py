"""
tfdocs — Canonical Error Structures (v1)

Este módulo define o payload canônico de erro entregue à camada de CLI.
Erros de configuração são sempre erros de entrada do usuário e devem ser:

- explícitos
- serializáveis
- acionáveis

Nenhuma recuperação implícita é permitida.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do tfdocs.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta e humana, exatamente a exibida no terminal
    - details: dados estruturados relevantes (ex.: flags envolvidas)
    - hint: ação sugerida ao usuário (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Seções
INVALID_SECTION_NAME = "INVALID_SECTION_NAME"
CONFLICTING_MODE_FLAGS = "CONFLICTING_MODE_FLAGS"

# Flags legadas
CONFLICTING_LEGACY_FLAG = "CONFLICTING_LEGACY_FLAG"

# Ordenação
CONFLICTING_SORT_CRITERIA = "CONFLICTING_SORT_CRITERIA"

# Valores obrigatórios
MISSING_REQUIRED_VALUE = "MISSING_REQUIRED_VALUE"

# Estrutura da configuração bruta
CONFIG_TYPE_CONFLICT = "CONFIG_TYPE_CONFLICT"
