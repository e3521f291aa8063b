# src/tfdocs/core/config/context.py
"""
Contexto de uma resolução de configuração.

Este módulo define o `ResolutionContext`, a estrutura passada a cada etapa
da resolução (normalize → validate → extract) de uma única invocação.

O contexto consolida:
    - identidade da resolução (resolution_id, created_at)
    - o rastreador de flags explicitamente informadas (somente leitura)
    - eventos estruturados por etapa
    - warnings não fatais por etapa (ex.: uso de flags legadas)

Princípios fundamentais:
    - Isolamento por invocação (cada resolução possui seu próprio contexto)
    - Nenhum estado global compartilhado
    - Logs são eventos estruturados, não strings livres

Invariantes:
    - Eventos sempre incluem `resolution_id` e `stage`
    - Warnings são agrupados por `stage`

Limites explícitos:
    - Não imprime nada (a CLI decide como exibir eventos)
    - Não executa etapas da resolução
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List
from uuid import uuid4

from .flags import ChangedFlags


def _new_resolution_id() -> str:
    return uuid4().hex


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class ResolutionContext:
    changed: ChangedFlags = field(default_factory=ChangedFlags)
    resolution_id: str = field(default_factory=_new_resolution_id)
    created_at: str = field(default_factory=_utc_now)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, stage: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "resolution_id": self.resolution_id,
            "stage": stage,
            "level": level,
            "message": message,
            "timestamp": _utc_now(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, stage: str, message: str) -> None:
        if stage not in self.warnings:
            self.warnings[stage] = []
        self.warnings[stage].append(message)
