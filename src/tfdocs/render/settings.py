# src/tfdocs/render/settings.py
"""
Settings consumidos pelo subsistema de renderização.

Estrutura de saída da projeção (`extract`): visibilidade por seção,
inclusão de output values, critérios de ordenação e opções de exibição.
Os defaults refletem um renderizador sem nenhuma flag aplicada.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class RenderSettings:
    show_header: bool = True
    show_inputs: bool = True
    show_outputs: bool = True
    show_providers: bool = True
    show_requirements: bool = True

    output_values: bool = False

    sort_by_name: bool = False
    sort_by_required: bool = False
    sort_by_type: bool = False

    escape_characters: bool = True
    indent_level: int = 2
    show_color: bool = True
    show_required: bool = True
    show_sensitivity: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
