# src/tfdocs/module/options.py
"""
Opções consumidas pelo subsistema de parsing de módulos.

Estrutura de saída da projeção (`extract`): origem do header, inclusão de
output values (flag + caminho) e critérios de ordenação.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class SortBy:
    name: bool = False
    required: bool = False
    type: bool = False


@dataclass(frozen=True)
class ModuleOptions:
    header_from_file: str = "main.tf"
    show_header: bool = True
    output_values: bool = False
    output_values_path: str = ""
    sort_by: SortBy = field(default_factory=SortBy)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
