# src/tfdocs/core/config/sections.py
"""
Seleção de seções e resolução de visibilidade.

Este módulo define o conjunto fechado de seções da documentação gerada
(header, inputs, outputs, providers, requirements) e as regras que
transformam `--show`, `--hide`, `--show-all` e `--hide-all` em um
booleano de visibilidade por seção.

A resolução acontece em dois passos separados:
    1. `finalize_modes` — deriva `show_all`/`hide_all` a partir do uso
       explícito das flags (depende do rastreador de flags)
    2. `visibility` — função pura sobre os booleanos já finalizados

Política de visibilidade (primeira regra que casa vence):
    - show_all ativo e hide_all inativo → visível, exceto se em `hide`
    - caso contrário → visível se em `show`; oculta se em `hide`;
      oculta por padrão

Invariantes:
    - Nomes de seção são strings apenas na fronteira com o binding
    - `hide` nunca é alterado pela normalização
    - O cache de visibilidade é recalculado integralmente a cada normalização

Limites explícitos:
    - Não valida nomes de seção (responsabilidade de `validate`)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Union

from .flags import ChangedFlags, Flag


class Section(str, Enum):
    """Seções independentes da documentação gerada."""

    HEADER = "header"
    INPUTS = "inputs"
    OUTPUTS = "outputs"
    PROVIDERS = "providers"
    REQUIREMENTS = "requirements"

    @property
    def legacy_flag(self) -> Flag:
        return Flag("no-" + self.value)


SECTION_NAMES = tuple(s.value for s in Section)

SectionName = Union[Section, str]


def _name(section: SectionName) -> str:
    return Section(section).value


@dataclass
class LegacySections:
    """Espelho das flags legadas `--no-<section>`."""

    no_header: bool = False
    no_inputs: bool = False
    no_outputs: bool = False
    no_providers: bool = False
    no_requirements: bool = False

    def hides(self, section: SectionName) -> bool:
        return bool(getattr(self, "no_" + _name(section)))

    def to_dict(self) -> Dict[str, Any]:
        return {"no_" + name: self.hides(name) for name in SECTION_NAMES}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LegacySections":
        return cls(**{"no_" + name: data["no_" + name] for name in SECTION_NAMES})


@dataclass
class Sections:
    """
    Seleção de seções vinda do binding de flags.

    Campos:
        - show / hide: nomes de seção na ordem em que foram informados
        - show_all / hide_all: modos globais
        - deprecated: flags legadas `--no-<section>`

    O cache `_visible` é preenchido por `compute_visibility` durante a
    normalização e lido pela projeção.
    """

    show: List[str] = field(default_factory=list)
    hide: List[str] = field(default_factory=list)
    show_all: bool = True
    hide_all: bool = False
    deprecated: LegacySections = field(default_factory=LegacySections)

    _visible: Dict[Section, bool] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def visibility(self, section: SectionName) -> bool:
        return visibility(self, section)

    def is_visible(self, section: SectionName) -> bool:
        """Retorna a visibilidade já resolvida (False antes da normalização)."""
        return self._visible.get(Section(section), False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "show": list(self.show),
            "hide": list(self.hide),
            "show_all": self.show_all,
            "hide_all": self.hide_all,
            "deprecated": self.deprecated.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Sections":
        return cls(
            show=list(data["show"]),
            hide=list(data["hide"]),
            show_all=data["show_all"],
            hide_all=data["hide_all"],
            deprecated=LegacySections.from_dict(data["deprecated"]),
        )


def visibility(sections: Sections, section: SectionName) -> bool:
    """
    Resolve a visibilidade de uma seção a partir de modos já finalizados.

    Um nome presente em `show` e em `hide` só é possível quando nenhum
    modo "all" está ativo; nesse ramo `show` vence.
    """
    name = _name(section)

    if sections.show_all and not sections.hide_all:
        return name not in sections.hide

    if name in sections.show:
        return True
    if name in sections.hide:
        return False
    return False


def finalize_modes(sections: Sections, changed: ChangedFlags) -> None:
    """
    Deriva `show_all`/`hide_all` a partir do uso explícito das flags.

    Permite que um `--show-all` explícito conviva com um hide-all implícito
    sem exigir `--hide-all=false`, e que `--hide-all` sozinho desative o
    show-all default.
    """
    if sections.hide_all and not changed.is_set(Flag.SHOW_ALL):
        sections.show_all = False
    if not sections.show_all and not changed.is_set(Flag.HIDE_ALL):
        sections.hide_all = True


def compute_visibility(sections: Sections) -> Dict[Section, bool]:
    """
    Calcula e guarda no cache a visibilidade das cinco seções.

    As flags legadas `--no-<section>` não participam do cálculo; elas só
    entram na detecção de conflito com `--hide`.
    """
    sections._visible = {section: visibility(sections, section) for section in Section}
    return dict(sections._visible)
