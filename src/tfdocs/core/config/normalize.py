# src/tfdocs/core/config/normalize.py
"""
Normalização da configuração: reconciliação legado/atual.

Regra única de reconciliação, aplicada via tabela aos cinco pares
(sort, escape, color, required, sensitive):

    - flag atual informada explicitamente → seu valor prevalece,
      e o valor legado é ignorado
    - flag atual não informada → valor efetivo = negação do valor legado

A normalização também deriva a identidade do formatter a partir do
comando invocado e finaliza a seleção de seções (modos + cache de
visibilidade).

Invariantes:
    - Normalizar duas vezes produz o mesmo resultado
    - O rastreador de flags nunca é alterado
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .flags import ChangedFlags, Flag
from .model import Config
from .sections import Section, compute_visibility, finalize_modes

PROGRAM_PREFIX = "terraform-docs "


@dataclass(frozen=True)
class LegacyToggle:
    """
    Par de flags que representam o mesmo booleano.

    `group` e `attr` localizam o valor atual na `Config`
    (ex.: `config.settings.escape`); o espelho legado fica em
    `config.<group>.deprecated.no_<name>`.
    """

    name: str
    group: str
    attr: str

    @property
    def flag(self) -> Flag:
        return Flag(self.name)

    @property
    def legacy_flag(self) -> Flag:
        return Flag("no-" + self.name)

    @property
    def legacy_attr(self) -> str:
        return "no_" + self.name

    def current(self, config: Config) -> bool:
        return getattr(getattr(config, self.group), self.attr)

    def legacy(self, config: Config) -> bool:
        return getattr(getattr(config, self.group).deprecated, self.legacy_attr)

    def apply(self, config: Config, value: bool) -> None:
        setattr(getattr(config, self.group), self.attr, value)


SORT_TOGGLE = LegacyToggle("sort", "sort", "enabled")

SETTINGS_TOGGLES: Tuple[LegacyToggle, ...] = (
    LegacyToggle("escape", "settings", "escape"),
    LegacyToggle("color", "settings", "color"),
    LegacyToggle("required", "settings", "required"),
    LegacyToggle("sensitive", "settings", "sensitive"),
)

LEGACY_TOGGLES: Tuple[LegacyToggle, ...] = (SORT_TOGGLE,) + SETTINGS_TOGGLES


def resolve_toggle(current: bool, current_was_set: bool, legacy: bool) -> bool:
    if current_was_set:
        return current
    return not legacy


def derive_formatter(command: str) -> str:
    """Remove o nome do programa do comando invocado (ex.: "markdown table")."""
    return command.replace(PROGRAM_PREFIX, "")


def normalize(config: Config, changed: ChangedFlags, command: str) -> Config:
    """
    Normaliza a `Config` in-place e a retorna.

    Etapas:
        1. formatter ← comando sem o prefixo do programa
        2. finalização de `show_all`/`hide_all` e cache de visibilidade
        3. reconciliação dos pares legado/atual
    """
    config.formatter = derive_formatter(command)

    finalize_modes(config.sections, changed)
    compute_visibility(config.sections)

    for toggle in LEGACY_TOGGLES:
        toggle.apply(
            config,
            resolve_toggle(
                toggle.current(config),
                changed.is_set(toggle.flag),
                toggle.legacy(config),
            ),
        )

    return config


def deprecation_warnings(changed: ChangedFlags) -> List[str]:
    """Mensagens de depreciação para cada flag legada usada explicitamente."""
    messages: List[str] = []
    for section in Section:
        if changed.is_set(section.legacy_flag):
            messages.append(
                f"'--{section.legacy_flag.value}' is deprecated, "
                f"use '--hide {section.value}'"
            )
    for toggle in LEGACY_TOGGLES:
        if changed.is_set(toggle.legacy_flag):
            messages.append(
                f"'--{toggle.legacy_flag.value}' is deprecated, "
                f"use '--{toggle.name}=false'"
            )
    return messages


def effective_toggles(config: Config) -> Dict[str, bool]:
    return {toggle.name: toggle.current(config) for toggle in LEGACY_TOGGLES}
