# src/tfdocs/core/config/validate.py
"""
Validação da configuração e detecção de uso indevido de flags.

Cada grupo possui seu próprio ponto de entrada; `validate` chama todos em
ordem fixa e propaga a primeira falha:

    header-from → sections → output values → sort → settings

Decisões arquiteturais:
    - Nenhuma agregação de múltiplos erros
    - Conflitos legado/atual dependem de *uso explícito* (rastreador de
      flags), nunca do valor resultante
    - `--no-<section>` só conflita com `--hide <section>` (a flag legada
      apenas oculta, então não há checagem contra `--show`)

Invariantes:
    - Cada chamada é independente e livre de efeitos colaterais
    - Erros são sempre subclasses de `ConfigError`
"""

from __future__ import annotations

from .errors import (
    ConflictingLegacyFlag,
    ConflictingModeFlags,
    ConflictingSortCriteria,
    InvalidSectionName,
    MissingRequiredValue,
)
from .flags import ChangedFlags, Flag
from .model import Config, OutputValues, Sort
from .normalize import SETTINGS_TOGGLES, SORT_TOGGLE, LegacyToggle
from .sections import SECTION_NAMES, Section, Sections


def validate_header_from(header_from: str) -> None:
    if header_from == "":
        raise MissingRequiredValue(
            "value of '--header-from' can't be empty",
            details={"flag": "header-from"},
        )


def validate_sections(sections: Sections, changed: ChangedFlags) -> None:
    for name in list(sections.show) + list(sections.hide):
        if name not in SECTION_NAMES:
            raise InvalidSectionName(
                f"'{name}' is not a valid section",
                details={"section": name, "valid": list(SECTION_NAMES)},
            )

    if sections.show_all and sections.hide_all:
        raise ConflictingModeFlags(
            "'--show-all' and '--hide-all' can't be used together",
            details={"flags": ["show-all", "hide-all"]},
        )
    if sections.show_all and len(sections.show) != 0:
        raise ConflictingModeFlags(
            "'--show-all' and '--show' can't be used together",
            details={"flags": ["show-all", "show"]},
        )
    if sections.hide_all and len(sections.hide) != 0:
        raise ConflictingModeFlags(
            "'--hide-all' and '--hide' can't be used together",
            details={"flags": ["hide-all", "hide"]},
        )

    for section in Section:
        if changed.is_set(section.legacy_flag) and section.value in sections.hide:
            raise ConflictingLegacyFlag(
                f"'--no-{section.value}' and '--hide {section.value}' "
                f"can't be used together",
                details={"flags": [section.legacy_flag.value, "hide"], "section": section.value},
                hint=f"'--no-{section.value}' is deprecated, keep only '--hide {section.value}'",
            )


def validate_output_values(output_values: OutputValues, changed: ChangedFlags) -> None:
    if output_values.enabled and output_values.from_ == "":
        if changed.is_set(Flag.OUTPUT_VALUES_FROM):
            raise MissingRequiredValue(
                "value of '--output-values-from' can't be empty",
                details={"flag": Flag.OUTPUT_VALUES_FROM.value},
            )
        raise MissingRequiredValue(
            "value of '--output-values-from' is missing",
            details={"flag": Flag.OUTPUT_VALUES_FROM.value},
            hint="'--output-values' requires '--output-values-from'",
        )


def _check_toggle(toggle: LegacyToggle, changed: ChangedFlags) -> None:
    if changed.is_set(toggle.flag) and changed.is_set(toggle.legacy_flag):
        raise ConflictingLegacyFlag(
            f"'--{toggle.name}' and '--no-{toggle.name}' can't be used together",
            details={"flags": [toggle.flag.value, toggle.legacy_flag.value]},
            hint=f"'--no-{toggle.name}' is deprecated, use '--{toggle.name}=false'",
        )


def validate_sort(sort: Sort, changed: ChangedFlags) -> None:
    _check_toggle(SORT_TOGGLE, changed)
    if sort.by.required and sort.by.type:
        raise ConflictingSortCriteria(
            "'--sort-by-required' and '--sort-by-type' can't be used together",
            details={"flags": ["sort-by-required", "sort-by-type"]},
        )


def validate_settings(changed: ChangedFlags) -> None:
    """Os pares legado/atual de settings dependem apenas do rastreador."""
    for toggle in SETTINGS_TOGGLES:
        _check_toggle(toggle, changed)


def validate(config: Config, changed: ChangedFlags) -> None:
    """
    Valida a configuração completa e levanta o primeiro conflito encontrado.

    Raises:
        MissingRequiredValue: header-from vazio ou output values sem origem.
        InvalidSectionName: nome de seção desconhecido.
        ConflictingModeFlags: modos "all" conflitantes.
        ConflictingLegacyFlag: flag legada e atual usadas juntas.
        ConflictingSortCriteria: dois critérios secundários de ordenação.
    """
    validate_header_from(config.header_from)
    validate_sections(config.sections, changed)
    validate_output_values(config.output_values, changed)
    validate_sort(config.sort, changed)
    validate_settings(changed)
