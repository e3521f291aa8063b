# tests/core/config/test_validate.py
"""
Testes da validação de configuração.

Este módulo valida cada ponto de entrada por grupo e a ordem fixa do
agregado `validate`, que para no primeiro conflito.

Os testes asseguram que:
- nomes de seção fora do conjunto fechado são rejeitados
- modos "all" conflitantes são rejeitados
- conflitos legado/atual dependem de uso explícito, não do valor
- output values habilitado exige caminho de origem
- critérios secundários de ordenação são mutuamente exclusivos

Limites explícitos:
    - Não valida normalização (ver test_normalize.py)
"""

import pytest

from tfdocs.core.config import (
    ConfigError,
    ConflictingLegacyFlag,
    ConflictingModeFlags,
    ConflictingSortCriteria,
    InvalidSectionName,
    MissingRequiredValue,
    Section,
    Sections,
    default_config,
    validate,
    validate_header_from,
    validate_output_values,
    validate_sections,
    validate_settings,
    validate_sort,
)
from tfdocs.core.config.model import OutputValues, Sort, SortBy


def test_default_config_is_valid(cfg, changed):
    validate(cfg, changed())


# -----------------------------
# header-from
# -----------------------------

def test_empty_header_from_is_rejected():
    with pytest.raises(MissingRequiredValue) as exc_info:
        validate_header_from("")
    assert str(exc_info.value) == "value of '--header-from' can't be empty"


def test_header_from_rejected_even_when_not_explicit(cfg, changed):
    cfg.header_from = ""
    with pytest.raises(MissingRequiredValue):
        validate(cfg, changed())


# -----------------------------
# sections
# -----------------------------

@pytest.mark.parametrize("field", ["show", "hide"])
def test_unknown_section_name_is_rejected(field, changed):
    sections = Sections(show_all=False, hide_all=False)
    setattr(sections, field, ["inputs", "resources"])
    with pytest.raises(InvalidSectionName) as exc_info:
        validate_sections(sections, changed())
    assert str(exc_info.value) == "'resources' is not a valid section"
    assert exc_info.value.details["section"] == "resources"


@pytest.mark.parametrize("section", list(Section))
def test_show_all_and_hide_all_conflict(section, changed):
    sections = Sections(show=[section.value], show_all=True, hide_all=True)
    with pytest.raises(ConflictingModeFlags) as exc_info:
        validate_sections(sections, changed("show-all", "hide-all"))
    assert "'--show-all' and '--hide-all'" in str(exc_info.value)


def test_show_all_with_show_list_conflicts(changed):
    sections = Sections(show=["inputs"], show_all=True, hide_all=False)
    with pytest.raises(ConflictingModeFlags) as exc_info:
        validate_sections(sections, changed())
    assert str(exc_info.value) == "'--show-all' and '--show' can't be used together"


def test_hide_all_with_hide_list_conflicts(changed):
    sections = Sections(hide=["inputs"], show_all=False, hide_all=True)
    with pytest.raises(ConflictingModeFlags) as exc_info:
        validate_sections(sections, changed())
    assert str(exc_info.value) == "'--hide-all' and '--hide' can't be used together"


@pytest.mark.parametrize("section", list(Section))
def test_legacy_no_section_with_hide_conflicts(section, changed):
    sections = Sections(hide=[section.value])
    with pytest.raises(ConflictingLegacyFlag) as exc_info:
        validate_sections(sections, changed(section.legacy_flag))
    assert str(exc_info.value) == (
        f"'--no-{section.value}' and '--hide {section.value}' can't be used together"
    )


def test_legacy_no_section_conflict_requires_explicit_use(changed):
    sections = Sections(hide=["header"])
    sections.deprecated.no_header = True
    validate_sections(sections, changed())


def test_legacy_no_section_with_show_is_not_checked(changed):
    sections = Sections(show=["header"], show_all=False, hide_all=True)
    validate_sections(sections, changed("no-header", "hide-all"))


# -----------------------------
# output values
# -----------------------------

def test_output_values_missing_source(changed):
    """Cenário: enabled, from vazio, `--output-values-from` nunca informado."""
    with pytest.raises(MissingRequiredValue) as exc_info:
        validate_output_values(OutputValues(enabled=True, from_=""), changed())
    assert str(exc_info.value) == "value of '--output-values-from' is missing"
    assert "can't be empty" not in str(exc_info.value)


def test_output_values_explicit_empty_source(changed):
    with pytest.raises(MissingRequiredValue) as exc_info:
        validate_output_values(
            OutputValues(enabled=True, from_=""), changed("output-values-from")
        )
    assert str(exc_info.value) == "value of '--output-values-from' can't be empty"


def test_output_values_disabled_needs_no_source(changed):
    validate_output_values(OutputValues(enabled=False, from_=""), changed())


def test_output_values_with_source_is_valid(changed):
    validate_output_values(OutputValues(enabled=True, from_="output.json"), changed())


# -----------------------------
# sort
# -----------------------------

@pytest.mark.parametrize("sort_value", [True, False])
@pytest.mark.parametrize("no_sort_value", [True, False])
def test_sort_and_no_sort_conflict_regardless_of_values(sort_value, no_sort_value, changed):
    """Cenário: `--sort` e `--no-sort` explícitos → conflito mencionando "sort"."""
    sort = Sort(enabled=sort_value)
    sort.deprecated.no_sort = no_sort_value
    with pytest.raises(ConflictingLegacyFlag) as exc_info:
        validate_sort(sort, changed("sort", "no-sort"))
    assert "sort" in str(exc_info.value)
    assert str(exc_info.value) == "'--sort' and '--no-sort' can't be used together"


def test_only_one_sort_flag_is_fine(changed):
    validate_sort(Sort(), changed("no-sort"))
    validate_sort(Sort(), changed("sort"))


def test_sort_by_required_and_type_conflict(changed):
    """Cenário: by.required e by.type simultâneos → ConflictingSortCriteria."""
    with pytest.raises(ConflictingSortCriteria) as exc_info:
        validate_sort(Sort(by=SortBy(required=True, type=True)), changed())
    assert "'--sort-by-required' and '--sort-by-type'" in str(exc_info.value)


# -----------------------------
# settings
# -----------------------------

@pytest.mark.parametrize("name", ["escape", "color", "required", "sensitive"])
def test_settings_pair_conflict(name, changed):
    with pytest.raises(ConflictingLegacyFlag) as exc_info:
        validate_settings(changed(name, f"no-{name}"))
    assert str(exc_info.value) == f"'--{name}' and '--no-{name}' can't be used together"
    assert exc_info.value.details["flags"] == [name, f"no-{name}"]


def test_settings_first_pair_in_order_is_reported(changed):
    with pytest.raises(ConflictingLegacyFlag) as exc_info:
        validate_settings(changed("sensitive", "no-sensitive", "escape", "no-escape"))
    assert "'--escape'" in str(exc_info.value)


# -----------------------------
# agregado
# -----------------------------

def test_validate_stops_at_first_failure_in_fixed_order(changed):
    cfg = default_config()
    cfg.header_from = ""
    cfg.sections.show = ["bogus"]
    cfg.sort.by = SortBy(required=True, type=True)
    with pytest.raises(MissingRequiredValue):
        validate(cfg, changed())

    cfg.header_from = "main.tf"
    with pytest.raises(InvalidSectionName):
        validate(cfg, changed())

    cfg.sections.show = []
    with pytest.raises(ConflictingSortCriteria):
        validate(cfg, changed())


def test_sections_are_checked_before_output_values(changed):
    cfg = default_config()
    cfg.sections.hide_all = True
    cfg.output_values.enabled = True
    with pytest.raises(ConflictingModeFlags):
        validate(cfg, changed())


def test_sort_is_checked_before_settings(changed):
    cfg = default_config()
    with pytest.raises(ConflictingLegacyFlag) as exc_info:
        validate(cfg, changed("sort", "no-sort", "color", "no-color"))
    assert "'--sort'" in str(exc_info.value)


def test_all_validation_errors_are_config_errors():
    for exc_type in (
        InvalidSectionName,
        ConflictingModeFlags,
        ConflictingLegacyFlag,
        ConflictingSortCriteria,
        MissingRequiredValue,
    ):
        assert issubclass(exc_type, ConfigError)
